import logging
from collections.abc import Mapping

import click
import httpx
import tabulate

from .http import HTTPError
from .pages import PaginatedCollection, PaginationError
from .repl import ReplSyntaxError, parse_args
from .sources import FORMATS, SourceError, load_records
from .utils.introspect import get_properties, is_collection

HELP = """\
This is the REPL, and the following commands are available.

list                     List records in the current page
next                     Go forward one page, and list
prev                     Go backward one page, and list
first                    Go to the first page, and list
last                     Go to the last page, and list
page <n>                 Go to page <n>, and list
record <n>               Go to the page holding record <n>, and list
size <n>                 Change the page size to <n>, back to page 1
info                     Show record and page counts
quit                     Leave the REPL"""


def record_fields(record):
    if isinstance(record, Mapping) or not is_collection(record):
        if props := get_properties(record):
            return props
        return {'record': record}

    return {'record': ', '.join(map(str, record))}


def format_page(pages, page):
    fields = [record_fields(record) for record in page]

    headers = ['#']
    for f in fields:
        headers.extend(k for k in f if k not in headers)

    rows = [(i, *(f.get(k, '') for k in headers[1:]))
            for i, f in enumerate(fields, start=pages.current_offset + 1)]

    return (tabulate.tabulate(rows, headers=headers) +
            f"\n(Page {pages.current_page_no}/{pages.total_pages})")


def int_arg(args, name):
    if len(args) < 2:
        raise click.UsageError(f"Missing argument <{name}>")

    try:
        return int(args[1])
    except ValueError:
        raise click.UsageError(f"{args[1]!r} is not an integer value") from None


def run_repl(pages):
    while True:
        try:
            line = input('> ')
        except EOFError:
            break

        try:
            args = parse_args(line)
            if len(args) < 1:
                continue

            match args[0]:
                case 'help':
                    click.echo(HELP)
                    continue
                case 'quit' | 'exit':
                    break
                case 'info':
                    click.echo(f"{pages.record_count} records, {pages.total_pages} pages "
                               f"of {pages.page_size}; on page {pages.current_page_no}")
                    continue
                case 'list':
                    page = pages.current_page()
                case 'next':
                    page = pages.next_page()
                case 'prev':
                    page = pages.previous_page()
                case 'first':
                    page = pages.first_page()
                case 'last':
                    page = pages.last_page()
                case 'page':
                    page = pages.go_to_page_no(int_arg(args, 'n'))
                case 'record':
                    page = pages.go_to_page_of_record_no(int_arg(args, 'n'))
                case 'size':
                    pages.change_page_capacity(int_arg(args, 'n'))
                    page = pages.current_page()
                case wrong_cmd:
                    click.echo(f"ERROR: Not a valid command {wrong_cmd}; try again.", err=True)
                    continue
        except (PaginationError, ReplSyntaxError, click.UsageError) as e:
            click.echo(f"ERROR: {e}", err=True)
            continue

        click.echo(format_page(pages, page))


@click.command(context_settings={'auto_envvar_prefix': 'PAGEWISE'})
@click.argument('location')
@click.option('-n', '--page-size', type=click.IntRange(min=1), default=25, show_default=True,
              help="Records per page.")
@click.option('-f', '--format', 'fmt', type=click.Choice(FORMATS),
              help="Record format; guessed from the extension if omitted.")
@click.option('--progress/--no-progress', default=True,
              help="Show a progress bar while downloading.")
@click.option('-v', '--verbose', is_flag=True, help="Log debug messages.")
def main(location, page_size, fmt, progress, verbose):
    """Page through the records of LOCATION, a file path or an HTTP(S) URL."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        records = load_records(location, fmt, progress=progress)
    except (SourceError, HTTPError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e

    pages = PaginatedCollection(records, page_size)
    click.echo(f"{pages.record_count} records in {pages.total_pages} pages; "
               "type 'help' for commands.")
    run_repl(pages)


if __name__ == "__main__":
    main()
