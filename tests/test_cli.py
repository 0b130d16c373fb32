import json

import pytest
from click.testing import CliRunner

from pagewise.__main__ import main


@pytest.fixture
def numbers(tmp_path):
    path = tmp_path / 'numbers.txt'
    path.write_text('\n'.join(str(n) for n in range(1, 11)))
    return str(path)


def run(*args, input=None):
    return CliRunner().invoke(main, list(args), input=input)


def test_summary_on_start(numbers):
    result = run(numbers, '--page-size', '3', input='')

    assert result.exit_code == 0
    assert '10 records in 4 pages' in result.output


def test_navigation(numbers):
    result = run(numbers, '-n', '3', input='next\nlast\nrecord 5\n')

    assert result.exit_code == 0
    assert '(Page 2/4)' in result.output
    assert '(Page 4/4)' in result.output
    assert result.output.count('(Page 2/4)') == 2


def test_errors_do_not_end_the_session(numbers):
    result = run(numbers, '-n', '3', input='prev\npage 9\npage x\nbogus\nlist\n')

    assert result.exit_code == 0
    assert 'ERROR: No previous page' in result.output
    assert 'ERROR: Page 9 out of bounds (1-4)' in result.output
    assert "'x' is not an integer value" in result.output
    assert 'Not a valid command bogus' in result.output
    assert '(Page 1/4)' in result.output


def test_size_resets_to_first_page(numbers):
    result = run(numbers, '-n', '3', input='last\nsize 4\ninfo\n')

    assert '(Page 1/3)' in result.output
    assert '10 records, 3 pages of 4; on page 1' in result.output


def test_quit_stops_reading(numbers):
    result = run(numbers, input='quit\nnext\n')

    assert result.exit_code == 0
    assert '(Page' not in result.output


def test_structured_records_become_columns(tmp_path):
    path = tmp_path / 'people.json'
    path.write_text(json.dumps([{'name': 'ada', 'born': 1815}, {'name': 'grace', 'born': 1906}]))

    result = run(str(path), input='list\n')

    header = next(line for line in result.output.splitlines() if 'name' in line)
    assert 'born' in header
    assert 'grace' in result.output


def test_page_size_from_environment(numbers):
    result = CliRunner().invoke(main, [numbers], input='', env={'PAGEWISE_PAGE_SIZE': '5'})

    assert '10 records in 2 pages' in result.output


def test_invalid_page_size_option(numbers):
    result = run(numbers, '-n', '0')

    assert result.exit_code == 2


def test_missing_file(tmp_path):
    result = run(str(tmp_path / 'nope.txt'))

    assert result.exit_code == 1
    assert 'Cannot read' in result.output


def test_undecodable_file(tmp_path):
    path = tmp_path / 'latin1.txt'
    path.write_bytes('café\n'.encode('latin-1'))

    result = run(str(path))

    assert result.exit_code == 1
    assert 'Cannot decode' in result.output
