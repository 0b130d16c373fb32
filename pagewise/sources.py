import csv
import io
import itertools
import json
import logging
import os.path
from collections.abc import Iterator, Sequence, Sized
from typing import Any, List, Tuple

from .http import fetch_text
from .utils.introspect import to_iterable

logger = logging.getLogger(__name__)

FORMATS = ('lines', 'csv', 'json')


class SourceError(Exception):
    pass


class SequenceAdapter:
    """Count and offset-based slicing over a finite, re-iterable source."""

    def __init__(self, source):
        if isinstance(source, Iterator):
            raise TypeError(f"{type(source).__name__} can only be iterated once; "
                            "materialize it (e.g. with list()) first")

        self.source = source
        self._count = None

    def count(self) -> int:
        if self._count is None:
            if isinstance(self.source, Sized):
                self._count = len(self.source)
            else:
                self._count = sum(1 for _ in self.source)

        return self._count

    def slice(self, offset: int, length: int) -> Tuple[Any, ...]:
        """At most `length` records starting at `offset`; fewer at the tail."""
        if offset < 0 or length < 0:
            raise ValueError(f"Invalid slice {offset}+{length}")

        if isinstance(self.source, Sequence):
            return tuple(self.source[offset:offset + length])
        else:
            return tuple(itertools.islice(self.source, offset, offset + length))


def guess_format(location: str) -> str:
    match os.path.splitext(location.split('?', 1)[0])[1].lower():
        case '.csv':
            return 'csv'
        case '.json':
            return 'json'
        case _:
            return 'lines'


def parse_records(text: str, fmt: str = 'lines') -> List[Any]:
    match fmt:
        case 'lines':
            return [line for line in text.splitlines() if line.strip()]
        case 'csv':
            try:
                return list(csv.DictReader(io.StringIO(text)))
            except csv.Error as e:
                raise SourceError(f"Malformed CSV: {e}") from e
        case 'json':
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise SourceError(f"Malformed JSON: {e}") from e

            # A top-level object is a single record, not a collection of keys
            if isinstance(data, dict):
                return [data]

            records, _ = to_iterable(data)
            return list(records)
        case _:
            raise SourceError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")


def is_url(location: str) -> bool:
    return location.startswith(('http://', 'https://'))


def load_records(location: str, fmt: str = None, **fetch_args) -> List[Any]:
    """Read records from a local path or an HTTP(S) URL."""
    fmt = fmt or guess_format(location)

    if is_url(location):
        text = fetch_text(location, **fetch_args)
    else:
        try:
            with open(location, encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            raise SourceError(f"Cannot read {location}: {e.strerror}") from e
        except UnicodeDecodeError as e:
            raise SourceError(f"Cannot decode {location} as UTF-8: {e.reason} "
                              f"at byte {e.start}") from e

    records = parse_records(text, fmt)
    logger.info("Loaded %d %s records from %s", len(records), fmt, location)
    return records
