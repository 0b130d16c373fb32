import logging
import operator
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

from .sources import SequenceAdapter

logger = logging.getLogger(__name__)

Page = Tuple[Any, ...]


class PaginationError(Exception):
    pass


class InvalidPageSize(PaginationError, ValueError):
    def __init__(self, page_size):
        self.page_size = page_size

        super().__init__(f"Page size must be at least 1, got {page_size}")


class InvalidPageNumber(PaginationError, IndexError):
    def __init__(self, page_no, total_pages):
        self.page_no = page_no
        self.total_pages = total_pages

        super().__init__(f"Page {page_no} out of bounds (1-{total_pages})")


class InvalidRecordNumber(PaginationError, IndexError):
    def __init__(self, record_no, record_count):
        self.record_no = record_no
        self.record_count = record_count

        super().__init__(f"Record {record_no} out of bounds (1-{record_count})")


class NoMorePages(PaginationError):
    def __init__(self, direction):
        self.direction = direction

        super().__init__(f"No {direction} page")


def _validate_page_size(page_size) -> int:
    page_size = operator.index(page_size)
    if page_size < 1:
        raise InvalidPageSize(page_size)

    return page_size


@dataclass
class PageCursor:
    """Page size and 1-based page number; all mutation goes through here."""
    page_size: int
    page_no: int = 1

    def __post_init__(self):
        self.page_size = _validate_page_size(self.page_size)

    def resize(self, page_size: int):
        self.page_size = _validate_page_size(page_size)
        self.page_no = 1

    def check(self, page_no, total_pages) -> int:
        page_no = operator.index(page_no)
        if not 1 <= page_no <= total_pages:
            raise InvalidPageNumber(page_no, total_pages)

        return page_no

    def move_to(self, page_no: int, total_pages: int):
        self.page_no = self.check(page_no, total_pages)

    def span(self, page_no: int) -> Tuple[int, int]:
        start = self.page_size * (page_no - 1)
        return start, start + self.page_size


class PaginatedCollection:
    """
    Fixed-size pages over a finite, re-iterable sequence with a page cursor.

    Pages are re-derived from the source on every access; nothing is cached
    apart from the record count.
    """

    def __init__(self, source: Iterable[Any], page_size: int = 25):
        self._adapter = SequenceAdapter(source)
        self._cursor = PageCursor(page_size)

    def __repr__(self):
        return (f'{type(self).__name__}(page_size={self.page_size}, '
                f'current_page_no={self.current_page_no})')

    @property
    def source(self):
        return self._adapter.source

    @property
    def page_size(self) -> int:
        return self._cursor.page_size

    @property
    def current_page_no(self) -> int:
        return self._cursor.page_no

    @property
    def record_count(self) -> int:
        return self._adapter.count()

    @property
    def total_pages(self) -> int:
        # Ceiling division
        return -(-self.record_count // self.page_size)

    @property
    def current_offset(self) -> int:
        return self._cursor.span(self.current_page_no)[0]

    @property
    def has_next_page(self) -> bool:
        return self.current_page_no < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page_no > 1

    def __len__(self):
        return self.total_pages

    def __getitem__(self, page_no) -> Page:
        return self.page(page_no)

    def __iter__(self) -> Iterator[Page]:
        return self.browse()

    def page(self, page_no: int) -> Page:
        """Return page `page_no` without moving the cursor."""
        page_no = self._cursor.check(page_no, self.total_pages)
        start, stop = self._cursor.span(page_no)

        return self._adapter.slice(start, stop - start)

    def go_to_page_no(self, page_no: int) -> Page:
        try:
            page = self.page(page_no)
        except InvalidPageNumber:
            logger.debug("Rejected move to page %s of %d", page_no, self.total_pages)
            raise

        self._cursor.move_to(page_no, self.total_pages)
        logger.debug("Moved to page %d of %d", self.current_page_no, self.total_pages)
        return page

    def current_page(self) -> Page:
        return self.go_to_page_no(self.current_page_no)

    def next_page(self) -> Page:
        """Advance one page; raises NoMorePages at the last page."""
        if not self.has_next_page:
            raise NoMorePages('next')

        return self.go_to_page_no(self.current_page_no + 1)

    def previous_page(self) -> Page:
        """Go back one page; raises NoMorePages at the first page."""
        if not self.has_previous_page:
            raise NoMorePages('previous')

        return self.go_to_page_no(self.current_page_no - 1)

    def first_page(self) -> Page:
        return self.go_to_page_no(1)

    def last_page(self) -> Page:
        return self.go_to_page_no(self.total_pages)

    def go_to_page_of_record_no(self, record_no: int) -> Page:
        """Move to the page holding the 1-based record `record_no`."""
        record_no = operator.index(record_no)
        if not 1 <= record_no <= self.record_count:
            raise InvalidRecordNumber(record_no, self.record_count)

        return self.go_to_page_no(-(-record_no // self.page_size))

    def change_page_capacity(self, page_size: int):
        self._cursor.resize(page_size)
        logger.debug("Page size changed to %d (%d pages)", self.page_size, self.total_pages)

    def browse(self) -> Iterator[Page]:
        """Lazily yield every page in order, leaving the cursor alone.

        The partition is fixed when iteration starts; a later capacity
        change does not affect a traversal already under way.
        """
        page_size, total_pages = self.page_size, self.total_pages

        for start in range(0, page_size * total_pages, page_size):
            yield self._adapter.slice(start, page_size)


def to_paginated_collection(source: Iterable[Any], page_size: int) -> PaginatedCollection:
    return PaginatedCollection(source, page_size)
