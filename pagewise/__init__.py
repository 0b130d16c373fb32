from .pages import (
    InvalidPageNumber,
    InvalidPageSize,
    InvalidRecordNumber,
    NoMorePages,
    Page,
    PageCursor,
    PaginatedCollection,
    PaginationError,
    to_paginated_collection,
)
from .sources import SequenceAdapter

__version__ = '0.1.0'
