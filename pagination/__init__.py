"""Paginated queries over a document store."""

from pagination.models import PaginateOptions, QueryResult
from pagination.paginator import Paginator, paginate
from pagination.sort import InvalidSortError, parse_sort_by
from pagination.store import DocumentStore

__all__ = [
    "PaginateOptions",
    "QueryResult",
    "Paginator",
    "paginate",
    "InvalidSortError",
    "parse_sort_by",
    "DocumentStore",
]
