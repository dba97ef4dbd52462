#!/usr/bin/env python3
"""Parse ``sortBy`` directives (``key:desc,other:asc``) into an ordered sort spec."""

from typing import Dict, Optional

from mongo.constants import CREATED_AT_FIELD

ASCENDING = 1
DESCENDING = -1


class InvalidSortError(ValueError):
    """Raised when a sort directive has an empty key."""


def parse_sort_by(sort_by: Optional[str]) -> Dict[str, int]:
    """Return ``{field: 1|-1}`` in priority order.

    ``date`` maps to the creation timestamp. Any direction other than ``desc``
    is ascending. Without a directive, newest documents come first.
    """
    if not sort_by:
        return {CREATED_AT_FIELD: DESCENDING}

    sort: Dict[str, int] = {}
    for option in sort_by.split(","):
        key, _, order = option.partition(":")
        key = key.strip()
        if not key:
            raise InvalidSortError(f'Invalid field "{key}" passed to sort()')
        direction = DESCENDING if order.strip() == "desc" else ASCENDING
        if key == "date":
            key = CREATED_AT_FIELD
        sort[key] = direction
    return sort
