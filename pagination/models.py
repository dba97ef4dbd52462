#!/usr/bin/env python3
"""Request options and result envelope for paginated queries."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _lenient_int(v: Any) -> Optional[int]:
    """parseInt-style coercion: "3" -> 3, "3.7" -> 3, junk -> None."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v)
    text = str(v).strip()
    sign = ""
    if text[:1] in ("-", "+"):
        sign, text = text[0], text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    if not digits:
        return None
    return int(sign + digits)


class PaginateOptions(BaseModel):
    """Options for one pagination call. Accepts camelCase or snake_case keys."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sort_by: Optional[str] = Field(default=None, alias="sortBy")
    page: Optional[int] = None
    limit: Optional[int] = None
    select: Optional[str] = Field(default=None, alias="fields")
    populate: Optional[str] = None
    alias: Union[str, Dict[str, str], None] = None
    aggregation: Optional[List[Dict[str, Any]]] = None
    shuffle: bool = Field(default=False, alias="isShuffleRecord")
    # Apply `alias` to find-mode results too (otherwise only aggregation results are aliased)
    alias_find_results: bool = Field(default=False, alias="aliasFindResults")

    @field_validator("page", "limit", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return _lenient_int(v)


class QueryResult(BaseModel):
    results: List[Dict[str, Any]]
    page: int
    limit: int
    totalPages: int
    totalResults: int
