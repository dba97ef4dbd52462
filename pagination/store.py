#!/usr/bin/env python3
"""
The document store the paginator talks to.

Implementations own connections, timeouts and retries; the paginator only
awaits these calls and lets their exceptions through.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from engine.populate import PopulateNode


@runtime_checkable
class DocumentStore(Protocol):

    async def count(self, filter: Dict[str, Any]) -> int:
        ...

    async def find(
        self,
        filter: Dict[str, Any],
        sort: Dict[str, int],
        skip: int,
        limit: Optional[int],
        projection: Optional[List[str]] = None,
        populate: Optional[List[PopulateNode]] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch matching documents. ``limit=None`` means no limit."""
        ...

    async def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        ...
