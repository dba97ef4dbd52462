#!/usr/bin/env python3
"""
Paginated queries over a DocumentStore.

Two modes, picked by whether the options carry an aggregation pipeline:

- find: count + filtered/sorted/paged fetch (with optional projection and
  populate plan), issued concurrently
- aggregation: the caller's pipeline + sort/skip/limit stages, and the same
  pipeline + ``$count`` for the total, issued concurrently

``page=-1`` fetches everything and reports it as a single page.
"""

import asyncio
import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from engine.alias import apply_alias
from engine.populate import build_populate_plan
from mongo.constants import DEFAULT_LIMIT, ID_FIELD
from pagination.models import PaginateOptions, QueryResult
from pagination.sort import parse_sort_by
from pagination.store import DocumentStore

logger = logging.getLogger(__name__)

GET_ALL_PAGE = -1
COUNT_FIELD = "totalResults"


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: Optional[int]  # None = unbounded
    skip: int

    @property
    def get_all(self) -> bool:
        return self.page == GET_ALL_PAGE

    def total_pages(self, total_results: int) -> int:
        if self.get_all:
            return 1
        return math.ceil(total_results / self.limit)


def compute_window(page: Optional[int], limit: Optional[int]) -> PageWindow:
    if page == GET_ALL_PAGE:
        return PageWindow(page=GET_ALL_PAGE, limit=None, skip=0)
    page = page if page and page > 0 else 1
    limit = limit if limit and limit > 0 else DEFAULT_LIMIT
    return PageWindow(page=page, limit=limit, skip=(page - 1) * limit)


def build_result(results: List[Dict[str, Any]], total_results: int, window: PageWindow) -> QueryResult:
    return QueryResult(
        results=results,
        page=1 if window.get_all else window.page,
        limit=total_results if window.get_all else window.limit,
        totalPages=window.total_pages(total_results),
        totalResults=total_results,
    )


def rename_identity(document: Dict[str, Any]) -> Dict[str, Any]:
    if ID_FIELD in document:
        document["id"] = document.pop(ID_FIELD)
    return document


class Paginator:
    """Runs paginated queries against one store.

    ``rng`` drives record shuffling; pass a seeded ``random.Random`` for
    reproducible order.
    """

    def __init__(self, store: DocumentStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()

    async def paginate(
        self,
        filter: Optional[Dict[str, Any]] = None,
        options: Union[PaginateOptions, Dict[str, Any], None] = None,
    ) -> QueryResult:
        if options is None:
            options = PaginateOptions()
        elif not isinstance(options, PaginateOptions):
            options = PaginateOptions.model_validate(options)

        # Raises InvalidSortError before touching the store
        sort = parse_sort_by(options.sort_by)
        window = compute_window(options.page, options.limit)

        if options.aggregation:
            logger.debug(f"paginate: aggregation mode, {len(options.aggregation)} stages, page={window.page}")
            return await self._paginate_aggregation(options, sort, window)

        logger.debug(f"paginate: find mode, page={window.page}, limit={window.limit}")
        return await self._paginate_find(filter or {}, options, sort, window)

    def _shuffle(self, results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        self.rng.shuffle(results)
        return results

    async def _paginate_find(
        self,
        filter: Dict[str, Any],
        options: PaginateOptions,
        sort: Dict[str, int],
        window: PageWindow,
    ) -> QueryResult:
        projection = [f.strip() for f in options.select.split(",") if f.strip()] if options.select else None
        plan = build_populate_plan(options.populate) or None

        total_results, results = await asyncio.gather(
            self.store.count(filter),
            self.store.find(filter, sort, window.skip, window.limit, projection, plan),
        )
        results = list(results)

        if options.shuffle:
            self._shuffle(results)

        for doc in results:
            if options.alias_find_results and options.alias:
                apply_alias(doc, options.alias)
            rename_identity(doc)

        return build_result(results, total_results, window)

    async def _paginate_aggregation(
        self,
        options: PaginateOptions,
        sort: Dict[str, int],
        window: PageWindow,
    ) -> QueryResult:
        pipeline = list(options.aggregation)
        data_pipeline = pipeline + [{"$sort": dict(sort)}]
        if window.skip:
            data_pipeline.append({"$skip": window.skip})
        if window.limit is not None:
            data_pipeline.append({"$limit": window.limit})
        count_pipeline = pipeline + [{"$count": COUNT_FIELD}]

        count_result, results = await asyncio.gather(
            self.store.aggregate(count_pipeline),
            self.store.aggregate(data_pipeline),
        )
        total_results = count_result[0][COUNT_FIELD] if count_result else 0
        results = list(results)

        if options.shuffle:
            self._shuffle(results)

        for doc in results:
            if options.alias:
                apply_alias(doc, options.alias)
            rename_identity(doc)

        return build_result(results, total_results, window)


async def paginate(
    store: DocumentStore,
    filter: Optional[Dict[str, Any]] = None,
    options: Union[PaginateOptions, Dict[str, Any], None] = None,
    rng: Optional[random.Random] = None,
) -> QueryResult:
    return await Paginator(store, rng=rng).paginate(filter, options)
