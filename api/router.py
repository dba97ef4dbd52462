#!/usr/bin/env python3
"""
Collection Endpoints

Paginated listing and single-document reads for any registered collection.
"""

from fastapi import APIRouter, HTTPException, Depends, Query, Request
from typing import Annotated, Optional, Dict, Any
from bson import ObjectId
import logging

from engine.transform import DocumentTransformer, ToJSONOptions
from mongo.client import MongoDocumentStore, mongo_connection
from mongo.registry import schema_for
from mongo.constants import ID_FIELD
from pagination.models import PaginateOptions, QueryResult
from pagination.paginator import Paginator
from pagination.sort import InvalidSortError
from pagination.store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["collections"])

# Query parameters consumed by the paginator; anything else is an equality filter
LIST_PARAMS = {"page", "limit", "sortBy", "fields", "populate", "alias", "shuffle"}


def _stringify_ids(value: Any) -> Any:
    """Convert ObjectId values (at any depth) to strings for JSON output"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _stringify_ids(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_ids(v) for v in value]
    return value


async def get_store(collection: str) -> DocumentStore:
    """Document store for the collection named in the path"""
    if not mongo_connection.connected:
        await mongo_connection.connect()
    return MongoDocumentStore(mongo_connection, collection)


@router.get("/collections/{collection}", response_model=QueryResult)
async def list_documents(
    collection: str,
    request: Request,
    store: Annotated[DocumentStore, Depends(get_store)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sortBy: Optional[str] = None,
    fields: Optional[str] = None,
    populate: Optional[str] = None,
    alias: Optional[str] = None,
    shuffle: bool = False,
):
    """
    List documents of a collection, one page at a time.

    - page=-1 returns every matching document as a single page
    - sortBy: "key:desc,other:asc" (`date` sorts by creation time)
    - populate: "author:name,email;tags"
    - any other parameter filters by equality, e.g. ?status=active
    """
    filter = {k: v for k, v in request.query_params.items() if k not in LIST_PARAMS}

    options = PaginateOptions(
        sort_by=sortBy,
        page=page,
        limit=limit,
        select=fields,
        populate=populate,
        alias=alias,
        shuffle=shuffle,
    )
    try:
        result = await Paginator(store).paginate(filter, options)
    except InvalidSortError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result.results = [_stringify_ids(doc) for doc in result.results]
    return result


@router.get("/collections/{collection}/{document_id}")
async def get_document(
    collection: str,
    document_id: str,
    store: Annotated[DocumentStore, Depends(get_store)],
    alias: Optional[str] = None,
    includeTimeStamps: bool = Query(False),
) -> Dict[str, Any]:
    """Fetch one document and serialize it (private fields removed, aliases applied)."""
    key: Any = ObjectId(document_id) if ObjectId.is_valid(document_id) else document_id
    docs = await store.find({ID_FIELD: key}, {}, 0, 1)
    if not docs:
        raise HTTPException(status_code=404, detail=f"Document '{document_id}' not found in '{collection}'")

    transformer = DocumentTransformer(schema_for(collection))
    result = transformer(docs[0], ToJSONOptions(alias=alias, include_timestamps=includeTimeStamps))
    return _stringify_ids(result)
