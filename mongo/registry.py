#!/usr/bin/env python3
"""
Collection registry - relations used by populate and field metadata used by
the document transform.
"""

from typing import Any, Dict, Optional

from engine.schema import DocumentSchema

# ---- Relation registry: collection -> reference field -> how to resolve it
# {"author": {"target": "users", "foreignField": "_id"}}
REL: Dict[str, Dict[str, dict]] = {}

# ---- Field metadata: collection -> dotted path -> options ({"private": True})
FIELDS: Dict[str, Dict[str, dict]] = {}


def register_collection(
    collection: str,
    relations: Optional[Dict[str, dict]] = None,
    fields: Optional[Dict[str, dict]] = None,
) -> None:
    """Add (or extend) the relations and field options of a collection."""
    for path, rel in (relations or {}).items():
        if "target" not in rel:
            raise ValueError(f"Relation '{collection}.{path}' is missing 'target'")
        REL.setdefault(collection, {})[path] = {"foreignField": "_id", **rel}
    if fields:
        FIELDS.setdefault(collection, {}).update(fields)


def relation_for(collection: str, path: str) -> Optional[Dict[str, Any]]:
    if collection not in REL:
        return None
    return REL[collection].get(path)


def schema_for(collection: str) -> DocumentSchema:
    return DocumentSchema.from_mapping(FIELDS.get(collection))


def clear_registry() -> None:
    REL.clear()
    FIELDS.clear()
