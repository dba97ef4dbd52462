#!/usr/bin/env python3
"""Strip fields flagged private in the schema metadata."""

from typing import Any, Dict, Mapping, Union

from engine.accessor import delete_value
from engine.schema import DocumentSchema


def strip_private_fields(
    document: Dict[str, Any],
    schema: Union[DocumentSchema, Mapping[str, Any], None],
) -> Dict[str, Any]:
    """Delete every private path from ``document`` (in place) and return it.

    Array intermediates are handled by ``delete_value``, so ``items.secret``
    is removed from every element of ``items``.
    """
    if schema is None:
        return document
    if not isinstance(schema, DocumentSchema):
        schema = DocumentSchema.from_mapping(schema)

    for path in schema.private_paths():
        delete_value(document, path)
    return document
