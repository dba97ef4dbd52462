#!/usr/bin/env python3
"""
Document transform used when serializing a single document.

Order matters: private fields are stripped before aliases run, so an alias
can never copy a private value out under a new name.
"""

from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from engine.alias import AliasSpec, apply_alias
from engine.privacy import strip_private_fields
from engine.schema import DocumentSchema
from mongo.constants import CREATED_AT_FIELD, UPDATED_AT_FIELD

# Keys never exposed in serialized output
HIDDEN_KEYS = ("_id", "__v", "password")


class ToJSONOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    include_timestamps: bool = Field(default=False, alias="includeTimeStamps")
    alias: Union[str, Dict[str, str], None] = None


TransformHook = Callable[[Dict[str, Any], ToJSONOptions], Optional[Dict[str, Any]]]


class DocumentTransformer:
    """Reshapes a document for output: privacy, identity, timestamps, aliases.

    ``chain`` is an earlier transform to hand the result to; whatever it
    returns becomes the output.
    """

    def __init__(self, schema: Union[DocumentSchema, Dict[str, Any], None] = None, chain: Optional[TransformHook] = None):
        if schema is not None and not isinstance(schema, DocumentSchema):
            schema = DocumentSchema.from_mapping(schema)
        self.schema = schema
        self.chain = chain

    def __call__(self, document: Dict[str, Any], options: Union[ToJSONOptions, Dict[str, Any], None] = None) -> Optional[Dict[str, Any]]:
        if options is None:
            options = ToJSONOptions()
        elif not isinstance(options, ToJSONOptions):
            options = ToJSONOptions.model_validate(options)

        strip_private_fields(document, self.schema)

        if document.get("_id") is not None:
            document["id"] = str(document["_id"])

        if not options.include_timestamps:
            document.pop(CREATED_AT_FIELD, None)
            document.pop(UPDATED_AT_FIELD, None)

        for key in HIDDEN_KEYS:
            document.pop(key, None)

        if options.alias:
            apply_alias(document, options.alias, colon_renames=True)

        if self.chain is not None:
            return self.chain(document, options)
        return document


def to_json(
    document: Dict[str, Any],
    schema: Union[DocumentSchema, Dict[str, Any], None] = None,
    options: Union[ToJSONOptions, Dict[str, Any], None] = None,
    alias: AliasSpec = None,
) -> Optional[Dict[str, Any]]:
    """One-shot transform; ``alias`` is a shortcut for ``options.alias``."""
    if alias is not None:
        if options is None:
            options = ToJSONOptions(alias=alias)
        elif isinstance(options, ToJSONOptions):
            options = options.model_copy(update={"alias": alias})
        else:
            options = {**options, "alias": alias}
    return DocumentTransformer(schema)(document, options)
