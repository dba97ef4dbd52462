"""
Path-addressable document transforms: deep get/set/delete, alias rewriting,
privacy filtering and populate plans.
"""

from engine.accessor import MISSING, get_value, set_value, delete_value, move_value
from engine.alias import apply_alias, parse_alias_rules
from engine.privacy import strip_private_fields
from engine.populate import PopulateNode, build_populate_plan
from engine.schema import DocumentSchema, FieldOptions
from engine.transform import DocumentTransformer, ToJSONOptions, to_json

__all__ = [
    "MISSING",
    "get_value",
    "set_value",
    "delete_value",
    "move_value",
    "apply_alias",
    "parse_alias_rules",
    "strip_private_fields",
    "PopulateNode",
    "build_populate_plan",
    "DocumentSchema",
    "FieldOptions",
    "DocumentTransformer",
    "ToJSONOptions",
    "to_json",
]
