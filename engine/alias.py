#!/usr/bin/env python3
"""
Alias rewriting for output documents.

Alias specs come in two shapes:

- a string of ``;``-separated rules, where ``src::dest`` moves a value to a
  new path and ``base:f1,f2`` copies ``base.f1``/``base.f2`` up to top-level
  keys ``f1``/``f2`` (in the serializer form ``src:dest`` is a move too)
- a mapping of source path to destination path (always a move)

Rules run in declaration order, so when two rules write the same destination
the later one wins. Rules that cannot be parsed are skipped.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from engine.accessor import MISSING, get_value, move_value, split_path

AliasSpec = Union[str, Mapping[str, str], None]

RENAME = "rename"
FAN_OUT = "fan_out"


@dataclass(frozen=True)
class AliasRule:
    kind: str
    source: str
    destination: Optional[str] = None
    fields: List[str] = field(default_factory=list)


def _parse_rule(raw: str, colon_renames: bool = False) -> Optional[AliasRule]:
    rule = raw.strip()
    if not rule:
        return None

    if "::" in rule or (colon_renames and ":" in rule):
        delimiter = "::" if "::" in rule else ":"
        source, _, destination = rule.partition(delimiter)
        source, destination = source.strip(), destination.strip()
        if not split_path(source) or not split_path(destination):
            return None
        return AliasRule(kind=RENAME, source=source, destination=destination)

    if ":" in rule:
        base, _, fields_str = rule.partition(":")
        fields = [f.strip() for f in fields_str.split(",") if f.strip()]
        if not fields:
            return None
        return AliasRule(kind=FAN_OUT, source=base.strip(), fields=fields)

    return None


def parse_alias_rules(spec: AliasSpec, colon_renames: bool = False) -> List[AliasRule]:
    """Turn an alias spec (string or mapping) into an ordered list of rules.

    With ``colon_renames`` a single-colon string rule ``a:b`` is a move (the
    serializer grammar) instead of a copy-up.
    """
    if not spec:
        return []

    if isinstance(spec, str):
        rules = [_parse_rule(part, colon_renames) for part in spec.split(";")]
        return [r for r in rules if r is not None]

    rules: List[AliasRule] = []
    for source, destination in spec.items():
        if not isinstance(source, str) or not isinstance(destination, str):
            continue
        if not split_path(source) or not split_path(destination):
            continue
        rules.append(AliasRule(kind=RENAME, source=source.strip(), destination=destination.strip()))
    return rules


def _fan_out(document: Dict[str, Any], rule: AliasRule) -> None:
    for name in rule.fields:
        full_path = f"{rule.source}.{name}" if rule.source else name
        value = get_value(document, full_path)
        if value is not MISSING:
            document[name] = value


def apply_alias_rules(document: Dict[str, Any], rules: List[AliasRule]) -> Dict[str, Any]:
    for rule in rules:
        if rule.kind == RENAME:
            move_value(document, rule.source, rule.destination)
        elif rule.kind == FAN_OUT:
            _fan_out(document, rule)
    return document


def apply_alias(document: Dict[str, Any], spec: AliasSpec, colon_renames: bool = False) -> Dict[str, Any]:
    """Rewrite ``document`` in place according to ``spec`` and return it."""
    return apply_alias_rules(document, parse_alias_rules(spec, colon_renames))
