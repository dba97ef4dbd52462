#!/usr/bin/env python3
"""
Populate plan builder.

Parses the compact populate grammar into a tree of ``PopulateNode``:

    populate  := directive (";" directive)*
    directive := path [":" field ("," field)*]
    path      := relation ("." relation)*              nested chain
               | relation "-" relation ("," relation)*  parent with siblings

Every node of a directive gets the same field list (``_id`` when omitted).
Relations are not validated here; the store decides what exists.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from engine.accessor import split_path

DEFAULT_SELECT = ["_id"]


class PopulateNode(BaseModel):
    path: str
    select: List[str] = []
    children: List["PopulateNode"] = []

    def to_options(self) -> Dict[str, Any]:
        """Mongoose-style populate options (``path``/``select``/``populate``)."""
        options: Dict[str, Any] = {"path": self.path, "select": " ".join(self.select)}
        if len(self.children) == 1:
            options["populate"] = self.children[0].to_options()
        elif self.children:
            options["populate"] = [child.to_options() for child in self.children]
        return options

    def leaf(self) -> "PopulateNode":
        node = self
        while node.children:
            node = node.children[-1]
        return node


PopulateNode.model_rebuild()


def _build_chain(path: str, select: List[str]) -> Optional[PopulateNode]:
    segments = split_path(path)
    if not segments:
        return None
    node: Optional[PopulateNode] = None
    for segment in reversed(segments):
        node = PopulateNode(
            path=segment,
            select=list(select),
            children=[node] if node is not None else [],
        )
    return node


def _parse_directive(directive: str) -> Optional[PopulateNode]:
    path, _, fields = directive.partition(":")
    select = [f.strip() for f in fields.split(",") if f.strip()] or list(DEFAULT_SELECT)

    if "-" not in path:
        return _build_chain(path, select)

    parent_path, _, children_str = path.partition("-")
    parent = _build_chain(parent_path, select)
    if parent is None:
        return None
    leaf = parent.leaf()
    for child_path in children_str.split(","):
        child = _build_chain(child_path, select)
        if child is not None:
            leaf.children.append(child)
    return parent


def build_populate_plan(populate: Optional[str]) -> List[PopulateNode]:
    """Build one plan tree per non-empty directive, in declaration order."""
    if not populate:
        return []
    plan: List[PopulateNode] = []
    for raw in populate.split(";"):
        directive = raw.strip()
        if not directive:
            continue
        node = _parse_directive(directive)
        if node is not None:
            plan.append(node)
    return plan
