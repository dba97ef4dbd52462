#!/usr/bin/env python3
"""
Deep path accessor - read, write and delete values at dotted paths.

Documents are plain JSON-like trees: a value is a scalar, a list of values or
a dict of string keys to values. Every segment of a path may land on a list
of sub-documents, and the three operations deliberately treat that case
differently:

- ``get_value`` fans out across list elements and returns the first match.
- ``set_value`` never fans out; a list met on the way stops the write.
- ``delete_value`` recurses into every list element.
"""

from typing import Any, Dict, List, Union


class _Missing:
    """Marker for a path that resolves to nothing (distinct from ``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

Scalar = Union[str, int, float, bool, None]
Value = Union[Scalar, Dict[str, Any], List[Any]]
Path = Union[str, List[str]]


def split_path(path: Path) -> List[str]:
    """Split a dotted path into segments, dropping empty ones."""
    if isinstance(path, str):
        segments = path.split(".")
    else:
        segments = list(path)
    return [s.strip() for s in segments if s and s.strip()]


def _lookup(node: Any, segments: List[str]) -> Any:
    if not segments:
        return node
    if isinstance(node, list):
        # First element that resolves the remaining lookup to a non-null value wins
        for item in node:
            found = _lookup(item, segments)
            if found is not MISSING and found is not None:
                return found
        return MISSING
    if isinstance(node, dict):
        head, rest = segments[0], segments[1:]
        if head not in node:
            return MISSING
        return _lookup(node[head], rest)
    return MISSING


def get_value(root: Any, path: Path) -> Any:
    """Return the value at ``path`` or ``MISSING`` when nothing resolves."""
    segments = split_path(path)
    if not segments:
        return MISSING
    return _lookup(root, segments)


def has_value(root: Any, path: Path) -> bool:
    return get_value(root, path) is not MISSING


def set_value(root: Dict[str, Any], path: Path, value: Any) -> bool:
    """Assign ``value`` at ``path``, creating intermediate dicts as needed.

    Returns False (leaving ``root`` untouched) when an intermediate segment
    holds a list or a scalar. A list at the final segment is replaced whole.
    """
    segments = split_path(path)
    if not segments or not isinstance(root, dict):
        return False

    current = root
    for key in segments[:-1]:
        nxt = current.get(key)
        if nxt is None:
            nxt = {}
            current[key] = nxt
        elif not isinstance(nxt, dict):
            return False
        current = nxt

    current[segments[-1]] = value
    return True


def _delete(node: Any, segments: List[str]) -> None:
    if isinstance(node, list):
        for item in node:
            _delete(item, segments)
        return
    if not isinstance(node, dict):
        return
    head = segments[0]
    if len(segments) == 1:
        node.pop(head, None)
        return
    if head in node:
        _delete(node[head], segments[1:])


def delete_value(root: Any, path: Path) -> None:
    """Remove the key at ``path``; list intermediates are visited element-wise."""
    segments = split_path(path)
    if segments:
        _delete(root, segments)


def move_value(root: Dict[str, Any], source: Path, destination: Path) -> bool:
    """Move the value at ``source`` to ``destination`` and drop ``source``.

    Nothing happens when ``source`` is missing. The source is deleted even if
    the destination write is refused by ``set_value``.
    """
    value = get_value(root, source)
    if value is MISSING:
        return False
    if split_path(source) == split_path(destination):
        return True
    written = set_value(root, destination, value)
    delete_value(root, source)
    return written
