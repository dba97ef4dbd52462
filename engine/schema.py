#!/usr/bin/env python3
"""Field metadata for documents of one collection."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class FieldOptions:
    private: bool = False


@dataclass
class DocumentSchema:
    """Dotted field path -> options. Only ``private`` is consulted today."""
    paths: Dict[str, FieldOptions] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "DocumentSchema":
        """Build from ``{"path": {"private": True}}`` or ``{"path": FieldOptions(...)}``."""
        paths: Dict[str, FieldOptions] = {}
        for path, options in (mapping or {}).items():
            if isinstance(options, FieldOptions):
                paths[path] = options
            elif isinstance(options, Mapping):
                paths[path] = FieldOptions(private=bool(options.get("private", False)))
            else:
                paths[path] = FieldOptions()
        return cls(paths=paths)

    def private_paths(self) -> List[str]:
        return [path for path, options in self.paths.items() if options.private]
