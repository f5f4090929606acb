"""Core data models shared across dirimport components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .nodes import Identifier, ImportDeclaration, Specifier, Statement


@dataclass(frozen=True)
class ImportRequest:
    """The import statement being visited, plus the file it came from."""

    source: str
    specifiers: Tuple[Specifier, ...]
    filename: str

    @classmethod
    def from_declaration(cls, node: ImportDeclaration, filename: str) -> "ImportRequest":
        return cls(source=node.source.value, specifiers=tuple(node.specifiers), filename=filename)


@dataclass(frozen=True)
class ClassifiedPath:
    """Directory import source with its markers stripped and recorded."""

    cleaned_path: str
    is_explicit_wildcard: bool
    is_recursive: bool
    path_prefix: str
    resolved_path: str


@dataclass(frozen=True)
class DiscoveredFile:
    """One scanned module and the names the generated code uses for it."""

    segments: Tuple[str, ...]
    property_name: str
    binding: Identifier


@dataclass(frozen=True)
class RewriteResult:
    """Ordered statements replacing one directory import."""

    statements: Tuple[Statement, ...]
    container: Identifier
    files: Tuple[DiscoveredFile, ...] = field(default_factory=tuple)

    @property
    def imports(self) -> Tuple[ImportDeclaration, ...]:
        return tuple(stmt for stmt in self.statements if isinstance(stmt, ImportDeclaration))
