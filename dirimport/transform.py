"""Directory import transform: the visitor invoked on each import declaration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from .classifier import classify
from .config import TransformOptions
from .logging import get_logger
from .models import DiscoveredFile, ImportRequest, RewriteResult
from .naming import name_transform
from .nodes import ImportDeclaration
from .scanner import DirectoryScanner
from .scope import Scope
from .synthesis import synthesize

CONTAINER_HINT = "dirImport"


@dataclass
class TransformContext:
    """What the host pipeline knows about the program being visited."""

    filename: str = ""
    scope: Scope = field(default_factory=Scope)


class ImportVisitor(ABC):
    """Contract for rewrites driven by a host tree walker, one import at a time."""

    @abstractmethod
    def visit_import(
        self, node: ImportDeclaration, context: TransformContext
    ) -> Optional[RewriteResult]:
        """Return replacement statements for ``node``, or None to leave it untouched."""

    def visit(self, node: object, context: TransformContext) -> Optional[RewriteResult]:
        if not isinstance(node, ImportDeclaration):
            return None
        return self.visit_import(node, context)


class DirImportTransform(ImportVisitor):
    """Rewrites ``import X from './dir'`` into per-file imports aggregated onto one object."""

    def __init__(
        self,
        options: TransformOptions | None = None,
        scanner: DirectoryScanner | None = None,
    ) -> None:
        self.options = options or TransformOptions()
        self.scanner = scanner or DirectoryScanner()
        self.logger = get_logger("transform")
        self._transform_name = name_transform(self.options.snake_case)

    def visit_import(
        self, node: ImportDeclaration, context: TransformContext
    ) -> Optional[RewriteResult]:
        request = ImportRequest.from_declaration(node, context.filename)
        classified = classify(request.source, request.filename)
        if classified is None:
            return None

        entries = self.scanner.scan(
            classified.resolved_path, self.options.exts, recursive=classified.is_recursive
        )
        if not entries:
            self.logger.debug(
                "Directory %s has no matching modules; leaving import", classified.resolved_path
            )
            return None

        files: List[DiscoveredFile] = []
        for segments in entries:
            last = segments[-1]
            files.append(
                DiscoveredFile(
                    segments=segments,
                    property_name=self._transform_name(last),
                    binding=context.scope.fresh_identifier(last),
                )
            )
        container = context.scope.fresh_identifier(CONTAINER_HINT)

        statements = synthesize(classified, files, request.specifiers, container)
        self.logger.debug(
            "Rewrote %r into %d module import(s)%s",
            request.source,
            len(files),
            " with export spreading" if classified.is_explicit_wildcard else "",
        )
        return RewriteResult(statements=tuple(statements), container=container, files=tuple(files))


__all__ = ["CONTAINER_HINT", "DirImportTransform", "ImportVisitor", "TransformContext"]
