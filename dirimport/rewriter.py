"""Source-level driver: applies the directory import transform to whole files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .codegen import CodeGenerator
from .config import TransformOptions
from .logging import get_logger
from .parser import JavaScriptReader
from .scope import Scope
from .transform import DirImportTransform, ImportVisitor, TransformContext


@dataclass
class RewriteOutcome:
    """Rewritten program text and how many imports were replaced."""

    code: str
    rewritten: int

    @property
    def changed(self) -> bool:
        return self.rewritten > 0


class SourceRewriter:
    """Visits every top-level import of a program and splices in the generated code."""

    def __init__(
        self,
        options: TransformOptions | None = None,
        visitor: ImportVisitor | None = None,
        reader: JavaScriptReader | None = None,
        generator: CodeGenerator | None = None,
    ) -> None:
        self.visitor = visitor or DirImportTransform(options)
        self.reader = reader or JavaScriptReader()
        self.generator = generator or CodeGenerator()
        self.logger = get_logger("rewriter")

    def rewrite(self, source: str, filename: str = "") -> RewriteOutcome:
        program = self.reader.read(source, filename)
        context = TransformContext(filename=filename, scope=Scope(program.identifiers))

        replacements: List[Tuple[int, int, bytes]] = []
        for parsed in program.imports:
            result = self.visitor.visit_import(parsed.node, context)
            if result is None:
                continue
            code = self.generator.generate(result.statements)
            replacements.append((parsed.start_byte, parsed.end_byte, code.encode("utf-8")))

        if not replacements:
            return RewriteOutcome(code=source, rewritten=0)

        output = program.source
        for start, end, code in reversed(replacements):
            output = output[:start] + code + output[end:]
        self.logger.debug("Rewrote %d import(s) in %s", len(replacements), filename or "<source>")
        return RewriteOutcome(code=output.decode("utf-8"), rewritten=len(replacements))

    def rewrite_file(self, path: Path) -> RewriteOutcome:
        resolved = path.expanduser().resolve()
        source = resolved.read_text(encoding="utf-8")
        return self.rewrite(source, str(resolved))


def rewrite_source(
    source: str, filename: str = "", options: TransformOptions | None = None
) -> RewriteOutcome:
    """Rewrite every directory import in ``source`` using ``options``."""
    return SourceRewriter(options).rewrite(source, filename)


__all__ = ["RewriteOutcome", "SourceRewriter", "rewrite_source"]
