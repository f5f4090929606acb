"""Statement synthesis for aggregated directory imports."""

from __future__ import annotations

import posixpath
from typing import List, Sequence

from .models import ClassifiedPath, DiscoveredFile
from .nodes import (
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    ConditionalExpression,
    ExpressionStatement,
    ForInStatement,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    MemberExpression,
    ObjectExpression,
    Specifier,
    Statement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
    const,
    member,
)

LOOP_KEY = Identifier("key")


def module_source(classified: ClassifiedPath, segments: Sequence[str]) -> str:
    """Import source for one discovered file, qualified like the original import."""
    joined = posixpath.normpath(posixpath.join(classified.cleaned_path, *segments))
    if joined.startswith(("/", "../")):
        return joined
    return classified.path_prefix + joined


def build_imports(
    classified: ClassifiedPath, files: Sequence[DiscoveredFile]
) -> List[ImportDeclaration]:
    return [
        ImportDeclaration(
            specifiers=(ImportNamespaceSpecifier(file.binding),),
            source=StringLiteral(module_source(classified, file.segments)),
        )
        for file in files
    ]


def build_static_assignment(container: Identifier, file: DiscoveredFile) -> Statement:
    """``container.property = binding;``"""
    return ExpressionStatement(
        AssignmentExpression(member(container, file.property_name), file.binding)
    )


def build_spread_loop(container: Identifier, file: DiscoveredFile) -> Statement:
    """Copy every export of ``file`` onto ``container``, renaming ``default`` to the file's property."""
    target_key = ConditionalExpression(
        test=BinaryExpression("===", LOOP_KEY, StringLiteral("default")),
        consequent=StringLiteral(file.property_name),
        alternate=LOOP_KEY,
    )
    assignment = ExpressionStatement(
        AssignmentExpression(
            MemberExpression(container, target_key, computed=True),
            MemberExpression(file.binding, LOOP_KEY, computed=True),
        )
    )
    return ForInStatement(
        left=VariableDeclaration("let", (VariableDeclarator(LOOP_KEY, None),)),
        right=file.binding,
        body=BlockStatement((assignment,)),
    )


def build_aggregation(
    container: Identifier, files: Sequence[DiscoveredFile], explicit_wildcard: bool
) -> List[Statement]:
    builder = build_spread_loop if explicit_wildcard else build_static_assignment
    return [builder(container, file) for file in files]


def bind_specifiers(
    specifiers: Sequence[Specifier], container: Identifier
) -> List[VariableDeclaration]:
    """Expose the container under the local names the original import declared."""
    bindings: List[VariableDeclaration] = []
    for spec in specifiers:
        if isinstance(spec, (ImportNamespaceSpecifier, ImportDefaultSpecifier)):
            bindings.append(const(Identifier(spec.local.name), container))
        elif isinstance(spec, ImportSpecifier):
            bindings.append(const(Identifier(spec.local.name), member(container, spec.imported_name)))
    return bindings


def synthesize(
    classified: ClassifiedPath,
    files: Sequence[DiscoveredFile],
    specifiers: Sequence[Specifier],
    container: Identifier,
) -> List[Statement]:
    """Ordered replacement for a directory import.

    The container is declared first, then the namespace imports, then one
    aggregation statement per file in discovery order (so later files win on
    property collisions), then the specifier bindings reading the populated
    container.
    """
    statements: List[Statement] = [const(container, ObjectExpression())]
    statements.extend(build_imports(classified, files))
    statements.extend(build_aggregation(container, files, classified.is_explicit_wildcard))
    statements.extend(bind_specifiers(specifiers, container))
    return statements


__all__ = [
    "bind_specifiers",
    "build_aggregation",
    "build_imports",
    "build_spread_loop",
    "build_static_assignment",
    "module_source",
    "synthesize",
]
