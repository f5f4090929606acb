"""Tests for dirimport.codegen."""

from __future__ import annotations

import pytest

from dirimport.codegen import generate
from dirimport.nodes import (
    ExpressionStatement,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    ObjectExpression,
    StringLiteral,
    const,
)


def test_generate_import_shapes() -> None:
    statements = [
        ImportDeclaration((), StringLiteral("./side-effect")),
        ImportDeclaration((ImportNamespaceSpecifier(Identifier("ns")),), StringLiteral("./ns")),
        ImportDeclaration(
            (
                ImportDefaultSpecifier(Identifier("X")),
                ImportSpecifier(Identifier("foo"), Identifier("foo")),
                ImportSpecifier(Identifier("baz"), Identifier("bar")),
            ),
            StringLiteral("./mixed"),
        ),
    ]

    assert generate(statements).splitlines() == [
        'import "./side-effect";',
        'import * as ns from "./ns";',
        'import X, { foo, bar as baz } from "./mixed";',
    ]


def test_generate_escapes_strings() -> None:
    statement = const(Identifier("s"), StringLiteral('quote " and \\ slash'))

    assert generate([statement]) == 'const s = "quote \\" and \\\\ slash";'


def test_generate_empty_object_declaration() -> None:
    assert generate([const(Identifier("_dirImport"), ObjectExpression())]) == "const _dirImport = {};"


def test_generate_rejects_unknown_nodes() -> None:
    with pytest.raises(TypeError):
        generate([ExpressionStatement(object())])  # type: ignore[arg-type]
