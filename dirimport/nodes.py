"""JavaScript syntax nodes read and produced by the transform.

Only the subset of the ESTree grammar that import rewriting touches is
modelled here. Nodes are immutable; the transform never mutates a node it was
handed and always builds new ones for its output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

_IDENTIFIER_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

RESERVED_WORDS = frozenset(
    {
        "arguments",
        "await",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "eval",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "implements",
        "import",
        "in",
        "instanceof",
        "interface",
        "let",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "static",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)


def is_identifier_name(name: str) -> bool:
    """Return True when ``name`` may follow a ``.`` in a member expression."""
    return bool(_IDENTIFIER_NAME.match(name))


def is_valid_identifier(name: str) -> bool:
    """Return True when ``name`` may be used as a binding in module code."""
    return is_identifier_name(name) and name not in RESERVED_WORDS


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class ObjectExpression:
    """An empty object literal."""


@dataclass(frozen=True)
class MemberExpression:
    object: "Expression"
    property: "Expression"
    computed: bool = False


@dataclass(frozen=True)
class BinaryExpression:
    operator: str
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class ConditionalExpression:
    test: "Expression"
    consequent: "Expression"
    alternate: "Expression"


@dataclass(frozen=True)
class AssignmentExpression:
    left: "Expression"
    right: "Expression"
    operator: str = "="


Expression = Union[
    Identifier,
    StringLiteral,
    ObjectExpression,
    MemberExpression,
    BinaryExpression,
    ConditionalExpression,
    AssignmentExpression,
]


@dataclass(frozen=True)
class ImportDefaultSpecifier:
    local: Identifier


@dataclass(frozen=True)
class ImportNamespaceSpecifier:
    local: Identifier


@dataclass(frozen=True)
class ImportSpecifier:
    """Named specifier; ``imported`` is an Identifier or, for ``"a-b" as x``, a StringLiteral."""

    local: Identifier
    imported: Union[Identifier, StringLiteral]

    @property
    def imported_name(self) -> str:
        if isinstance(self.imported, Identifier):
            return self.imported.name
        return self.imported.value


Specifier = Union[ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier]


@dataclass(frozen=True)
class ImportDeclaration:
    specifiers: Tuple[Specifier, ...]
    source: StringLiteral


@dataclass(frozen=True)
class VariableDeclarator:
    id: Identifier
    init: Optional[Expression] = None


@dataclass(frozen=True)
class VariableDeclaration:
    kind: str
    declarations: Tuple[VariableDeclarator, ...]


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True)
class BlockStatement:
    body: Tuple["Statement", ...]


@dataclass(frozen=True)
class ForInStatement:
    left: VariableDeclaration
    right: Expression
    body: BlockStatement


Statement = Union[
    ImportDeclaration,
    VariableDeclaration,
    ExpressionStatement,
    ForInStatement,
    BlockStatement,
]


def const(binding: Identifier, init: Expression) -> VariableDeclaration:
    """Build ``const binding = init;``."""
    return VariableDeclaration("const", (VariableDeclarator(binding, init),))


def member(obj: Expression, name: str) -> MemberExpression:
    """Build ``obj.name``, falling back to ``obj["name"]`` for non-identifier names."""
    if is_identifier_name(name):
        return MemberExpression(obj, Identifier(name))
    return MemberExpression(obj, StringLiteral(name), computed=True)


__all__ = [
    "AssignmentExpression",
    "BinaryExpression",
    "BlockStatement",
    "ConditionalExpression",
    "Expression",
    "ExpressionStatement",
    "ForInStatement",
    "Identifier",
    "ImportDeclaration",
    "ImportDefaultSpecifier",
    "ImportNamespaceSpecifier",
    "ImportSpecifier",
    "MemberExpression",
    "ObjectExpression",
    "RESERVED_WORDS",
    "Specifier",
    "Statement",
    "StringLiteral",
    "VariableDeclaration",
    "VariableDeclarator",
    "const",
    "is_identifier_name",
    "is_valid_identifier",
    "member",
]
