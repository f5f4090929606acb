"""Render generated statements as JavaScript source."""

from __future__ import annotations

import json
from typing import Iterable, List

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
    StringLiteral,
    VariableDeclaration,
)

INDENT = "  "


class CodeGenerator:
    """Prints the node subset produced by the transform, one statement per line."""

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent

    def generate(self, statements: Iterable[object]) -> str:
        lines: List[str] = []
        for statement in statements:
            lines.extend(self._statement(statement, 0))
        return "\n".join(lines)

    def _statement(self, node: object, depth: int) -> List[str]:
        pad = self.indent * depth
        if isinstance(node, ImportDeclaration):
            return [pad + self._import(node)]
        if isinstance(node, VariableDeclaration):
            return [pad + self._declaration(node) + ";"]
        if isinstance(node, ExpressionStatement):
            return [pad + self._expression(node.expression) + ";"]
        if isinstance(node, ForInStatement):
            head = (
                f"{pad}for ({self._declaration(node.left)} in "
                f"{self._expression(node.right)}) {{"
            )
            return [head, *self._block_body(node.body, depth + 1), pad + "}"]
        if isinstance(node, BlockStatement):
            return [pad + "{", *self._block_body(node, depth + 1), pad + "}"]
        raise TypeError(f"Cannot generate code for statement {type(node).__name__}")

    def _block_body(self, block: BlockStatement, depth: int) -> List[str]:
        lines: List[str] = []
        for statement in block.body:
            lines.extend(self._statement(statement, depth))
        return lines

    def _import(self, node: ImportDeclaration) -> str:
        source = self._string(node.source.value)
        if not node.specifiers:
            return f"import {source};"

        default_part = None
        namespace_part = None
        named: List[str] = []
        for spec in node.specifiers:
            if isinstance(spec, ImportDefaultSpecifier):
                default_part = spec.local.name
            elif isinstance(spec, ImportNamespaceSpecifier):
                namespace_part = f"* as {spec.local.name}"
            elif isinstance(spec, ImportSpecifier):
                imported = self._expression(spec.imported)
                if isinstance(spec.imported, Identifier) and spec.imported.name == spec.local.name:
                    named.append(imported)
                else:
                    named.append(f"{imported} as {spec.local.name}")

        parts = [part for part in (default_part, namespace_part) if part]
        if named:
            parts.append("{ " + ", ".join(named) + " }")
        return f"import {', '.join(parts)} from {source};"

    def _declaration(self, node: VariableDeclaration) -> str:
        declarators = []
        for declarator in node.declarations:
            if declarator.init is None:
                declarators.append(declarator.id.name)
            else:
                declarators.append(f"{declarator.id.name} = {self._expression(declarator.init)}")
        return f"{node.kind} {', '.join(declarators)}"

    def _expression(self, node: object) -> str:
        if isinstance(node, Identifier):
            return node.name
        if isinstance(node, StringLiteral):
            return self._string(node.value)
        if isinstance(node, ObjectExpression):
            return "{}"
        if isinstance(node, MemberExpression):
            target = self._expression(node.object)
            if node.computed:
                return f"{target}[{self._expression(node.property)}]"
            return f"{target}.{self._expression(node.property)}"
        if isinstance(node, BinaryExpression):
            return f"{self._expression(node.left)} {node.operator} {self._expression(node.right)}"
        if isinstance(node, ConditionalExpression):
            return (
                f"{self._expression(node.test)} ? {self._expression(node.consequent)} : "
                f"{self._expression(node.alternate)}"
            )
        if isinstance(node, AssignmentExpression):
            return f"{self._expression(node.left)} {node.operator} {self._expression(node.right)}"
        raise TypeError(f"Cannot generate code for expression {type(node).__name__}")

    @staticmethod
    def _string(value: str) -> str:
        return json.dumps(value)


def generate(statements: Iterable[object]) -> str:
    """Render ``statements`` with the default generator settings."""
    return CodeGenerator().generate(statements)


__all__ = ["CodeGenerator", "generate"]
