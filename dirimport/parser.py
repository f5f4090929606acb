"""Tree-sitter powered reader for the import declarations of a JavaScript program."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Set

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from .nodes import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    Specifier,
    StringLiteral,
)

_ESCAPE = re.compile(
    r"\\(?:x([0-9a-fA-F]{2})|u\{([0-9a-fA-F]+)\}|u([0-9a-fA-F]{4})|(\r\n|[\r\n\u2028\u2029])|(.))",
    re.DOTALL,
)
_SINGLE_CHAR_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}

_IDENTIFIER_TYPES = {
    "identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
}


class SourceParseError(ValueError):
    """Raised when a program cannot be parsed without syntax errors."""


@dataclass
class ParsedImport:
    """A top-level import declaration and the byte span it occupies."""

    node: ImportDeclaration
    start_byte: int
    end_byte: int


@dataclass
class ParsedProgram:
    source: bytes
    imports: List[ParsedImport] = field(default_factory=list)
    identifiers: Set[str] = field(default_factory=set)


class JavaScriptReader:
    """Parses JavaScript modules and extracts what the transform needs from them."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def read(self, source: str | bytes, filename: str = "") -> ParsedProgram:
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._get_parser().parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            location = _first_error_location(root)
            label = filename or "<source>"
            raise SourceParseError(f"{label}:{location}: unable to parse JavaScript source")

        program = ParsedProgram(source=source_bytes)
        for child in root.named_children:
            if child.type == "import_statement":
                program.imports.append(
                    ParsedImport(
                        node=_build_declaration(child),
                        start_byte=child.start_byte,
                        end_byte=child.end_byte,
                    )
                )
        program.identifiers = _collect_identifiers(root)
        return program

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(Language(tree_sitter_javascript.language()))
        return self._parser


def _node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8", errors="ignore")


def _string_value(node: Node) -> str:
    return decode_string_literal(_node_text(node)[1:-1])


def decode_string_literal(body: str) -> str:
    """Resolve the escape sequences of a quoted JavaScript string body."""

    def _replace(match: re.Match[str]) -> str:
        hex_byte, code_point, code_unit, line_break, char = match.groups()
        if hex_byte or code_unit or code_point:
            return chr(int(hex_byte or code_unit or code_point, 16))
        if line_break is not None:
            return ""
        return _SINGLE_CHAR_ESCAPES.get(char, char)

    return _ESCAPE.sub(_replace, body)


def _build_declaration(node: Node) -> ImportDeclaration:
    source_node = node.child_by_field_name("source")
    if source_node is None:
        raise SourceParseError(f"import at byte {node.start_byte} has no source")

    specifiers: List[Specifier] = []
    for child in node.named_children:
        if child.type != "import_clause":
            continue
        for part in child.named_children:
            if part.type == "identifier":
                specifiers.append(ImportDefaultSpecifier(Identifier(_node_text(part))))
            elif part.type == "namespace_import":
                local = next(n for n in part.named_children if n.type == "identifier")
                specifiers.append(ImportNamespaceSpecifier(Identifier(_node_text(local))))
            elif part.type == "named_imports":
                specifiers.extend(_named_specifiers(part))

    return ImportDeclaration(
        specifiers=tuple(specifiers), source=StringLiteral(_string_value(source_node))
    )


def _named_specifiers(node: Node) -> List[ImportSpecifier]:
    specifiers: List[ImportSpecifier] = []
    for spec in node.named_children:
        if spec.type != "import_specifier":
            continue
        name_node = spec.child_by_field_name("name")
        alias_node = spec.child_by_field_name("alias")
        if name_node is None:
            continue
        if name_node.type == "string":
            imported = StringLiteral(_string_value(name_node))
        else:
            imported = Identifier(_node_text(name_node))
        if alias_node is not None:
            local = Identifier(_node_text(alias_node))
        elif isinstance(imported, Identifier):
            local = imported
        else:
            raise SourceParseError(f"string import name {imported.value!r} requires an alias")
        specifiers.append(ImportSpecifier(local=local, imported=imported))
    return specifiers


def _collect_identifiers(root: Node) -> Set[str]:
    names: Set[str] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in _IDENTIFIER_TYPES:
            names.add(_node_text(node))
        stack.extend(node.children)
    return names


def _first_error_location(root: Node) -> str:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point
            return f"{row + 1}:{column + 1}"
        stack.extend(reversed(node.children))
    return "?"


__all__ = [
    "JavaScriptReader",
    "ParsedImport",
    "ParsedProgram",
    "SourceParseError",
    "decode_string_literal",
]
