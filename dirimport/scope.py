"""Collision-free identifier generation for generated bindings."""

from __future__ import annotations

import re
from typing import Iterable, Set

from .nodes import Identifier, is_valid_identifier

_NON_IDENTIFIER_CHARS = re.compile(r"[^a-zA-Z0-9$_]")
_LEADING_INVALID = re.compile(r"^[-0-9]+")
_SEPARATOR_RUN = re.compile(r"[-\s]+(.)?")
_LEADING_UNDERSCORES = re.compile(r"^_+")
_TRAILING_DIGITS = re.compile(r"\d+$")


def to_identifier(name: str) -> str:
    """Turn an arbitrary string into a valid JavaScript identifier (``b-c`` -> ``bC``)."""
    name = _NON_IDENTIFIER_CHARS.sub("-", name)
    name = _LEADING_INVALID.sub("", name)
    name = _SEPARATOR_RUN.sub(lambda match: match.group(1).upper() if match.group(1) else "", name)
    if not is_valid_identifier(name):
        name = f"_{name}"
    return name or "_"


class Scope:
    """Names in use in one program, handing out fresh ``_hint``, ``_hint2``... identifiers.

    The scope is seeded with every identifier already present in the program
    and remembers what it generated, so identifiers stay distinct across all
    imports rewritten in the same program.
    """

    def __init__(self, used_names: Iterable[str] = ()) -> None:
        self._used: Set[str] = set(used_names)

    def fresh_identifier(self, hint: str) -> Identifier:
        base = _TRAILING_DIGITS.sub("", _LEADING_UNDERSCORES.sub("", to_identifier(hint)))
        index = 1
        while True:
            candidate = f"_{base}{index if index > 1 else ''}"
            index += 1
            if candidate not in self._used:
                break
        self._used.add(candidate)
        return Identifier(candidate)


__all__ = ["Scope", "to_identifier"]
