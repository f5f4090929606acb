"""Map filesystem entry names to property names on the aggregate object."""

from __future__ import annotations

import re
from typing import Callable

_CAMEL_SEPARATOR = re.compile(r"[-_.]\w", re.ASCII)
_SNAKE_BOUNDARY = re.compile(r"[-.A-Z]")


def to_camel_case(name: str) -> str:
    """``foo-bar.baz`` -> ``fooBarBaz``."""
    return _CAMEL_SEPARATOR.sub(lambda match: match.group(0)[1].upper(), name)


def to_snake_case(name: str) -> str:
    """``fooBar-baz`` -> ``foo_bar_baz``; a leading capital yields a leading underscore."""

    def _replace(match: re.Match[str]) -> str:
        char = match.group(0)
        return "_" + ("" if char in ".-" else char.lower())

    return _SNAKE_BOUNDARY.sub(_replace, name)


def name_transform(snake_case: bool = False) -> Callable[[str], str]:
    return to_snake_case if snake_case else to_camel_case


__all__ = ["name_transform", "to_camel_case", "to_snake_case"]
