"""Tests for dirimport.scope."""

from __future__ import annotations

from dirimport.nodes import Identifier
from dirimport.scope import Scope, to_identifier


def test_to_identifier_camel_cases_invalid_characters() -> None:
    assert to_identifier("b-c") == "bC"
    assert to_identifier("my file.name") == "myFileName"
    assert to_identifier("2fast") == "fast"


def test_to_identifier_prefixes_reserved_words() -> None:
    assert to_identifier("default") == "_default"
    assert to_identifier("") == "_"


def test_fresh_identifier_prefixes_hint() -> None:
    scope = Scope()

    assert scope.fresh_identifier("a") == Identifier("_a")
    assert scope.fresh_identifier("dirImport") == Identifier("_dirImport")


def test_fresh_identifier_numbers_repeated_hints() -> None:
    scope = Scope()

    names = [scope.fresh_identifier("index").name for _ in range(3)]

    assert names == ["_index", "_index2", "_index3"]


def test_fresh_identifier_avoids_names_used_by_the_program() -> None:
    scope = Scope({"_a", "_a2", "X"})

    assert scope.fresh_identifier("a").name == "_a3"


def test_fresh_identifier_strips_underscores_and_trailing_digits() -> None:
    scope = Scope()

    assert scope.fresh_identifier("__private").name == "_private"
    assert scope.fresh_identifier("file10").name == "_file"


def test_seeded_names_are_not_handed_out() -> None:
    scope = Scope({"_b"})

    assert scope.fresh_identifier("b").name == "_b2"
