"""Tests for dirimport.scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirimport.scanner import DirectoryScanner
from tests._fixtures.project_builder import ProjectBuilder, sorted_listing


def _scanner() -> DirectoryScanner:
    return DirectoryScanner(sorted_listing)


def test_scan_filters_by_default_extensions(project: ProjectBuilder) -> None:
    project.write(
        {
            "dir/a.js": "export default 1;\n",
            "dir/b.jsx": "export default 2;\n",
            "dir/c.es6": "export default 3;\n",
            "dir/d.es": "export default 4;\n",
            "dir/notes.md": "# notes\n",
            "dir/style.css": "body {}\n",
        }
    )

    files = _scanner().scan(str(project.path("dir")))

    assert files == [("a",), ("b",), ("c",), ("d",)]


def test_scan_honours_custom_extensions(project: ProjectBuilder) -> None:
    project.write({"dir/a.js": "", "dir/b.ts": "", "dir/c.mjs": ""})

    files = _scanner().scan(str(project.path("dir")), extensions=(".ts", ".mjs"))

    assert files == [("b",), ("c",)]


def test_scan_ignores_subdirectories_unless_recursive(project: ProjectBuilder) -> None:
    project.write({"dir/a.js": "", "dir/sub/c.js": "", "dir/sub/deeper/d.js": ""})

    assert _scanner().scan(str(project.path("dir"))) == [("a",)]
    assert _scanner().scan(str(project.path("dir")), recursive=True) == [
        ("a",),
        ("sub", "c"),
        ("sub", "deeper", "d"),
    ]


def test_scan_lists_files_before_subdirectory_contents(project: ProjectBuilder) -> None:
    project.write({"dir/alpha/x.js": "", "dir/beta.js": "", "dir/gamma/y.js": "", "dir/zeta.js": ""})

    files = _scanner().scan(str(project.path("dir")), recursive=True)

    assert files == [("beta",), ("zeta",), ("alpha", "x"), ("gamma", "y")]


def test_scan_keeps_listing_order() -> None:
    listing = {"/root": ["z.js", "a.js", "m.js"]}
    scanner = DirectoryScanner(lambda path: listing[path])

    assert scanner.scan("/root") == [("z",), ("a",), ("m",)]


def test_scan_uses_directory_name_with_dots_as_segment(project: ProjectBuilder) -> None:
    project.write({"dir/v1.2/a.js": ""})

    files = _scanner().scan(str(project.path("dir")), recursive=True)

    assert files == [("v1.2", "a")]


def test_scan_returns_empty_list_for_empty_directory(project: ProjectBuilder) -> None:
    empty = project.mkdir("empty")

    assert _scanner().scan(str(empty)) == []


def test_scan_propagates_missing_root(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        DirectoryScanner().scan(str(tmp_path / "missing"))


def test_scan_propagates_nested_read_failure(project: ProjectBuilder) -> None:
    project.write({"dir/a.js": "", "dir/sub/c.js": ""})

    def listing(path: str) -> list[str]:
        if os.path.basename(path) == "sub":
            raise PermissionError(13, "Permission denied", path)
        return sorted_listing(path)

    with pytest.raises(PermissionError):
        DirectoryScanner(listing).scan(str(project.path("dir")), recursive=True)
