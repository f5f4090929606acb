"""Tests for dirimport.classifier."""

from __future__ import annotations

import json
import os

from dirimport.classifier import classify, resolve_import_path, resolves_as_module
from tests._fixtures.project_builder import ProjectBuilder


def _importer(project: ProjectBuilder) -> str:
    return str(project.path("main.js"))


def test_package_imports_are_skipped(project: ProjectBuilder) -> None:
    project.write({"react/a.js": ""})

    assert classify("react", _importer(project)) is None
    assert classify("@scope/pkg/*", _importer(project)) is None
    assert classify("", _importer(project)) is None


def test_plain_directory_import(project: ProjectBuilder) -> None:
    project.write({"dir/a.js": ""})

    classified = classify("./dir", _importer(project))

    assert classified is not None
    assert classified.cleaned_path == "./dir"
    assert classified.is_explicit_wildcard is False
    assert classified.is_recursive is False
    assert classified.path_prefix == "./"
    assert classified.resolved_path == str(project.path("dir"))


def test_wildcard_marker_is_stripped(project: ProjectBuilder) -> None:
    project.write({"dir/a.js": ""})

    classified = classify("./dir/*", _importer(project))

    assert classified is not None
    assert classified.cleaned_path == "./dir"
    assert classified.is_explicit_wildcard is True
    assert classified.is_recursive is False


def test_recursive_marker_is_stripped(project: ProjectBuilder) -> None:
    project.write({"dir/sub/a.js": ""})

    classified = classify("./dir/**", _importer(project))

    assert classified is not None
    assert classified.cleaned_path == "./dir"
    assert classified.is_explicit_wildcard is False
    assert classified.is_recursive is True


def test_wildcard_after_recursive_sets_both_flags(project: ProjectBuilder) -> None:
    project.write({"dir/sub/a.js": ""})

    classified = classify("./dir/**/*", _importer(project))

    assert classified is not None
    assert classified.cleaned_path == "./dir"
    assert classified.is_explicit_wildcard is True
    assert classified.is_recursive is True


def test_parent_relative_import(project: ProjectBuilder) -> None:
    project.write({"shared/a.js": "", "src/main.js": ""})

    classified = classify("../shared", str(project.path("src/main.js")))

    assert classified is not None
    assert classified.path_prefix == "../"
    assert classified.resolved_path == str(project.path("shared"))


def test_ordinary_file_import_is_skipped(project: ProjectBuilder) -> None:
    project.write({"util.js": "export default 1;\n", "data.json": "{}"})

    assert classify("./util", _importer(project)) is None
    assert classify("./util.js", _importer(project)) is None
    assert classify("./data", _importer(project)) is None


def test_file_wins_over_directory_of_same_name(project: ProjectBuilder) -> None:
    project.write({"dir.js": "", "dir/a.js": ""})

    assert classify("./dir", _importer(project)) is None
    assert classify("./dir/*", _importer(project)) is None


def test_directory_with_index_module_is_skipped(project: ProjectBuilder) -> None:
    project.write({"dir/index.js": "", "dir/a.js": ""})

    assert classify("./dir", _importer(project)) is None


def test_directory_with_package_main_is_skipped(project: ProjectBuilder) -> None:
    project.write(
        {
            "pkg/package.json": json.dumps({"main": "lib/entry"}),
            "pkg/lib/entry.js": "",
            "pkg/a.js": "",
        }
    )

    assert classify("./pkg", _importer(project)) is None


def test_invalid_package_json_is_ignored(project: ProjectBuilder) -> None:
    project.write({"pkg/package.json": "{not json", "pkg/a.js": ""})

    assert classify("./pkg", _importer(project)) is not None


def test_missing_path_is_skipped(project: ProjectBuilder) -> None:
    assert classify("./nowhere", _importer(project)) is None
    assert classify("./nowhere/**", _importer(project)) is None


def test_extensionless_file_is_an_ordinary_import(project: ProjectBuilder) -> None:
    project.write({"README": "plain file without extension\n"})

    assert classify("./README", _importer(project)) is None


def test_resolve_import_path_joins_leading_slash_onto_importer_directory(
    project: ProjectBuilder,
) -> None:
    resolved = resolve_import_path("/dir", str(project.path("src/main.js")))

    assert resolved == str(project.path("src/dir"))


def test_resolve_import_path_without_filename_uses_working_directory() -> None:
    assert resolve_import_path("./dir", "") == os.path.abspath("dir")


def test_resolves_as_module_checks_index_extensions(project: ProjectBuilder) -> None:
    project.write({"json_dir/index.json": "{}", "plain_dir/a.js": ""})

    assert resolves_as_module(str(project.path("json_dir"))) is True
    assert resolves_as_module(str(project.path("plain_dir"))) is False
