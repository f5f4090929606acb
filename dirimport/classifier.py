"""Classification of import sources into directory imports."""

from __future__ import annotations

import json
import os
from typing import Optional

from .logging import get_logger
from .models import ClassifiedPath

WILDCARD_MARKER = "/*"
RECURSIVE_MARKER = "/**"

# Extensions Node's require.resolve tries when loading a path as a file.
RESOLVE_EXTENSIONS = (".js", ".json", ".node")

_LOGGER = get_logger("classifier")


def classify(source: str, filename: str) -> Optional[ClassifiedPath]:
    """Return the classified directory import, or None when it should be left alone."""
    if not source or source[0] not in "./":
        _LOGGER.debug("Skipping package import %r", source)
        return None

    path_prefix = source.split("/")[0] + "/"

    is_explicit_wildcard = source.endswith(WILDCARD_MARKER)
    cleaned_path = source[: -len(WILDCARD_MARKER)] if is_explicit_wildcard else source

    is_recursive = cleaned_path.endswith(RECURSIVE_MARKER)
    if is_recursive:
        cleaned_path = cleaned_path[: -len(RECURSIVE_MARKER)]

    resolved_path = resolve_import_path(cleaned_path, filename)

    if resolves_as_module(resolved_path):
        _LOGGER.debug("Skipping %r: resolves to a module at %s", source, resolved_path)
        return None
    if not os.path.isdir(resolved_path):
        _LOGGER.debug("Skipping %r: %s is not a directory", source, resolved_path)
        return None

    return ClassifiedPath(
        cleaned_path=cleaned_path,
        is_explicit_wildcard=is_explicit_wildcard,
        is_recursive=is_recursive,
        path_prefix=path_prefix,
        resolved_path=resolved_path,
    )


def resolve_import_path(cleaned_path: str, filename: str) -> str:
    """Join ``cleaned_path`` onto the importing file's directory.

    A leading ``/`` does not reset the join to the filesystem root; the path is
    always taken relative to the importing file.
    """
    base = os.path.dirname(filename or "")
    relative = cleaned_path.lstrip("/")
    joined = os.path.join(base, *relative.split("/")) if relative else base
    return os.path.abspath(joined or os.curdir)


def resolves_as_module(path: str) -> bool:
    """Approximate Node's ``require.resolve`` for an absolute path."""
    return _load_as_file(path) or _load_as_directory(path)


def _load_as_file(path: str) -> bool:
    if os.path.isfile(path):
        return True
    return any(os.path.isfile(path + ext) for ext in RESOLVE_EXTENSIONS)


def _load_as_index(path: str) -> bool:
    return any(os.path.isfile(os.path.join(path, "index" + ext)) for ext in RESOLVE_EXTENSIONS)


def _load_as_directory(path: str) -> bool:
    if not os.path.isdir(path):
        return False
    main = _package_main(os.path.join(path, "package.json"))
    if main:
        target = os.path.join(path, main)
        if _load_as_file(target) or _load_as_index(target):
            return True
    return _load_as_index(path)


def _package_main(package_json: str) -> Optional[str]:
    if not os.path.isfile(package_json):
        return None
    try:
        with open(package_json, encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, ValueError):
        return None
    main = payload.get("main") if isinstance(payload, dict) else None
    return main if isinstance(main, str) and main else None


__all__ = [
    "RECURSIVE_MARKER",
    "RESOLVE_EXTENSIONS",
    "WILDCARD_MARKER",
    "classify",
    "resolve_import_path",
    "resolves_as_module",
]
