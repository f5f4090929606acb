"""Directory import rewriting for JavaScript modules."""

from .config import ConfigError, TransformOptions, load_config, options_from_mapping
from .models import ClassifiedPath, DiscoveredFile, ImportRequest, RewriteResult
from .rewriter import RewriteOutcome, SourceRewriter, rewrite_source
from .scope import Scope
from .transform import DirImportTransform, ImportVisitor, TransformContext

__all__ = [
    "ClassifiedPath",
    "ConfigError",
    "DirImportTransform",
    "DiscoveredFile",
    "ImportRequest",
    "ImportVisitor",
    "RewriteOutcome",
    "RewriteResult",
    "Scope",
    "SourceRewriter",
    "TransformContext",
    "TransformOptions",
    "load_config",
    "options_from_mapping",
    "rewrite_source",
]
