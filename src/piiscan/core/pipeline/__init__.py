"""Post-detection pipeline: conflict resolution."""

from .span_resolver import resolution_key, resolve_spans

__all__ = ["resolution_key", "resolve_spans"]
