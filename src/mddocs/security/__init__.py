"""Request path sandboxing."""

from .path_validator import SecurityError, ensure_within_root, is_within_root, resolve_candidates

__all__ = ["SecurityError", "ensure_within_root", "is_within_root", "resolve_candidates"]
