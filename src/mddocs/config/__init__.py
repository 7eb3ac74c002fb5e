"""Configuration for mddocs."""

from .models import RenderConfig, ServerConfig, normalize_base_path

__all__ = ["RenderConfig", "ServerConfig", "normalize_base_path"]
