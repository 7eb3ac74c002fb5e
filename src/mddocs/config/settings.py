"""Application settings and configuration."""

import os

from mddocs.config.models import DEFAULT_BASE_PATH, DEFAULT_PORT, DEFAULT_TITLE

# Server defaults
DEFAULT_HOST = os.getenv("MDDOCS_HOST", "127.0.0.1")
DEFAULT_SERVER_PORT = int(os.getenv("MDDOCS_PORT", str(DEFAULT_PORT)))
DEFAULT_SERVER_BASE_PATH = os.getenv("MDDOCS_BASE_PATH", DEFAULT_BASE_PATH)
DEFAULT_SERVER_TITLE = os.getenv("MDDOCS_TITLE", DEFAULT_TITLE)
DEFAULT_LOG_LEVEL = os.getenv("MDDOCS_LOG_LEVEL", "INFO")

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_SERVER_PORT",
    "DEFAULT_SERVER_BASE_PATH",
    "DEFAULT_SERVER_TITLE",
    "DEFAULT_LOG_LEVEL",
]
