"""FastAPI server components for mddocs."""

from .app import create_app, start_docs_server

__all__ = ["create_app", "start_docs_server"]
