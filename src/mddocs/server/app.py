"""FastAPI application factory."""

import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from mddocs import __version__
from mddocs.config.models import ServerConfig
from mddocs.renderer import MarkdownRenderer, render_page
from mddocs.security.path_validator import SecurityError, ensure_within_root, resolve_candidates

logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; style-src 'self' 'unsafe-inline'; img-src 'self' data: https:; font-src 'self' data:"
)


def _read_candidate(candidate: Path, root_dir: Path) -> str | None:
    """Read a candidate file, or return None if it cannot be served."""
    try:
        ensure_within_root(candidate, root_dir)
    except SecurityError as e:
        logger.debug(f"Skipping candidate: {e}")
        return None

    try:
        return candidate.read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        # Missing, unreadable, a directory or not UTF-8: all mean "try the next one"
        logger.debug(f"Cannot read {candidate}: {e}")
        return None


def _route_paths(base_path: str) -> list[str]:
    """Routes for the prefix itself and everything below it."""
    if base_path == "/":
        return ["/", "/{doc_path:path}"]
    return [base_path, f"{base_path}/{{doc_path:path}}"]


def create_app(config: ServerConfig) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        config: Server configuration

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="mddocs",
        description="Serve a directory of Markdown files as HTML",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store config on app state
    app.state.config = config
    app.state.root_dir = config.root_dir
    app.state.renderer = MarkdownRenderer()

    # Add security headers middleware
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):  # type: ignore
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Content-Security-Policy"] = CONTENT_SECURITY_POLICY

        if "text/html" in response.headers.get("content-type", ""):
            # HTML pages: no cache (always fresh)
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"

        return response

    async def serve_doc(request: Request) -> Response:
        """Serve the first Markdown file matching the requested path."""
        doc_path: str = request.path_params.get("doc_path", "")
        root_dir: Path = app.state.root_dir

        for candidate in resolve_candidates(root_dir, doc_path):
            markdown_text = _read_candidate(candidate, root_dir)
            if markdown_text is None:
                continue

            rendered_html = app.state.renderer.render(markdown_text)
            logger.debug(f"Serving /{doc_path} from {candidate}")
            return HTMLResponse(render_page(app.state.config.title, rendered_html))

        logger.info(f"No markdown file found for route /{doc_path}")
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"No markdown file found for route /{doc_path}",
            },
        )

    for route_path in _route_paths(config.base_path):
        app.add_api_route(
            route_path,
            serve_doc,
            methods=["GET"],
            response_class=HTMLResponse,
            include_in_schema=False,
        )

    return app


def start_docs_server(config: ServerConfig) -> None:
    """
    Build the app for config and serve it until interrupted.

    Args:
        config: Server configuration
    """
    server_app = create_app(config)
    logger.info(f"Docs server running at http://localhost:{config.port}")

    uvicorn.run(
        server_app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
