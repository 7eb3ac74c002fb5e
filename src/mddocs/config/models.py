"""Core configuration models for mddocs."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_TITLE = "Documentation"
DEFAULT_BASE_PATH = "/"
DEFAULT_PORT = 3000

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def normalize_base_path(base_path: str) -> str:
    """
    Normalize a URL prefix.

    The result always starts with "/" and never ends with "/" unless it
    is exactly "/". Runs of slashes collapse to one.

    Args:
        base_path: Prefix as configured by the user

    Returns:
        Normalized prefix
    """
    normalized = re.sub(r"/+", "/", f"/{base_path.strip()}").rstrip("/")
    return normalized or "/"


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the Markdown renderer."""

    extensions: list[str] = field(default_factory=list)  # Markdown extensions to enable
    extension_configs: dict[str, Any] = field(
        default_factory=dict
    )  # Extension-specific settings

    @classmethod
    def default(cls) -> "RenderConfig":
        """GitHub-flavoured rendering with single newlines as line breaks."""
        return cls(
            extensions=[
                "markdown.extensions.tables",
                "markdown.extensions.sane_lists",
                "markdown.extensions.nl2br",
                "pymdownx.highlight",
                "pymdownx.superfences",
                "pymdownx.tilde",
                "pymdownx.tasklist",
                "pymdownx.magiclink",
            ],
            extension_configs={
                "pymdownx.highlight": {
                    # emit <code class="language-x"> and leave styling to the page
                    "use_pygments": False,
                },
                "pymdownx.tilde": {
                    "subscript": False,
                },
            },
        )


@dataclass
class ServerConfig:
    """Configuration for the docs server."""

    docs_dir: Path  # Root directory to serve
    base_path: str = DEFAULT_BASE_PATH  # URL prefix for all pages
    title: str = DEFAULT_TITLE  # Page <title>
    port: int = DEFAULT_PORT  # Port number
    host: str = "127.0.0.1"  # Bind address
    log_level: str = "INFO"  # Logging level

    def __post_init__(self) -> None:
        self.docs_dir = Path(self.docs_dir)
        self.base_path = normalize_base_path(self.base_path)

    @property
    def root_dir(self) -> Path:
        """Absolute root directory used as the security boundary."""
        return self.docs_dir.resolve(strict=False)

    def validate(self) -> None:
        """Validate configuration values."""
        if not (1 <= self.port <= 65535):
            raise ValueError("Port must be 1-65535")
        if not self.docs_dir.exists():
            raise ValueError(f"Path does not exist: {self.docs_dir}")
        if not self.docs_dir.is_dir():
            raise ValueError(f"Not a directory: {self.docs_dir}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
