"""mddocs: serve a directory of Markdown files as HTML."""

__version__ = "0.1.0"
__author__ = "mddocs contributors"
__license__ = "MIT"

from mddocs.config.models import RenderConfig, ServerConfig, normalize_base_path

__all__ = [
    "RenderConfig",
    "ServerConfig",
    "normalize_base_path",
    "__version__",
]
