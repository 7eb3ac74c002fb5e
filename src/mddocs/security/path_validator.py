"""Path resolution and containment checks for served documents."""

import os
import posixpath
import re
from pathlib import Path

INDEX_FILE = "index.md"
MARKDOWN_SUFFIX = ".md"

# ".." followed by either separator or the end of the string
_TRAVERSAL_RE = re.compile(r"\.\.(/|\\|$)")


class SecurityError(Exception):
    """Raised when a candidate path falls outside the served root."""

    pass


def _sanitize(request_path: str) -> str:
    """Reduce an untrusted request path to a relative path without traversal."""
    safe_path = posixpath.normpath(f"/{request_path}")

    # normpath only knows "/"; dropping "..\" may expose a new leading separator
    while True:
        stripped = _TRAVERSAL_RE.sub("", safe_path.lstrip("/\\"))
        if stripped == safe_path:
            return safe_path
        safe_path = stripped


def resolve_candidates(root_dir: Path, request_path: str) -> list[Path]:
    """
    Build the ordered list of files that may satisfy a request.

    The request path is normalized against a synthetic root, leading
    separators are dropped and any leftover ``..`` segments are removed.
    An empty result maps to ``index.md``; anything else maps to the path
    itself, the path with ``.md`` appended and ``index.md`` inside it.

    Nothing here touches the filesystem.

    Args:
        root_dir: Absolute root directory being served
        request_path: Raw path captured from the URL

    Returns:
        Absolute candidate paths, most specific first
    """
    safe_path = _sanitize(request_path)

    if safe_path == "":
        relative = [INDEX_FILE]
    else:
        relative = [
            safe_path,
            f"{safe_path}{MARKDOWN_SUFFIX}",
            posixpath.join(safe_path, INDEX_FILE),
        ]

    return [Path(os.path.normpath(os.path.join(root_dir, candidate))) for candidate in relative]


def is_within_root(candidate: Path, root_dir: Path) -> bool:
    """
    Check textually that candidate lies inside root_dir.

    Symlinks are not followed; a link inside the root that points outside
    of it passes this check.

    Args:
        candidate: Absolute candidate path
        root_dir: Absolute root directory

    Returns:
        True if candidate is root_dir or below it
    """
    root = str(root_dir)
    path = str(candidate)
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


def ensure_within_root(candidate: Path, root_dir: Path) -> Path:
    """
    Validate that candidate is inside root_dir.

    Args:
        candidate: Absolute candidate path
        root_dir: Absolute root directory

    Returns:
        The candidate unchanged

    Raises:
        SecurityError: If candidate is outside root_dir
    """
    if not is_within_root(candidate, root_dir):
        raise SecurityError(f"Access denied: {candidate} is outside serve root")
    return candidate
