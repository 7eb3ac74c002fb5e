from pathlib import Path

import pytest

from mddocs.security.path_validator import (
    SecurityError,
    ensure_within_root,
    is_within_root,
    resolve_candidates,
)

ROOT = Path("/srv/docs")

TRAVERSAL_INPUTS = [
    "..",
    "../",
    "../../etc/passwd",
    "guide/../../../etc/passwd",
    "..\\..\\etc\\passwd",
    "..\\../..\\secret",
    "....",
    "..../..../x",
    "....//....//etc",
    ".../...//../x",
    "/../../etc/passwd",
    "//etc/passwd",
    "a/b/../../../..",
    "..%2F..%2Fetc",
    "..\\/etc/passwd",
    "..\\/..\\/x",
    "\\..\\/etc",
]


def test_empty_path_yields_index_only() -> None:
    assert resolve_candidates(ROOT, "") == [ROOT / "index.md"]


def test_root_like_paths_yield_index_only() -> None:
    for request_path in ("/", "//", ".", "./", ".."):
        assert resolve_candidates(ROOT, request_path) == [ROOT / "index.md"]


def test_candidates_in_priority_order() -> None:
    assert resolve_candidates(ROOT, "guide") == [
        ROOT / "guide",
        ROOT / "guide.md",
        ROOT / "guide" / "index.md",
    ]


def test_nested_path() -> None:
    assert resolve_candidates(ROOT, "guide/install") == [
        ROOT / "guide" / "install",
        ROOT / "guide" / "install.md",
        ROOT / "guide" / "install" / "index.md",
    ]


def test_trailing_separator_is_ignored() -> None:
    assert resolve_candidates(ROOT, "api/") == resolve_candidates(ROOT, "api")


def test_dot_segments_collapse_inside_root() -> None:
    assert resolve_candidates(ROOT, "guide/./../api") == resolve_candidates(ROOT, "api")


def test_upward_traversal_is_neutralized() -> None:
    assert resolve_candidates(ROOT, "../../etc/passwd") == resolve_candidates(ROOT, "etc/passwd")


def test_backslash_traversal_is_stripped() -> None:
    assert resolve_candidates(ROOT, "..\\..\\secret") == resolve_candidates(ROOT, "secret")


def test_removal_does_not_expose_absolute_path() -> None:
    # dropping "..\" leaves "/etc/passwd", which must not replace the root
    assert resolve_candidates(ROOT, "..\\/etc/passwd") == resolve_candidates(ROOT, "etc/passwd")
    assert resolve_candidates(ROOT, "..\\/..\\/x") == resolve_candidates(ROOT, "x")


def test_removal_does_not_splice_new_traversal() -> None:
    # a single removal pass would turn "...." into ".."
    assert resolve_candidates(ROOT, "....") == [ROOT / "index.md"]


@pytest.mark.parametrize("request_path", TRAVERSAL_INPUTS)
def test_candidates_never_escape_root(request_path: str) -> None:
    candidates = resolve_candidates(ROOT, request_path)

    assert 1 <= len(candidates) <= 3
    for candidate in candidates:
        assert candidate.is_absolute()
        assert str(candidate).startswith(str(ROOT))
        assert is_within_root(candidate, ROOT)


def test_resolution_does_not_touch_filesystem(tmp_path: Path) -> None:
    root = tmp_path / "missing"

    candidates = resolve_candidates(root, "guide")

    assert candidates[0] == root / "guide"
    assert not root.exists()


def test_is_within_root() -> None:
    assert is_within_root(ROOT, ROOT)
    assert is_within_root(ROOT / "guide.md", ROOT)
    assert not is_within_root(Path("/srv/index.md"), ROOT)
    assert not is_within_root(Path("/etc/passwd"), ROOT)


def test_is_within_root_requires_separator_boundary() -> None:
    assert not is_within_root(Path("/srv/docs-private/index.md"), ROOT)


def test_ensure_within_root() -> None:
    assert ensure_within_root(ROOT / "a.md", ROOT) == ROOT / "a.md"

    with pytest.raises(SecurityError):
        ensure_within_root(Path("/srv/other.md"), ROOT)
