"""
Path helpers for cross-file references.

Output locations are segment lists relative to the project root
(``["src", "views"]``). Relative prefixes are computed on those segments,
never on the file system.
"""

from __future__ import annotations

import posixpath
from collections.abc import Sequence


def generate_local_dependencies_prefix(from_path: Sequence[str], to_path: Sequence[str]) -> str:
    """
    Relative prefix from the folder ``from_path`` to the folder ``to_path``.

    Examples:
        >>> generate_local_dependencies_prefix(["src", "views"], ["src", "components"])
        '../components'
        >>> generate_local_dependencies_prefix(["src"], ["src", "views"])
        './views'
        >>> generate_local_dependencies_prefix(["src", "components"], ["src", "components"])
        '.'
    """
    source = "/" + "/".join(segment for segment in from_path if segment)
    target = "/" + "/".join(segment for segment in to_path if segment)
    relative = posixpath.relpath(target, source)
    if relative == "." or relative.startswith(".."):
        return relative
    return f"./{relative}"


def prefix_assets_path(prefix: str | None, path: str | None) -> str:
    """
    Prefix an absolute asset path.

    Only paths starting with ``/`` are rewritten; URLs and relative paths are
    returned unchanged.

    Examples:
        >>> prefix_assets_path("/static", "/logo.png")
        '/static/logo.png'
        >>> prefix_assets_path("/static/", "/logo.png")
        '/static/logo.png'
        >>> prefix_assets_path("/static", "https://cdn.example.com/logo.png")
        'https://cdn.example.com/logo.png'
    """
    if not path:
        return ""
    if not prefix or not path.startswith("/"):
        return path
    return f"{prefix.rstrip('/')}{path}"
