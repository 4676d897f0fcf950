# ============================================================================
# STATUS DOCUMENT FILTER
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Property projection
# PURPOSE: Parse ?filter= and project the status document onto dot-paths
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Document Filter

    GET /health?filter=status,env.nodeEnv

returns

    {"status": "ok", "env.nodeEnv": "production"}

Rules:
- Paths are comma-separated; each path is dot-separated field names.
- A path may select a leaf or a whole subtree (e.g. "git").
- Every output key is the requested path string itself (flat, not
  re-nested), in request order.
- All paths are checked before anything is returned; the first missing
  path fails the whole request.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from health.exceptions import InvalidFilterPathError

PATH_SEPARATOR = "."
FILTER_SEPARATOR = ","

_MISSING = object()


def parse_filter(raw: Optional[str]) -> Optional[List[str]]:
    """
    Split a raw filter parameter into paths.

    Blank entries are dropped and repeated paths are kept once.

    Returns:
        Ordered list of paths, or None when no filter was requested
    """
    if raw is None:
        return None

    paths: List[str] = []
    for entry in raw.split(FILTER_SEPARATOR):
        path = entry.strip()
        if path and path not in paths:
            paths.append(path)

    return paths or None


def resolve_path(document: Mapping[str, Any], path: str) -> Any:
    """
    Resolve one dot-path against the document.

    Raises:
        InvalidFilterPathError: If any segment is missing
    """
    node: Any = document
    for segment in path.split(PATH_SEPARATOR):
        if not isinstance(node, Mapping):
            raise InvalidFilterPathError(path)
        node = node.get(segment, _MISSING)
        if node is _MISSING:
            raise InvalidFilterPathError(path)
    return node


def project(
    document: Mapping[str, Any],
    paths: Optional[Sequence[str]],
) -> Dict[str, Any]:
    """
    Project the document onto the requested paths.

    Args:
        document: JSON-ready status document
        paths: Requested dot-paths (None or empty = no filter)

    Returns:
        The full document when unfiltered, else one entry per path

    Raises:
        InvalidFilterPathError: For the first path that does not exist
    """
    if not paths:
        return dict(document)

    return {path: resolve_path(document, path) for path in paths}


__all__ = [
    "PATH_SEPARATOR",
    "FILTER_SEPARATOR",
    "parse_filter",
    "resolve_path",
    "project",
]
