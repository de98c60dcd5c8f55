"""
Helper functions for path resolution.
"""

import logging
from typing import Any, Optional

from ..errors import PathError
from ..parser import Path, PathSegment, PathSegmentType

logger = logging.getLogger(__name__)


def traverse_path(
    data: Any, path: Path, log: Optional[logging.Logger] = None
) -> Any:
    """
    Traverse data structure according to path.

    Returns None when the path cannot be followed (missing key, null value,
    index out of range). A wildcard maps the remaining path over each list
    element and returns the list of per-element results.
    """
    log = log or logger
    current = data

    for idx, segment in enumerate(path.segments):
        if current is None:
            log.debug("Could not find %s: null value at %s", path, _prefix(path, idx))
            return None

        if segment.type == PathSegmentType.WILDCARD:
            if not isinstance(current, list):
                raise PathError(
                    f"{_prefix(path, idx)} is not a list "
                    f"(got {type(current).__name__})"
                )
            rest = path.tail(idx + 1)
            return [traverse_path(item, rest, log) for item in current]

        current = _traverse_segment(current, segment, path, log)

    return current


def _traverse_segment(
    data: Any, segment: PathSegment, path: Path, log: logging.Logger
) -> Any:
    """Traverse a key in a dict or an index in a list."""
    if isinstance(data, dict):
        if segment.value not in data:
            log.debug("Key %r not found while resolving %s", segment.value, path)
        return data.get(segment.value)

    if isinstance(data, list):
        index = segment.as_index()
        if index is None:
            log.debug(
                "Segment %r is not a list index while resolving %s",
                segment.value,
                path,
            )
            return None
        if index >= len(data):
            log.debug("Index went out of bounds while resolving %s", path)
            return None
        return data[index]

    log.debug(
        "Cannot look up %r in a %s while resolving %s",
        segment.value,
        type(data).__name__,
        path,
    )
    return None


def _prefix(path: Path, end: int) -> str:
    return str(Path(path.segments[:end]))
