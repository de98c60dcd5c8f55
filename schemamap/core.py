"""
Core resolve function for schemamap data traversal.
"""

import logging
from typing import Any, Optional

from .lib.core_helpers import traverse_path
from .parser import parse_path


def resolve(
    source: Any,
    path: str,
    logger: Optional[logging.Logger] = None,
) -> Any:
    """
    Extract values from nested data structures using path notation.

    Args:
        source: Source data to traverse
        path: Slash-delimited path (e.g., "/inventory/0/price")
        logger: Logger receiving diagnostics about unresolvable paths

    Returns:
        Value at path, or None if the path cannot be followed

    Raises:
        PathError: If a "*" segment is applied to a value that is not a list
        TypeError: If path is not a string

    Note:
        A wildcard keeps one entry per list element, so missing values show
        up as None entries rather than being dropped:
        - resolve({"a": [{"b": 1}, {}]}, "/a/*/b") returns [1, None]

    Examples:
        resolve(d, "/store/name")         # Nested access
        resolve(d, "/inventory/0")        # List index
        resolve(d, "/employees/*/name")   # Map over list
    """
    return traverse_path(source, parse_path(path), logger)
