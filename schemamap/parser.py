"""
Path parser for schemamap path expressions.

Supports:
- Keys: "/store/name"
- List indices: "/inventory/0/price" (a segment is an index when the value
  it is applied to is a list)
- Wildcards: "/inventory/*/price" (map the rest of the path over a list)

Leading, trailing and repeated slashes are ignored.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

SEPARATOR = "/"
WILDCARD = "*"


class PathSegmentType(Enum):
    KEY = auto()
    WILDCARD = auto()


@dataclass(frozen=True)
class PathSegment:
    """Represents a single segment in a path."""

    type: PathSegmentType
    value: str

    @classmethod
    def key(cls, name: str) -> "PathSegment":
        return cls(PathSegmentType.KEY, name)

    @classmethod
    def wildcard(cls) -> "PathSegment":
        return cls(PathSegmentType.WILDCARD, WILDCARD)

    def as_index(self) -> Optional[int]:
        """Interpret the segment as a non-negative list index, if it is one."""
        if self.value.isascii() and self.value.isdigit():
            return int(self.value)
        return None


@dataclass(frozen=True)
class Path:
    """Represents a parsed path expression."""

    segments: tuple[PathSegment, ...]

    def __str__(self) -> str:
        return SEPARATOR + SEPARATOR.join(s.value for s in self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def tail(self, start: int) -> "Path":
        """The path made of every segment from ``start`` onwards."""
        return Path(self.segments[start:])


class PathParser:
    """Parser for slash-delimited path expressions."""

    def parse(self, path_str: str) -> Path:
        """Parse a path string into a Path object."""
        if not isinstance(path_str, str):
            raise TypeError(f"path must be str, not {type(path_str).__name__}")

        segments = []
        for part in path_str.split(SEPARATOR):
            if not part:
                continue
            if part == WILDCARD:
                segments.append(PathSegment.wildcard())
            else:
                segments.append(PathSegment.key(part))

        return Path(tuple(segments))


def parse_path(path_str: str) -> Path:
    """Convenience function to parse a path string."""
    parser = PathParser()
    return parser.parse(path_str)
