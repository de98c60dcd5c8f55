"""
Type definitions for schemamap conditions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .core import ConditionKinds


@runtime_checkable
class SupportsApply(Protocol):
    """Anything usable as a condition: it answers apply(value) -> bool."""

    def apply(self, value: Any) -> bool: ...


# Type aliases
CheckFn = Callable[[Any], bool]
ConditionFactory = Callable[[Any, "ConditionKinds"], SupportsApply]
