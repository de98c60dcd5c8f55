"""
Evaluation of a scalar's condition references against a resolved value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional

from ..core import resolve
from ..errors import ConditionError
from .types import SupportsApply

if TYPE_CHECKING:
    from ..schema import ConditionRef


class _NoMatch:
    """Sentinel returned when no referenced condition matched."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __bool__(self) -> bool:
        return False


NO_MATCH = _NoMatch()


def evaluate_all(
    value: Any,
    refs: Sequence[ConditionRef],
    registry: Mapping[str, SupportsApply],
    logger: Optional[logging.Logger] = None,
) -> Any:
    """
    Filter and relabel a value through condition references, in order.

    For each reference, the value (a list, or a single value treated as a
    one-element list) is filtered to the elements whose comparand satisfies
    the condition. The comparand is the element itself, or the element's
    ``field`` sub-path when one is given. A reference that keeps nothing
    contributes nothing; otherwise it contributes its ``output`` if set, else
    the kept elements (unwrapped when a single value kept its one element).

    Returns:
        The only contribution when exactly one reference matched, a list of
        contributions when several did, or NO_MATCH when none did.

    Raises:
        ConditionError: If a reference names an undefined condition
    """
    matched: list[Any] = []
    is_list = isinstance(value, list)
    elements = value if is_list else [value]

    for ref in refs:
        if ref.name not in registry:
            raise ConditionError(f"Unknown condition named {ref.name!r}")
        condition = registry[ref.name]

        kept = [
            element
            for element in elements
            if condition.apply(_comparand(element, ref.field, logger))
        ]
        if not kept:
            continue

        result: Any = kept[0] if len(kept) == 1 and not is_list else kept
        matched.append(ref.output if ref.output is not None else result)

    if not matched:
        return NO_MATCH
    return matched[0] if len(matched) == 1 else matched


def _comparand(element: Any, field: Optional[str], logger: Optional[logging.Logger]) -> Any:
    if field is None:
        return element
    return resolve(element, field, logger)
