"""
Built-in condition kinds for schemamap.

Each kind is a factory taking the raw predicate payload from the schema and
the ConditionKinds table, and returning a Condition. Payloads are validated
when the schema is loaded, so a bad predicate fails before any data is
mapped.
"""

from __future__ import annotations

import re
from numbers import Real
from typing import Any

from ..errors import ConditionError
from .core import Condition, ConditionKinds, to_condition


def In(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """
    True if the value, or any element of a list value, is in the predicate.

    Doubles as an "equals" check with a one-element predicate.

    Usage:
        In(["fruit", "vegetable"])
    """
    if not isinstance(predicate, list):
        raise ConditionError(
            f"In condition predicate must be a list, not {type(predicate).__name__}"
        )
    allowed = list(predicate)

    def check(x: Any) -> bool:
        values = x if isinstance(x, list) else [x]
        return any(_same_value(v, a) for v in values for a in allowed)

    return Condition(check=check, kind="In")


def Regex(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """
    True if the value matches the pattern anywhere.

    Usage:
        Regex(r"^\\d+$")
    """
    try:
        compiled = re.compile("" if predicate is None else str(predicate))
    except re.error as e:
        raise ConditionError(f"Invalid Regex condition pattern {predicate!r}: {e}") from e

    def check(x: Any) -> bool:
        if x is None:
            return False
        return compiled.search(x if isinstance(x, str) else str(x)) is not None

    return Condition(check=check, kind="Regex")


def Truthy(predicate: Any = None, kinds: ConditionKinds | None = None) -> Condition:
    """
    True if the value, or any element of a list value, is truthy.

    Only None and False count as falsy; 0 and "" are truthy. The predicate
    payload is ignored.
    """

    def check(x: Any) -> bool:
        values = x if isinstance(x, list) else [x]
        return any(_is_truthy(v) for v in values)

    return Condition(check=check, kind="Any")


def LessThan(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """True if value < predicate."""
    bound = _require_number("LessThan", predicate)

    def check(x: Any) -> bool:
        return _is_number(x) and x < bound

    return Condition(check=check, kind="LessThan")


def GreaterThan(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """True if value > predicate."""
    bound = _require_number("GreaterThan", predicate)

    def check(x: Any) -> bool:
        return _is_number(x) and x > bound

    return Condition(check=check, kind="GreaterThan")


def And(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """
    True if every nested condition is true.

    Usage:
        And([{"class": "GreaterThan", "predicate": 0},
             {"class": "LessThan", "predicate": 10}])
    """
    parts = _build_many("And", predicate, kinds)

    def check(x: Any) -> bool:
        return all(part.apply(x) for part in parts)

    return Condition(check=check, kind="And")


def Or(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """True if at least one nested condition is true."""
    parts = _build_many("Or", predicate, kinds)

    def check(x: Any) -> bool:
        return any(part.apply(x) for part in parts)

    return Condition(check=check, kind="Or")


def Not(predicate: Any, kinds: ConditionKinds | None = None) -> Condition:
    """True if the nested condition is false."""
    if not isinstance(predicate, dict) or "class" not in predicate:
        raise ConditionError("Not condition predicate must be a condition definition")
    inner = to_condition((kinds or ConditionKinds.default()).build(predicate))
    return ~inner


BUILTIN_KINDS = {
    "In": In,
    "Regex": Regex,
    "Any": Truthy,
    "LessThan": LessThan,
    "GreaterThan": GreaterThan,
    "And": And,
    "Or": Or,
    "Not": Not,
}


def _is_truthy(value: Any) -> bool:
    return value is not None and value is not False


def _same_value(value: Any, member: Any) -> bool:
    # True and 1 are different values here
    if isinstance(value, bool) != isinstance(member, bool):
        return False
    return value == member


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _require_number(kind: str, predicate: Any) -> Any:
    if not _is_number(predicate):
        raise ConditionError(
            f"{kind} condition predicate must be a number, "
            f"not {type(predicate).__name__}"
        )
    return predicate


def _build_many(kind: str, predicate: Any, kinds: ConditionKinds | None) -> list:
    if not isinstance(predicate, list) or len(predicate) < 2:
        raise ConditionError(
            f"{kind} condition predicate must be a list of at least two conditions"
        )
    kinds = kinds or ConditionKinds.default()
    return [kinds.build(definition) for definition in predicate]
