"""
Core condition classes for schemamap.

Provides the Condition dataclass with functional composition and the
ConditionKinds table that turns condition definitions into conditions.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..errors import ConditionError, UnknownConditionError
from .types import CheckFn, ConditionFactory, SupportsApply

KIND_SUFFIX = "Condition"


@dataclass(frozen=True, slots=True)
class Condition:
    """
    Immutable predicate node.

    Wraps a check function with the name of the kind that built it.
    """

    check: CheckFn
    kind: str = "Predicate"

    def apply(self, value: Any) -> bool:
        return bool(self.check(value))

    def __call__(self, value: Any) -> bool:
        return self.apply(value)

    def __and__(self, other: SupportsApply) -> Condition:
        """
        Combine with AND logic: both must pass.

        Usage:
            In(["fruit"]) & LessThan(1)
        """
        other_c = to_condition(other)

        def combined_check(x: Any) -> bool:
            return self.apply(x) and other_c.apply(x)

        return Condition(check=combined_check, kind="And")

    def __or__(self, other: SupportsApply) -> Condition:
        """Combine with OR logic: at least one must pass."""
        other_c = to_condition(other)

        def combined_check(x: Any) -> bool:
            return self.apply(x) or other_c.apply(x)

        return Condition(check=combined_check, kind="Or")

    def __invert__(self) -> Condition:
        def inverted_check(x: Any) -> bool:
            return not self.apply(x)

        return Condition(check=inverted_check, kind="Not")


def to_condition(c: Any) -> Condition:
    """
    Coerce a value to a Condition.

    Conversion rules:
        Condition -> pass through
        object with apply() -> Condition wrapping its apply method
        Callable -> Condition(check=callable)
    """
    if isinstance(c, Condition):
        return c

    if isinstance(c, SupportsApply):
        return Condition(check=c.apply, kind=type(c).__name__)

    if callable(c):
        return Condition(check=c)

    raise TypeError(f"Cannot convert {type(c).__name__} to condition")


class ConditionKinds(Mapping[str, ConditionFactory]):
    """
    Read-only table of condition kinds, keyed by class name.

    A factory receives the raw predicate payload and this table, so kinds
    that nest other definitions (And, Or, Not) build them with the same
    set of kinds, user-supplied ones included.
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, ConditionFactory] | None = None):
        self._factories = MappingProxyType(dict(factories or {}))

    @classmethod
    def default(cls) -> ConditionKinds:
        """The built-in kinds."""
        from .builtins import BUILTIN_KINDS

        return cls(BUILTIN_KINDS)

    def extend(self, factories: Mapping[str, ConditionFactory] | None) -> ConditionKinds:
        """Return a new table with ``factories`` merged over this one."""
        if not factories:
            return self
        for name, factory in factories.items():
            if not callable(factory):
                raise TypeError(f"Condition kind {name!r} is not callable")
        return ConditionKinds({**self._factories, **factories})

    def __getitem__(self, name: str) -> ConditionFactory:
        return self._factories[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def lookup(self, kind: str) -> ConditionFactory:
        """
        Find the factory for a class name.

        "InCondition" falls back to "In" when only the short form exists.
        """
        if kind in self._factories:
            return self._factories[kind]
        if kind.endswith(KIND_SUFFIX):
            short = kind[: -len(KIND_SUFFIX)]
            if short in self._factories:
                return self._factories[short]
        raise UnknownConditionError(f"No condition kind named {kind!r}")

    def build(self, definition: Any) -> SupportsApply:
        """
        Instantiate a condition definition.

        Args:
            definition: A mapping with a "class" key and an optional
                "predicate" payload, or a ConditionDefinition model

        Raises:
            ConditionError: If the definition is not a mapping with a class
            UnknownConditionError: If no kind is registered under the class
        """
        kind, predicate = _unpack_definition(definition)
        condition = self.lookup(kind)(predicate, self)

        if isinstance(condition, SupportsApply):
            return condition
        if callable(condition):
            return Condition(check=condition, kind=kind)
        raise ConditionError(
            f"Condition kind {kind!r} built a {type(condition).__name__}, "
            "which has no apply method"
        )


def _unpack_definition(definition: Any) -> tuple[str, Any]:
    if hasattr(definition, "kind") and hasattr(definition, "predicate"):
        return definition.kind, definition.predicate

    if not isinstance(definition, Mapping) or "class" not in definition:
        raise ConditionError(
            f"Condition definition must be a mapping with a 'class': {definition!r}"
        )

    kind = definition["class"]
    if not isinstance(kind, str):
        raise ConditionError(
            f"Condition class must be a string, not {type(kind).__name__}"
        )
    return kind, definition.get("predicate")
