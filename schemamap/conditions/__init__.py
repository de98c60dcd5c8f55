"""
Schemamap Conditions - composable predicates for filtering mapped values.

Usage:
    from schemamap.conditions import ConditionKinds, In, LessThan

    cheap_fruit = In(["fruit"]) & LessThan(1)
    cheap_fruit.apply(0.5)

    kinds = ConditionKinds.default().extend({"Apple": apple_factory})
    condition = kinds.build({"class": "Apple", "predicate": None})
"""

from .builtins import (
    BUILTIN_KINDS,
    And,
    GreaterThan,
    In,
    LessThan,
    Not,
    Or,
    Regex,
    Truthy,
)
from .core import Condition, ConditionKinds, to_condition
from .evaluate import NO_MATCH, evaluate_all
from .types import CheckFn, ConditionFactory, SupportsApply

__all__ = [
    # Types
    "CheckFn",
    "ConditionFactory",
    "SupportsApply",
    # Core
    "Condition",
    "ConditionKinds",
    "to_condition",
    # Built-in kinds
    "BUILTIN_KINDS",
    "In",
    "Regex",
    "Truthy",
    "LessThan",
    "GreaterThan",
    "And",
    "Or",
    "Not",
    # Evaluation
    "NO_MATCH",
    "evaluate_all",
]
