from .conditions import ConditionKinds, evaluate_all
from .core import resolve
from .errors import (
    ConditionError,
    FormatError,
    PathError,
    SchemamapError,
    TransformError,
    UnknownConditionError,
)
from .mapper import Mapper
from .schema import MappingSchema, load_schema, parse_schema

__all__ = [
    "resolve",
    "Mapper",
    "MappingSchema",
    "ConditionKinds",
    "evaluate_all",
    "load_schema",
    "parse_schema",
    "SchemamapError",
    "FormatError",
    "PathError",
    "ConditionError",
    "TransformError",
    "UnknownConditionError",
]
