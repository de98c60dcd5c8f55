"""
Mapper class - applies a mapping schema to input data.

The Mapper owns a validated schema tree and the conditions built from its
``conditions`` section. Both are fixed at construction, so a single Mapper
can be shared by any number of threads calling apply() on different inputs.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Optional

from .builder import SchemaBuilder
from .conditions import ConditionFactory, ConditionKinds, SupportsApply
from .schema import MappingSchema, load_schema, parse_schema


class Mapper:
    """
    Schema-driven transformation engine.

    Example:
        mapper = Mapper(
            {
                "objects": [
                    {"name": "store", "path": "/name"},
                    {"name": "staff", "path": "/employees/*/name"},
                ]
            }
        )
        mapper.apply({"name": "Corner Shop", "employees": [{"name": "Ann"}]})
        # {"store": "Corner Shop", "staff": ["Ann"]}
    """

    __slots__ = ("_schema", "_conditions", "_transforms", "_builder")

    def __init__(
        self,
        schema: Mapping[str, Any] | MappingSchema,
        transforms: Optional[Mapping[str, Callable[[Any], Any]]] = None,
        conditions: Optional[Mapping[str, ConditionFactory]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize a Mapper from a schema tree.

        Args:
            schema: Parsed schema tree (e.g. from YAML) or a MappingSchema
            transforms: Transform functions, keyed by the names the schema uses
            conditions: Extra condition kinds, keyed by class name, merged
                over the built-in kinds
            logger: Logger for diagnostics; defaults to the module loggers

        Raises:
            FormatError: If the schema is structurally invalid
            ConditionError: If a condition predicate is malformed
            UnknownConditionError: If a condition class is not registered
        """
        log = logger or logging.getLogger(__name__)
        self._schema = parse_schema(schema)

        kinds = ConditionKinds.default().extend(conditions)
        self._conditions: Mapping[str, SupportsApply] = MappingProxyType(
            {
                name: kinds.build(definition)
                for name, definition in self._schema.conditions.items()
            }
        )
        self._transforms = MappingProxyType(dict(transforms or {}))
        self._builder = SchemaBuilder(self._conditions, self._transforms, logger)

        log.debug(
            "Mapper ready: %d objects, %d conditions, %d transforms",
            len(self._schema.objects),
            len(self._conditions),
            len(self._transforms),
        )

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        transforms: Optional[Mapping[str, Callable[[Any], Any]]] = None,
        conditions: Optional[Mapping[str, ConditionFactory]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "Mapper":
        """Build a Mapper from a YAML (or JSON) schema file."""
        return cls(load_schema(path), transforms, conditions, logger)

    @property
    def schema(self) -> MappingSchema:
        return self._schema

    @property
    def conditions(self) -> Mapping[str, SupportsApply]:
        return self._conditions

    @property
    def transforms(self) -> Mapping[str, Callable[[Any], Any]]:
        return self._transforms

    def apply(self, data: Any) -> dict[str, Any]:
        """
        Map input data through every top-level schema node.

        Each node contributes one key; later nodes overwrite earlier nodes
        with the same name.
        """
        result: dict[str, Any] = {}
        for node in self._schema.objects:
            result.update(self._builder.realize(data, node))
        return result

    def __call__(self, data: Any) -> dict[str, Any]:
        return self.apply(data)
