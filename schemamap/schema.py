"""
Schema tree models for schemamap.

A mapping schema has two sections:

    conditions:            # optional, name -> condition definition
      cheap:
        class: LessThan
        predicate: 1
    objects:               # required, one output key per node
      - name: store_name
        path: /name
      - name: inventory
        path: /inventory/*
        attributes:
          - name: item_name
            path: /itemName

A node with ``attributes`` is an object node, anything else is a scalar
node. The tree is validated with pydantic and is immutable once loaded.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    field_validator,
)

from .errors import FormatError


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class ConditionDefinition(_Node):
    """A named entry of the ``conditions`` section."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str = Field(alias="class")
    predicate: Any = None


class ConditionRef(_Node):
    """A scalar node's reference to a registered condition."""

    name: str
    output: Any = None
    field: Optional[str] = None


class ScalarNode(_Node):
    """Maps the value at ``path`` to a single output key."""

    name: str = Field(min_length=1)
    path: Optional[str] = None
    default: Any = None
    conditions: Optional[list[ConditionRef]] = None
    transform: Optional[str] = None


class ObjectNode(_Node):
    """Maps each element found at ``path`` to a dict built from ``attributes``."""

    name: str = Field(min_length=1)
    path: Optional[str] = None
    default: Any = None
    attributes: list[SchemaNode] = Field(min_length=1)


def _node_tag(raw: Any) -> Optional[str]:
    if isinstance(raw, dict):
        return "object" if "attributes" in raw else "scalar"
    if isinstance(raw, ObjectNode):
        return "object"
    if isinstance(raw, ScalarNode):
        return "scalar"
    return None


SchemaNode = Annotated[
    Union[
        Annotated[ObjectNode, Tag("object")],
        Annotated[ScalarNode, Tag("scalar")],
    ],
    Discriminator(_node_tag),
]

ObjectNode.model_rebuild()


class MappingSchema(_Node):
    """A complete mapping schema: condition definitions plus output nodes."""

    conditions: dict[str, ConditionDefinition] = Field(default_factory=dict)
    objects: list[SchemaNode] = Field(min_length=1)

    @field_validator("conditions", mode="before")
    @classmethod
    def _empty_conditions(cls, value: Any) -> Any:
        # "conditions:" with nothing under it loads as None
        return {} if value is None else value


def parse_schema(tree: Any) -> MappingSchema:
    """
    Validate a parsed schema tree.

    Args:
        tree: A mapping (as loaded from YAML or JSON) or a MappingSchema

    Raises:
        FormatError: If the tree is not a valid schema
    """
    if isinstance(tree, MappingSchema):
        return tree
    if not isinstance(tree, dict):
        raise FormatError(f"Schema must be a mapping, not {type(tree).__name__}")
    if tree.get("objects") is None:
        raise FormatError("Must define objects under the 'objects' key")

    try:
        return MappingSchema.model_validate(tree)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise FormatError(f"Invalid schema: {problems}") from e


def load_schema(path: str | Path) -> MappingSchema:
    """
    Load and validate a YAML (or JSON) schema file.

    Raises:
        FormatError: If the file is not valid YAML or not a valid schema
        OSError: If the file cannot be read
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        tree = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FormatError(f"Could not parse schema file {path}: {e}") from e
    return parse_schema(tree)
