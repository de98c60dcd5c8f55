"""
Recursive realization of schema nodes against input data.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .conditions import NO_MATCH, SupportsApply, evaluate_all
from .core import resolve
from .errors import FormatError, TransformError
from .parser import WILDCARD
from .schema import ObjectNode, ScalarNode

logger = logging.getLogger(__name__)


class SchemaBuilder:
    """
    Builds output dicts from schema nodes.

    Holds read-only references to the condition registry and the transform
    registry; every call to realize() allocates its own output.
    """

    __slots__ = ("conditions", "transforms", "logger")

    def __init__(
        self,
        conditions: Mapping[str, SupportsApply],
        transforms: Mapping[str, Callable[[Any], Any]],
        log: Optional[logging.Logger] = None,
    ):
        self.conditions = conditions
        self.transforms = transforms
        self.logger = log or logger

    def realize(self, data: Any, node: Any) -> dict[str, Any]:
        """
        Realize one schema node against ``data``.

        Returns:
            A single-key dict mapping the node's name to its value
        """
        if isinstance(node, ObjectNode):
            return {node.name: self._realize_object(data, node)}
        if isinstance(node, ScalarNode):
            return {node.name: self._realize_scalar(data, node)}
        raise FormatError(f"Schema node must be an object or scalar node: {node!r}")

    def _realize_object(self, data: Any, node: ObjectNode) -> Any:
        if node.path is None:
            return copy.deepcopy(node.default)

        found = self._resolve(data, node.path)
        if found is None:
            return copy.deepcopy(node.default)

        elements = found if isinstance(found, list) else [found]
        built = []
        for element in elements:
            attributes: dict[str, Any] = {}
            for attribute in node.attributes:
                attributes.update(self.realize(element, attribute))
            built.append(attributes)

        # Collapse a single result unless the path literally ends in "*"
        if len(built) == 1 and not node.path.endswith(WILDCARD):
            return built[0]
        return built

    def _realize_scalar(self, data: Any, node: ScalarNode) -> Any:
        default = node.default
        if node.path is None:
            return copy.deepcopy(default)

        value = self._resolve(data, node.path)
        if value is None:
            return copy.deepcopy(default)
        value = copy.deepcopy(value)

        if node.conditions is not None:
            value = evaluate_all(value, node.conditions, self.conditions, self.logger)
            if value is NO_MATCH:
                value = copy.deepcopy(default)

        if node.transform is not None and value != default:
            value = self._transform(node.transform)(value)

        return value

    def _transform(self, name: str) -> Callable[[Any], Any]:
        if name not in self.transforms:
            raise TransformError(f"Undefined transform named {name!r}")
        fn = self.transforms[name]
        if not callable(fn):
            raise TransformError(
                f"Transform {name!r} is a {type(fn).__name__}, which is not callable"
            )
        return fn

    def _resolve(self, data: Any, path: str) -> Any:
        return resolve(data, path, self.logger)
