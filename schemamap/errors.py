"""
Exception types raised by the schemamap engine.
"""


class SchemamapError(Exception):
    """Base class for all schemamap errors."""


class FormatError(SchemamapError, ValueError):
    """The schema tree is structurally invalid."""


class PathError(SchemamapError, ValueError):
    """A wildcard segment was applied to a value that is not a list."""


class ConditionError(SchemamapError, ValueError):
    """A condition payload is malformed or a condition name is undefined."""


class TransformError(SchemamapError, ValueError):
    """A transform is not registered or is not callable."""


class UnknownConditionError(SchemamapError, LookupError):
    """
    No condition kind is registered under the requested class name.

    Kept apart from ConditionError: this means a plugin is missing, not that
    a predicate is badly configured.
    """
