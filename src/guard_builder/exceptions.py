"""Exceptions raised while constructing type guards.

Built guards never raise; everything here is surfaced at construction time.
"""

from collections.abc import Iterable


class GuardBuilderError(ValueError):
    """Base exception for guard construction errors."""
    pass


class BuilderFinalizedError(GuardBuilderError):
    """Raised when a builder is used after build() has consumed it."""

    def __init__(self, schema_name: str, operation: str):
        self.schema_name = schema_name
        self.operation = operation
        super().__init__(
            f"Builder for '{schema_name}' has already been built; "
            f"cannot call {operation}() on a finalized builder"
        )


class SchemaError(GuardBuilderError):
    """Raised when the declared key set of a schema cannot be determined."""
    pass


class MissingPropertiesError(GuardBuilderError):
    """Raised by the strict builder when properties were left unaddressed."""

    hint = (
        "Add validate_property()/ignore_property() calls for the missing properties "
        "or use validate_root() for custom validation"
    )

    def __init__(self, schema_name: str, missing: Iterable[str]):
        self.schema_name = schema_name
        self.missing = tuple(missing)
        listed = ", ".join(f"'{key}'" for key in self.missing)
        super().__init__(
            f"Missing required properties in '{schema_name}': {listed}. {self.hint}"
        )
