"""Strict builder that refuses to build until every property is addressed.

The strict builder forwards every call to a TypeGuardBuilder and tracks which
declared properties have been validated or ignored. ``build()`` raises
MissingPropertiesError while any property is unaddressed, unless a root
validator was supplied, which covers the whole object:

    @dataclass
    class User:
        id: int
        name: str
        email: str | None

    is_user = (
        StrictTypeGuardBuilder.start("User", User)
        .validate_property("id", CommonTypeGuards.basics.number())
        .validate_property("name", CommonTypeGuards.basics.string())
        .build()
    )  # MissingPropertiesError: Missing required properties in 'User': 'email'

The produced guard behaves exactly like one built by TypeGuardBuilder.
"""

import logging
from typing import Any, Generic, TypeVar

from .builder import TypeGuardBuilder
from .exceptions import MissingPropertiesError
from .guards import Guard, Predicate
from .schema import schema_keys

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StrictTypeGuardBuilder(Generic[T]):
    """Completeness-tracking wrapper around TypeGuardBuilder."""

    def __init__(self, root_type_name: str, schema: Any):
        """Initialize builder.

        Args:
            root_type_name: Name of the type being validated. Used in diagnostics.
            schema: Declares the properties that must be addressed (see schema_keys)
        """
        self._internal_builder: TypeGuardBuilder[T] = TypeGuardBuilder(root_type_name)
        self._declared = schema_keys(schema)
        self._addressed: dict[Any, None] = {}
        self._root_validated = False

    @classmethod
    def start(cls, type_name: str, schema: Any) -> "StrictTypeGuardBuilder[T]":
        """Create a strict builder for the named type and its declared properties."""
        return cls(type_name, schema)

    @property
    def root_type_name(self) -> str:
        return self._internal_builder.root_type_name

    @property
    def declared_properties(self) -> tuple[Any, ...]:
        return self._declared

    @property
    def addressed_properties(self) -> tuple[Any, ...]:
        """Properties validated or ignored so far, in call order."""
        return tuple(self._addressed)

    @property
    def missing_properties(self) -> tuple[Any, ...]:
        """Declared properties still unaddressed. Empty once a root validator exists."""
        if self._root_validated:
            return ()
        return tuple(key for key in self._declared if key not in self._addressed)

    @property
    def is_complete(self) -> bool:
        return not self.missing_properties

    def _address(self, property_name: Any) -> None:
        if property_name not in self._declared:
            logger.debug(f"Property '{property_name}' is not declared by '{self.root_type_name}'")
        self._addressed[property_name] = None

    def validate_root(self, predicate: Predicate) -> "StrictTypeGuardBuilder[T]":
        """Validate the entire object. Satisfies the completeness requirement."""
        self._internal_builder.validate_root(predicate)
        self._root_validated = True
        return self

    def validate_property(self, property_name: Any, predicate: Predicate) -> "StrictTypeGuardBuilder[T]":
        """Validate one property and mark it as addressed."""
        self._internal_builder.validate_property(property_name, predicate)
        self._address(property_name)
        return self

    def ignore_property(self, property_name: Any) -> "StrictTypeGuardBuilder[T]":
        """Accept any value for a property and mark it as addressed."""
        self._internal_builder.ignore_property(property_name)
        self._address(property_name)
        return self

    def suppress_missing_validator_warnings(self, *property_names: Any) -> "StrictTypeGuardBuilder[T]":
        """Silence missing-validator diagnostics. Does not address any property."""
        self._internal_builder.suppress_missing_validator_warnings(*property_names)
        return self

    def _ensure_complete(self) -> None:
        missing = self.missing_properties
        if missing:
            raise MissingPropertiesError(self.root_type_name, missing)

    def build(self) -> Guard[T]:
        """Build the guard.

        Raises:
            MissingPropertiesError: If declared properties are unaddressed and no
                root validator was registered
        """
        self._ensure_complete()
        return self._internal_builder.build()

    def build_nullable(self, *nullish_values: Any) -> Guard[T | None]:
        """Same as ``build().nullable(*nullish_values)``, with the same completeness check."""
        self._ensure_complete()
        return self._internal_builder.build_nullable(*nullish_values)
