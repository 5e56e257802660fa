"""Permissive builder for record-shaped type guards.

Validators are registered per property and/or for the whole object, then
``build()`` snapshots them into a guard:

    is_user = (
        TypeGuardBuilder.start("User")
        .validate_property("id", CommonTypeGuards.basics.number())
        .validate_property("username", CommonTypeGuards.basics.string())
        .build()
    )

The guard only inspects keys actually present on the value. A declared property
that is absent from the input is not reported unless one of its validators
rejects MISSING, which is how optional properties are expressed.
"""

import logging
from typing import Any, Generic, TypeVar

from .diagnostics import sink
from .exceptions import BuilderFinalizedError
from .guards import Guard, Predicate
from .objects import is_object_like, own_properties

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _always_valid(value: Any) -> bool:
    return True


def _check_predicate(predicate: Any) -> None:
    if not callable(predicate):
        raise TypeError(f"Validator must be callable, got {type(predicate).__name__}")


class _SchemaEvaluator:
    """Evaluates a frozen set of validators against candidate values."""

    __slots__ = ("schema_name", "root_validators", "validators", "suppress_all", "suppressed")

    def __init__(
        self,
        schema_name: str,
        root_validators: tuple[Predicate, ...],
        validators: dict[Any, tuple[Predicate, ...]],
        suppress_all: bool,
        suppressed: frozenset,
    ):
        self.schema_name = schema_name
        self.root_validators = root_validators
        self.validators = validators
        self.suppress_all = suppress_all
        self.suppressed = suppressed

    def _passes(self, predicate: Predicate, value: Any) -> bool:
        try:
            return bool(predicate(value))
        except Exception as e:
            logger.debug(
                f"Validator {predicate!r} in '{self.schema_name}' raised "
                f"{type(e).__name__}: {e}; treating as a failure"
            )
            return False

    def _is_suppressed(self, key: Any) -> bool:
        if self.suppress_all:
            return True
        return key in self.suppressed

    def __call__(self, value: Any) -> bool:
        try:
            return self._evaluate(value)
        except Exception as e:
            logger.debug(
                f"Evaluating '{self.schema_name}' against {type(value).__name__} raised "
                f"{type(e).__name__}; treating as a failure"
            )
            return False

    def _evaluate(self, value: Any) -> bool:
        if not is_object_like(value):
            return False

        for predicate in self.root_validators:
            if not self._passes(predicate, value):
                sink.validation_failed(self.schema_name, None, value)
                return False

        has_root_validator = len(self.root_validators) > 0

        properties = own_properties(value)

        for key, property_value in properties:
            key_validators = self.validators.get(key)
            if key_validators is None:
                if not has_root_validator and not self._is_suppressed(key):
                    sink.missing_validator(self.schema_name, key)
                continue

            for predicate in key_validators:
                if not self._passes(predicate, property_value):
                    sink.validation_failed(self.schema_name, key, property_value)
                    return False

        # An empty object cannot satisfy a schema that expects properties
        if not properties and not has_root_validator and self.validators:
            return False

        return True

    def __repr__(self) -> str:
        return f"<validators for '{self.schema_name}'>"


class TypeGuardBuilder(Generic[T]):
    """Accumulates validators for a named record shape.

    Registration methods mutate the builder and return it for chaining, so every
    reference to one builder sees the same validators. A builder is consumed by
    ``build()``; using it afterwards raises BuilderFinalizedError.
    """

    def __init__(self, root_type_name: str):
        """Initialize builder.

        Args:
            root_type_name: Name of the type being validated. Used in diagnostics.
        """
        self.root_type_name = root_type_name
        self._root_validators: list[Predicate] = []
        self._validators: dict[Any, list[Predicate]] = {}
        self._suppress_all = False
        self._suppressed: set[Any] = set()
        self._built = False

    @classmethod
    def start(cls, type_name: str) -> "TypeGuardBuilder[T]":
        """Create a builder for the named type."""
        return cls(type_name)

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def has_root_validator(self) -> bool:
        return len(self._root_validators) > 0

    @property
    def validated_properties(self) -> tuple[Any, ...]:
        """Keys with at least one registered validator, in registration order."""
        return tuple(self._validators)

    def _ensure_open(self, operation: str) -> None:
        if self._built:
            raise BuilderFinalizedError(self.root_type_name, operation)

    def validate_root(self, predicate: Predicate) -> "TypeGuardBuilder[T]":
        """Validate the entire object with predicate.

        Multiple root validators can be added; all must pass. While any root
        validator is registered, missing-validator diagnostics are not emitted.
        """
        self._ensure_open("validate_root")
        _check_predicate(predicate)
        self._root_validators.append(predicate)
        return self

    def validate_property(self, property_name: Any, predicate: Predicate) -> "TypeGuardBuilder[T]":
        """Validate one property with predicate.

        Multiple validators can be added for a property; they run in
        registration order and all must pass.

        Args:
            property_name: Property to add the validator for
            predicate: Returns True if the property value is valid
        """
        self._ensure_open("validate_property")
        _check_predicate(predicate)
        self._validators.setdefault(property_name, []).append(predicate)
        return self

    def ignore_property(self, property_name: Any) -> "TypeGuardBuilder[T]":
        """Accept any value for a property so that no warnings are shown for it.

        Adds an always-true validator; existing validators for the property
        are kept.
        """
        self._ensure_open("ignore_property")
        self._validators.setdefault(property_name, []).append(_always_valid)
        return self

    def suppress_missing_validator_warnings(self, *property_names: Any) -> "TypeGuardBuilder[T]":
        """Silence missing-validator diagnostics.

        Args:
            *property_names: Properties to silence. With none, all are silenced.
        """
        self._ensure_open("suppress_missing_validator_warnings")
        if not property_names:
            self._suppress_all = True
        else:
            self._suppressed.update(property_names)
        return self

    def build(self) -> Guard[T]:
        """Build a guard from the registered validators.

        * Missing-validator diagnostics are emitted for unhandled properties.
        * Validation-failure diagnostics are emitted for rejected values.

        Returns:
            Guard with a ``nullable()`` accessor
        """
        self._ensure_open("build")
        self._built = True

        evaluator = _SchemaEvaluator(
            self.root_type_name,
            tuple(self._root_validators),
            {key: tuple(predicates) for key, predicates in self._validators.items()},
            self._suppress_all,
            frozenset(self._suppressed),
        )

        logger.debug(
            f"Built guard for '{self.root_type_name}' with {len(self._root_validators)} root "
            f"validators and {len(self._validators)} validated properties"
        )
        return Guard(evaluator, name=self.root_type_name)

    def build_nullable(self, *nullish_values: Any) -> Guard[T | None]:
        """Same as ``build().nullable(*nullish_values)``."""
        return self.build().nullable(*nullish_values)
