"""Guards for primitive values."""

import numbers
from typing import Any

from ..guards import Guard
from ..nullish import is_nullish
from ..objects import is_object_like


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is never a number here
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


class BasicTypeGuards:
    """Guards for strings, numbers, booleans and object-like values."""

    @staticmethod
    def string() -> Guard[str]:
        return Guard(_is_string, name="string")

    @staticmethod
    def number() -> Guard[float]:
        """Real numbers, including NaN and infinities. Booleans are rejected."""
        return Guard(_is_number, name="number")

    @staticmethod
    def boolean() -> Guard[bool]:
        return Guard(_is_boolean, name="boolean")

    @staticmethod
    def object() -> Guard[object]:
        """Mappings and attribute-carrying instances. None is not an object."""
        return Guard(is_object_like, name="object")

    @staticmethod
    def nullish(value: Any, *allowed: Any) -> bool:
        """Check value against the allowed nullish sentinels (None and MISSING by default)."""
        return is_nullish(value, *allowed)
