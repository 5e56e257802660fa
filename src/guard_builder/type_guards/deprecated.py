"""Legacy nullable guard factories.

Each function is equivalent to ``<guard>().nullable(*nullish_values)`` and is
kept for callers written against the older API.
"""

import warnings
from typing import Any

from ..guards import Guard, Predicate
from .array import ArrayTypeGuards
from .basics import BasicTypeGuards
from .date import DateTypeGuards


def _deprecated(name: str, replacement: str) -> None:
    warnings.warn(
        f"{name}() is deprecated, use {replacement}.nullable() instead",
        DeprecationWarning,
        stacklevel=3,
    )


def nullable_string(*nullish_values: Any) -> Guard:
    _deprecated("nullable_string", "CommonTypeGuards.basics.string()")
    return BasicTypeGuards.string().nullable(*nullish_values)


def nullable_number(*nullish_values: Any) -> Guard:
    _deprecated("nullable_number", "CommonTypeGuards.basics.number()")
    return BasicTypeGuards.number().nullable(*nullish_values)


def nullable_boolean(*nullish_values: Any) -> Guard:
    _deprecated("nullable_boolean", "CommonTypeGuards.basics.boolean()")
    return BasicTypeGuards.boolean().nullable(*nullish_values)


def nullable_object(*nullish_values: Any) -> Guard:
    _deprecated("nullable_object", "CommonTypeGuards.basics.object()")
    return BasicTypeGuards.object().nullable(*nullish_values)


def nullable_date(*nullish_values: Any) -> Guard:
    _deprecated("nullable_date", "CommonTypeGuards.date.date()")
    return DateTypeGuards.date().nullable(*nullish_values)


def nullable_date_string(*nullish_values: Any) -> Guard:
    _deprecated("nullable_date_string", "CommonTypeGuards.date.date_string()")
    return DateTypeGuards.date_string().nullable(*nullish_values)


def nullable_array(*nullish_values: Any) -> Guard:
    _deprecated("nullable_array", "CommonTypeGuards.array.array()")
    return ArrayTypeGuards.array().nullable(*nullish_values)


def nullable_array_of(element_guard: Guard | Predicate, *nullish_values: Any) -> Guard:
    _deprecated("nullable_array_of", "CommonTypeGuards.array.array_of(...)")
    return ArrayTypeGuards.array_of(element_guard).nullable(*nullish_values)
