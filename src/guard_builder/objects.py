"""Structural inspection of candidate values.

A value is object-like when it is a mapping or an instance carrying its own
attributes (``__dict__`` or ``__slots__``). Its own properties are the mapping's
keys or the instance attributes actually set, in enumeration order.
"""

import types
from collections.abc import Mapping
from typing import Any

from .nullish import MISSING

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)
_CONTAINER_TYPES = (list, tuple, set, frozenset, range)
_CALLABLE_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            # Dunder slots (__dict__, __weakref__, framework internals) are not properties
            if name.startswith("__") and name.endswith("__"):
                continue
            if name not in names:
                names.append(name)
    return names


def is_object_like(value: Any) -> bool:
    """Check whether a value can be a candidate for a record-shaped guard."""
    if value is None or value is MISSING:
        return False
    if isinstance(value, Mapping):
        return True
    if isinstance(value, _SCALAR_TYPES + _CONTAINER_TYPES + _CALLABLE_TYPES):
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


def own_properties(value: Any) -> list[tuple[Any, Any]]:
    """List the (key, value) pairs present on an object-like value.

    Args:
        value: An object-like value (see is_object_like)

    Returns:
        Pairs in the value's own enumeration order
    """
    if isinstance(value, Mapping):
        return list(value.items())

    properties: list[tuple[Any, Any]] = []
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        properties.extend(instance_dict.items())

    seen = {key for key, _ in properties}
    for name in _slot_names(type(value)):
        if name in seen:
            continue
        try:
            properties.append((name, object.__getattribute__(value, name)))
        except AttributeError:
            # Unset slot: the property is not present on this instance
            continue

    return properties
