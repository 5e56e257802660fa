"""Discovery of the property names a schema declares."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, get_origin, get_type_hints

from pydantic import BaseModel

from .exceptions import SchemaError

logger = logging.getLogger(__name__)


def _annotated_keys(schema: type) -> tuple[str, ...]:
    try:
        hints = get_type_hints(schema)
    except Exception as e:
        # Unresolvable forward references: fall back to the raw annotations
        logger.debug(f"Could not resolve type hints of {schema.__name__}: {e}")
        hints = {}
        for klass in reversed(schema.__mro__):
            hints.update(klass.__dict__.get("__annotations__", {}))

    return tuple(name for name, hint in hints.items() if get_origin(hint) is not ClassVar and hint is not ClassVar)


def _dedupe(keys: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(dict.fromkeys(keys))


def schema_keys(schema: Any) -> tuple[Any, ...]:
    """Return the property names declared by schema, in declaration order.

    Supported schemas:
        - pydantic models (field names, not aliases)
        - dataclasses
        - NamedTuple classes
        - TypedDict and any other annotated class (ClassVar entries excluded)
        - a mapping (its keys) or an iterable of names

    Raises:
        SchemaError: If no key set can be derived from schema
    """
    if isinstance(schema, type):
        if issubclass(schema, BaseModel):
            return tuple(schema.model_fields)

        if dataclasses.is_dataclass(schema):
            return tuple(field.name for field in dataclasses.fields(schema))

        named_fields = getattr(schema, "_fields", None)
        if issubclass(schema, tuple) and isinstance(named_fields, tuple):
            return named_fields

        keys = _annotated_keys(schema)
        if keys:
            return keys
        raise SchemaError(f"Cannot determine the properties of {schema.__name__}: it declares no annotations")

    if isinstance(schema, Mapping):
        return _dedupe(schema)

    if isinstance(schema, (str, bytes)):
        raise SchemaError(f"Expected an iterable of property names, got a single string: {schema!r}")

    if isinstance(schema, Iterable):
        return _dedupe(schema)

    raise SchemaError(f"Cannot determine the properties of {schema!r}")
