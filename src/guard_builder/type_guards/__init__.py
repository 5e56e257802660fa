"""Reusable guards for primitives, dates, arrays and enumerations."""

from .array import ArrayTypeGuards
from .basics import BasicTypeGuards
from .date import DateTypeGuards
from .deprecated import (
    nullable_array,
    nullable_array_of,
    nullable_boolean,
    nullable_date,
    nullable_date_string,
    nullable_number,
    nullable_object,
    nullable_string,
)
from .enums import EnumTypeGuards


class CommonTypeGuards:
    """Catalog of common guards, grouped by category.

    Example:
        CommonTypeGuards.basics.string()
        CommonTypeGuards.date.date_string().nullable(None)
        CommonTypeGuards.array.array_of(CommonTypeGuards.basics.number())
        CommonTypeGuards.enums.member_of(Color)
    """
    basics = BasicTypeGuards
    date = DateTypeGuards
    array = ArrayTypeGuards
    enums = EnumTypeGuards


__all__ = [
    "CommonTypeGuards",
    "BasicTypeGuards",
    "DateTypeGuards",
    "ArrayTypeGuards",
    "EnumTypeGuards",
    "nullable_string",
    "nullable_number",
    "nullable_boolean",
    "nullable_object",
    "nullable_date",
    "nullable_date_string",
    "nullable_array",
    "nullable_array_of",
]
