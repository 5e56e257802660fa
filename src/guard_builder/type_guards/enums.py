"""Guards for enumeration values and names.

``member_of`` validates against the declared VALUES of an enumeration while
``key_of`` validates against its declared NAMES:

    Color = {"Red": "red", "Green": "green"}
    EnumTypeGuards.member_of(Color)("red")   # True
    EnumTypeGuards.member_of(Color)("Red")   # False
    EnumTypeGuards.key_of(Color)("Red")      # True
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from ..guards import Guard

EnumLike = type[Enum] | Mapping[Any, Any]


def _declared_members(enum: EnumLike) -> dict[Any, Any]:
    if isinstance(enum, type) and issubclass(enum, Enum):
        return {name: member.value for name, member in enum.__members__.items()}
    if isinstance(enum, Mapping):
        return dict(enum)
    raise TypeError(f"Expected an Enum class or a mapping of names to values, got {enum!r}")


def _enum_name(enum: EnumLike) -> str:
    return getattr(enum, "__name__", type(enum).__name__)


class _ValueSet:
    """Membership by equality between values of the same type."""

    def __init__(self, values: Iterable[Any]):
        hashable: set[tuple[type, Any]] = set()
        unhashable: list[Any] = []
        for value in values:
            try:
                hashable.add((type(value), value))
            except TypeError:
                unhashable.append(value)
        self._hashable = frozenset(hashable)
        self._unhashable = tuple(unhashable)

    def __contains__(self, value: Any) -> bool:
        try:
            if (type(value), value) in self._hashable:
                return True
        except TypeError:
            # Unhashable input: only the linear scan below can match it
            pass
        for item in self._unhashable:
            try:
                if type(value) is type(item) and value == item:
                    return True
            except Exception:
                continue
        return False


class EnumTypeGuards:
    """Guards for membership in an ``Enum`` class or a name-to-value mapping."""

    @staticmethod
    def member_of(enum: EnumLike) -> Guard[Any]:
        """Values declared by the enumeration. Enum members of the class pass too."""
        declared = _declared_members(enum)
        values = _ValueSet(declared.values())
        enum_class = enum if isinstance(enum, type) else None

        def is_member(value: Any) -> bool:
            if enum_class is not None and isinstance(value, enum_class):
                return True
            return value in values

        return Guard(is_member, name=f"member_of({_enum_name(enum)})")

    @staticmethod
    def key_of(enum: EnumLike) -> Guard[str]:
        """Names declared by the enumeration."""
        keys = _ValueSet(_declared_members(enum).keys())

        def is_key(value: Any) -> bool:
            return value in keys

        return Guard(is_key, name=f"key_of({_enum_name(enum)})")
