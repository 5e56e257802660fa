"""Guard callables and their nullable variants.

A guard is a plain predicate ``value -> bool`` wrapped so that a nullable variant
can be derived from it:

    string_guard = CommonTypeGuards.basics.string()
    string_guard.nullable()          # str, None or MISSING
    string_guard.nullable(None)      # str or None only
    string_guard.nullable(MISSING)   # str or MISSING only
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeGuard, TypeVar

from .nullish import DEFAULT_NULLISH, is_nullish

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[Any], bool]


class Guard(Generic[T]):
    """A predicate with an attached ``nullable()`` variant factory.

    Calling a guard never raises: a predicate that raises rejects the value.
    """

    __slots__ = ("_predicate", "name")

    def __init__(self, predicate: Predicate, name: str | None = None):
        if not callable(predicate):
            raise TypeError(f"Guard predicate must be callable, got {type(predicate).__name__}")
        self._predicate = predicate
        self.name = name or getattr(predicate, "__name__", type(predicate).__name__)

    def __call__(self, value: object) -> TypeGuard[T]:
        try:
            return bool(self._predicate(value))
        except Exception as e:
            logger.debug(f"Guard '{self.name}' raised {type(e).__name__}; treating the value as rejected")
            return False

    def nullable(self, *nullish_values: Any) -> "Guard[T | None]":
        """Create a variant that also accepts the given nullish sentinels.

        Args:
            *nullish_values: Sentinels to accept. Defaults to None and MISSING.

        Returns:
            Guard that checks the sentinels first and falls back to this guard
        """
        allowed = tuple(nullish_values) or DEFAULT_NULLISH
        base = self

        def nullable_variant(value: object) -> bool:
            return is_nullish(value, *allowed) or base(value)

        return Guard(nullable_variant, name=f"{self.name}.nullable")

    def __repr__(self) -> str:
        return f"<Guard {self.name}>"


def as_guard(predicate: Predicate | Guard, name: str | None = None) -> Guard:
    """Wrap a plain predicate as a Guard, leaving existing guards untouched."""
    if isinstance(predicate, Guard):
        return predicate
    return Guard(predicate, name=name)
