"""Nullish sentinels and the classifier used by every nullable guard variant."""

from typing import Any, Final


class _Missing:
    """Marker for a value that is absent rather than explicitly None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING: Final = _Missing()

DEFAULT_NULLISH: Final[tuple[Any, ...]] = (None, MISSING)


def _matches(value: Any, sentinel: Any) -> bool:
    if value is sentinel:
        return True
    if type(value) is not type(sentinel):
        return False
    try:
        return bool(value == sentinel)
    except Exception:
        return False


def is_nullish(value: Any, *allowed: Any) -> bool:
    """Check whether value is one of the allowed nullish sentinels.

    Args:
        value: Value to classify
        *allowed: Sentinels considered nullish. Defaults to None and MISSING
                  when none are given.

    Returns:
        True if value is identical to a sentinel, or equal to a sentinel of
        the same type
    """
    sentinels = allowed or DEFAULT_NULLISH
    return any(_matches(value, sentinel) for sentinel in sentinels)
