"""Guards for arrays and homogeneous arrays."""

from typing import Any, TypeVar

from ..diagnostics import sink
from ..guards import Guard, Predicate, as_guard

T = TypeVar("T")

ARRAY_TYPES = (list, tuple)


def _is_array(value: Any) -> bool:
    return isinstance(value, ARRAY_TYPES)


class ArrayTypeGuards:
    """Guards for lists and tuples."""

    @staticmethod
    def array() -> Guard[list]:
        return Guard(_is_array, name="array")

    @staticmethod
    def array_of(element_guard: Guard[T] | Predicate) -> Guard[list[T]]:
        """Arrays whose every element passes element_guard.

        A failing element, including one whose check raises, emits one generic
        diagnostic that does not name the index, and the array is rejected.
        Empty arrays pass.
        """
        check = as_guard(element_guard)

        def is_array_of(value: Any) -> bool:
            if not _is_array(value):
                return False

            for item in value:
                if not check(item):
                    sink.array_member_failed()
                    return False
            return True

        return Guard(is_array_of, name=f"array_of({check.name})")
