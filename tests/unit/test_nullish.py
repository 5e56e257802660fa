"""Unit tests for the nullish classifier."""

import copy
import pickle

from guard_builder.nullish import DEFAULT_NULLISH, MISSING, is_nullish


class RaisingEquality:
    def __eq__(self, other):
        raise RuntimeError("no comparisons")

    __hash__ = object.__hash__


class TestMissingSentinel:
    """Test the MISSING sentinel."""

    def test_singleton(self):
        assert type(MISSING)() is MISSING
        assert copy.deepcopy(MISSING) is MISSING
        assert pickle.loads(pickle.dumps(MISSING)) is MISSING

    def test_repr_and_truthiness(self):
        assert repr(MISSING) == "MISSING"
        assert not MISSING

    def test_default_set(self):
        assert DEFAULT_NULLISH == (None, MISSING)


class TestIsNullish:
    """Test is_nullish."""

    def test_default_sentinels(self):
        assert is_nullish(None) is True
        assert is_nullish(MISSING) is True

    def test_non_nullish_values(self):
        for value in (0, "", False, [], {}, 0.0):
            assert is_nullish(value) is False

    def test_explicit_sentinels(self):
        assert is_nullish(None, None) is True
        assert is_nullish(MISSING, MISSING) is True
        assert is_nullish(None, None, MISSING) is True
        assert is_nullish(MISSING, None) is False
        assert is_nullish(None, MISSING) is False
        assert is_nullish("not null", None) is False
        assert is_nullish(0, None) is False

    def test_custom_sentinels_compare_by_value(self):
        assert is_nullish("N/A", "N/A") is True
        assert is_nullish(-1, -1, None) is True
        assert is_nullish("n/a", "N/A") is False

    def test_values_of_other_types_never_match(self):
        assert is_nullish(0, False) is False
        assert is_nullish(False, 0) is False
        assert is_nullish(1.0, 1) is False

    def test_raising_equality_is_not_a_match(self):
        sentinel = RaisingEquality()
        assert is_nullish(sentinel, sentinel) is True
        assert is_nullish(RaisingEquality(), sentinel) is False
