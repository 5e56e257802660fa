"""Unit tests for schema key discovery."""

from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple, TypedDict

import pytest
from pydantic import BaseModel, Field

from guard_builder import SchemaError, schema_keys


@dataclass
class Point:
    x: float
    y: float
    label: str = ""
    registry: ClassVar[dict] = {}
    tags: list[str] = field(default_factory=list)


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


class Movie(TypedDict, total=False):
    title: str
    year: int


class Base:
    id: int
    kind: ClassVar[str] = "base"


class Derived(Base):
    name: str


class Account(BaseModel):
    account_id: str = Field(alias="accountId")
    balance: float


class TestClassSchemas:
    """Test schemas declared as classes."""

    def test_dataclass(self):
        assert schema_keys(Point) == ("x", "y", "label", "tags")

    def test_named_tuple(self):
        assert schema_keys(Coordinates) == ("latitude", "longitude")

    def test_typed_dict(self):
        assert schema_keys(Movie) == ("title", "year")

    def test_annotated_class_includes_inherited_and_skips_class_vars(self):
        assert schema_keys(Derived) == ("id", "name")

    def test_pydantic_model_uses_field_names(self):
        assert schema_keys(Account) == ("account_id", "balance")

    def test_unannotated_class_raises(self):
        class Empty:
            pass

        with pytest.raises(SchemaError, match="Empty"):
            schema_keys(Empty)


class TestValueSchemas:
    """Test schemas given as key collections."""

    def test_list_of_names(self):
        assert schema_keys(["a", "b"]) == ("a", "b")

    def test_duplicates_are_removed(self):
        assert schema_keys(("a", "b", "a")) == ("a", "b")

    def test_mapping_keys(self):
        assert schema_keys({"a": int, "b": str}) == ("a", "b")

    def test_empty_iterable(self):
        assert schema_keys([]) == ()

    def test_single_string_is_rejected(self):
        with pytest.raises(SchemaError, match="single string"):
            schema_keys("id")

    def test_non_iterable_is_rejected(self):
        with pytest.raises(SchemaError):
            schema_keys(42)

    def test_schema_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            schema_keys(None)
