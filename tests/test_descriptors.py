"""
Tests for field markers and descriptor tables.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Annotated, Any, Optional, Union
from uuid import UUID

import pytest

from local_models import make_local_pair, make_local_tree
from models import AddressRecord, ApiCredentials, LegacyUser, Node, StreetAddress, Tier, UserRecord
from obfuscator import (
    SENSITIVE,
    FieldCategory,
    JsonName,
    MarkerError,
    Sensitive,
    classify,
    describe_fields,
)
from obfuscator.descriptors import unwrap_type


class TestClassify:
    """Category comes from the declared type only."""

    @pytest.mark.parametrize("declared", [str, Optional[str], Annotated[str, Sensitive()]])
    def test_text(self, declared):
        assert classify(declared) is FieldCategory.TEXT

    @pytest.mark.parametrize(
        "declared",
        [int, bool, float, Decimal, datetime, date, time, timedelta, UUID, Tier, Optional[int], int | None],
    )
    def test_primitive(self, declared):
        assert classify(declared) is FieldCategory.PRIMITIVE

    @pytest.mark.parametrize("declared", [AddressRecord, Optional[AddressRecord], LegacyUser, Node])
    def test_composite(self, declared):
        assert classify(declared) is FieldCategory.COMPOSITE

    @pytest.mark.parametrize(
        "declared",
        [list, list[int], dict[str, int], Any, bytes, object, Union[int, str], Optional[Union[int, str]], StreetAddress],
    )
    def test_other(self, declared):
        assert classify(declared) is FieldCategory.OTHER

    def test_str_enum_is_primitive(self):
        import enum

        class Color(str, enum.Enum):
            RED = "red"

        assert classify(Color) is FieldCategory.PRIMITIVE


class TestUnwrapType:

    def test_optional_of_annotated(self):
        marker = Sensitive()
        assert unwrap_type(Optional[Annotated[int, marker]]) == (int, (marker,))

    def test_annotated_of_optional(self):
        marker = JsonName("x")
        assert unwrap_type(Annotated[Optional[str], marker]) == (str, (marker,))


class TestDescribeFields:

    def test_dataclass_fields_in_order(self):
        names = [f.name for f in describe_fields(UserRecord)]

        assert names == [
            "Name", "Email", "Password", "Age", "SocialSecurityNumber",
            "Address", "CreatedAt", "Salary", "IsActive", "NullableProperty",
        ]

    def test_sensitivity_and_categories(self):
        fields = {f.name: f for f in describe_fields(UserRecord)}

        assert fields["Email"].sensitive is True
        assert fields["Password"].sensitive is True
        assert fields["Name"].sensitive is False
        assert fields["Age"].category is FieldCategory.PRIMITIVE
        assert fields["Address"].category is FieldCategory.COMPOSITE
        assert fields["NullableProperty"].category is FieldCategory.TEXT

    def test_json_names_from_annotations_and_metadata(self):
        fields = {f.name: f for f in describe_fields(ApiCredentials)}

        assert fields["ApiKey"].json_name == "api_key"
        assert fields["ApiKey"].sensitive is True
        assert fields["Timeout"].json_name == "timeout_seconds"
        assert fields["Timeout"].sensitive is True
        assert fields["Region"].json_name == "region_name"
        assert fields["Region"].sensitive is False

    def test_private_and_class_vars_are_skipped(self):
        assert [f.name for f in describe_fields(LegacyUser)] == ["Name", "Token"]

    def test_table_is_cached(self):
        assert describe_fields(UserRecord) is describe_fields(UserRecord)

    def test_types_without_annotations_have_no_fields(self):
        assert describe_fields(int) == ()
        assert describe_fields(str) == ()

    def test_local_class_with_postponed_annotations(self):
        """Should resolve a function-local class that refers to itself."""
        tree = make_local_tree()

        fields = {f.name: f for f in describe_fields(tree)}

        assert fields["token"].sensitive is True
        assert fields["child"].category is FieldCategory.COMPOSITE

    def test_unresolvable_local_annotation_raises(self):
        """Should surface NameError for a function-local field type."""
        with pytest.raises(NameError):
            describe_fields(make_local_pair())

    def test_conflicting_json_names_raise(self):
        @dataclass
        class Conflicted:
            value: Annotated[str, JsonName("a"), JsonName("b")] = ""

        with pytest.raises(MarkerError):
            describe_fields(Conflicted)


class TestMarkers:

    def test_repeated_sensitive_is_same_as_once(self):
        @dataclass
        class Twice:
            value: Annotated[str, Sensitive(), SENSITIVE] = ""

        (field,) = describe_fields(Twice)
        assert field.sensitive is True

    def test_bare_sensitive_class_is_accepted(self):
        @dataclass
        class Bare:
            value: Annotated[str, Sensitive] = ""

        assert describe_fields(Bare)[0].sensitive is True

    def test_markers_compare_by_value(self):
        assert Sensitive() == SENSITIVE
        assert JsonName("a") == JsonName("a")
        assert JsonName("a") != JsonName("b")

    @pytest.mark.parametrize("name", ["", None, 3])
    def test_json_name_must_be_non_empty_string(self, name):
        with pytest.raises(MarkerError):
            JsonName(name)

    def test_marker_error_is_value_error(self):
        with pytest.raises(ValueError):
            JsonName("")
