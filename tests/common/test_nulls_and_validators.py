from __future__ import annotations

import pytest

from digital_logbook.common.nulls import to_optional_int, to_optional_string
from digital_logbook.common.validators import compose_display_name, require_min_length, require_non_empty
from digital_logbook.core.exceptions import ValidationError


def test_empty_string_is_unset():
    field = to_optional_string("")

    assert not field.valid
    assert field.db_value is None


def test_non_empty_string_is_set():
    field = to_optional_string("x")

    assert field.valid
    assert field.value == "x"
    assert field.db_value == "x"


def test_whitespace_string_is_kept():
    field = to_optional_string(" ")

    assert field.valid
    assert field.db_value == " "


@pytest.mark.parametrize("value", [0, -5])
def test_non_positive_int_is_unset(value):
    assert not to_optional_int(value).valid
    assert to_optional_int(value).db_value is None


def test_positive_int_is_set():
    field = to_optional_int(1)

    assert field.valid
    assert field.value == 1


def test_display_name_with_and_without_middle_name():
    assert compose_display_name("Santos", "Juan") == "Santos, Juan"
    assert compose_display_name("Santos", "Juan", "Dela") == "Santos, Juan Dela"


def test_validators_raise_validation_error():
    with pytest.raises(ValidationError):
        require_non_empty("   ", "Name")
    with pytest.raises(ValidationError):
        require_min_length("abc", "Password", 6)

    assert require_non_empty("  x ", "Name") == "x"
