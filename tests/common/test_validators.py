from datetime import date

import pytest

from stafftrack.common.validators import require_iso_date, require_json_object, require_non_empty, require_number
from stafftrack.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Alice  ", "Name") == "Alice"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_non_empty_rejects_blank(value):
    with pytest.raises(ValidationError):
        require_non_empty(value, "Name")


def test_require_number_accepts_numbers_and_numeric_strings():
    assert require_number(-1, "Value") == -1
    assert require_number(0.5, "Value") == 0.5
    assert require_number("0.5", "Value") == 0.5
    assert require_number("2", "Value") == 2
    assert isinstance(require_number(3.0, "Value"), int)


@pytest.mark.parametrize("value", ["abc", True, None, "nan", float("inf")])
def test_require_number_rejects_non_numbers(value):
    with pytest.raises(ValidationError):
        require_number(value, "Value")


def test_require_iso_date():
    assert require_iso_date("2025-03-14", "Date") == "2025-03-14"
    assert require_iso_date(date(2025, 3, 14), "Date") == "2025-03-14"
    with pytest.raises(ValidationError):
        require_iso_date("14/03/2025", "Date")


def test_require_json_object():
    assert require_json_object(None) == {}
    assert require_json_object({"name": "Dana"}) == {"name": "Dana"}
    with pytest.raises(ValidationError):
        require_json_object(["Dana"])
