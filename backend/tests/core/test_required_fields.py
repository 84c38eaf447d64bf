"""Required Fields: None and blank strings are missing, zero is not."""

import pytest

from daily_tracker.core.errors import MissingFieldsError
from daily_tracker.core.required_fields import check_required_fields


def test_zero_is_a_present_value():
    check_required_fields({"duration": 0, "count": 0})


def test_reports_every_missing_field_in_order():
    with pytest.raises(MissingFieldsError) as info:
        check_required_fields({
            "type": "", "startTime": "2025-03-21", "endTime": None, "duration": None,
        })
    assert info.value.fields == ["type", "endTime", "duration"]
    assert info.value.code == "MISSING_FIELDS"


def test_whitespace_only_string_is_missing():
    with pytest.raises(MissingFieldsError):
        check_required_fields({"date": "   "})
