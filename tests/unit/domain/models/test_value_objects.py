"""
Unit tests for domain value objects and id helpers.
"""

import uuid
import pytest
from datetime import datetime, timezone, timedelta
from projecthub.domain.models.base import ValidationError
from projecthub.domain.models.value_objects import (
    Email, DateRange, new_id, parse_id, to_utc_naive
)


class TestIdentifiers:
    """Test cases for identifier helpers."""

    def test_new_id_is_uuid(self):
        assert uuid.UUID(new_id())

    def test_parse_id_normalizes(self):
        value = str(uuid.uuid4())

        assert parse_id(value.upper()) == value
        assert parse_id(f"  {value} ") == value
        assert parse_id(uuid.UUID(value)) == value

    @pytest.mark.parametrize("value", ["", "123", "not-an-id", None, 42, ["x"]])
    def test_parse_id_rejects_malformed(self, value):
        assert parse_id(value) is None


class TestEmail:
    """Test cases for Email value object."""

    @pytest.mark.parametrize("address", ["bob@mail.com", "first.last@sub.domain.org", "a-b@x.io"])
    def test_valid_addresses(self, address):
        assert str(Email(address)) == address

    @pytest.mark.parametrize("address", ["", "bob", "bob@", "@mail.com", "bob@mail", "bob@mail.c"])
    def test_invalid_addresses(self, address):
        with pytest.raises(ValidationError):
            Email(address)

    def test_from_string_strips(self):
        assert Email.from_string("  bob@mail.com ").address == "bob@mail.com"


class TestDateRange:
    """Test cases for DateRange value object."""

    def test_open_ended(self):
        date_range = DateRange(datetime(2024, 1, 1))

        assert date_range.end is None

    def test_same_day_is_valid(self):
        day = datetime(2024, 1, 1)

        assert DateRange(day, day).end == day

    def test_end_before_start(self):
        with pytest.raises(ValidationError) as exc_info:
            DateRange(datetime(2024, 2, 1), datetime(2024, 1, 1))

        assert exc_info.value.field == "end_date"

    def test_aware_and_naive_dates_compare(self):
        start = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        end = datetime(2024, 1, 1, 10, 30)

        date_range = DateRange(start, end)

        assert date_range.start == datetime(2024, 1, 1, 10, 0)

    def test_to_utc_naive(self):
        aware = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

        assert to_utc_naive(aware) == datetime(2024, 5, 1, 8, 0)
        assert to_utc_naive(None) is None
