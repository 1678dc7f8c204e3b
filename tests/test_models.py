"""Tests for request parameter defaults and validation."""

from datetime import date, datetime, time

import pytest

from exchange_freebusy.models import AvailabilityRequest, AvailabilityStatus


class TestAvailabilityRequest:
    def test_defaults(self):
        params = AvailabilityRequest()
        today = date.today()
        assert params.time_zone == "Europe/London"
        assert params.email_address == "test.test@test.com"
        assert params.start_time == datetime.combine(today, time(0, 0, 1))
        assert params.end_time == datetime.combine(today, time(23, 59, 59))
        assert params.merged_free_busy_interval_in_minutes == 60

    def test_start_must_precede_end(self):
        with pytest.raises(ValueError, match="before"):
            AvailabilityRequest(
                start_time=datetime(2026, 5, 1, 10, 0),
                end_time=datetime(2026, 5, 1, 9, 0),
            )

    @pytest.mark.parametrize("interval", [0, -15])
    def test_interval_must_be_positive(self, interval):
        with pytest.raises(ValueError, match="positive"):
            AvailabilityRequest(merged_free_busy_interval_in_minutes=interval)

    def test_reset_restores_defaults(self):
        params = AvailabilityRequest(
            time_zone="Asia/Tokyo",
            email_address="someone@example.com",
            merged_free_busy_interval_in_minutes=15,
        )
        params.reset()
        assert params == AvailabilityRequest()


def test_status_values_match_wire_digits():
    assert [s.value for s in AvailabilityStatus] == [0, 1, 2, 3, 4]
