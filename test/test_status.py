import time
from datetime import date, datetime, timedelta, timezone

import pytest

from core.domain.models.task import TaskStatus
from core.domain.services.status import derive_status, parse_due_date

TODAY = date(2024, 3, 15)


class TestDeriveStatus:
    def test_same_day_is_in_progress(self):
        assert derive_status(TODAY, TODAY) is TaskStatus.IN_PROGRESS

    def test_past_day_is_completed(self):
        assert derive_status(TODAY - timedelta(days=1), TODAY) is TaskStatus.COMPLETED

    def test_future_day_is_pending(self):
        assert derive_status(TODAY + timedelta(days=1), TODAY) is TaskStatus.PENDING

    @pytest.mark.parametrize(
        "due, expected",
        [
            ("2024-03-15", TaskStatus.IN_PROGRESS),
            ("2024-03-14", TaskStatus.COMPLETED),
            ("2099-01-01", TaskStatus.PENDING),
            ("2024-03-15T23:59:00", TaskStatus.IN_PROGRESS),
        ],
    )
    def test_iso_strings(self, due, expected):
        assert derive_status(due, TODAY) is expected

    def test_time_of_day_is_ignored(self):
        assert derive_status(datetime(2024, 3, 15, 0, 1), datetime(2024, 3, 15, 23, 0)) is TaskStatus.IN_PROGRESS

    @pytest.mark.parametrize("due", [None, "", "   ", "soon", 12])
    def test_unreadable_dates_are_pending(self, due):
        assert derive_status(due, TODAY) is TaskStatus.PENDING

    def test_is_repeatable(self):
        results = {derive_status("2024-03-10", TODAY) for _ in range(5)}
        assert results == {TaskStatus.COMPLETED}

    def test_wire_values(self):
        assert [s.value for s in TaskStatus] == ["pending", "in-progress", "completed"]


@pytest.fixture
def local_tz(monkeypatch):
    """Switches the process to a fixed local zone for the test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def use(tz):
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield use
    monkeypatch.undo()
    time.tzset()


class TestParseDueDate:
    def test_plain_date(self):
        assert parse_due_date("2024-03-15") == TODAY

    def test_naive_datetime_keeps_its_day(self):
        assert parse_due_date("2024-03-15T23:30:00") == TODAY

    def test_utc_timestamp_uses_local_day_ahead_of_utc(self, local_tz):
        local_tz("JST-9")

        assert parse_due_date("2024-03-15T20:00:00Z") == date(2024, 3, 16)
        assert derive_status("2024-03-15T20:00:00Z", date(2024, 3, 16)) is TaskStatus.IN_PROGRESS

    def test_utc_timestamp_uses_local_day_behind_utc(self, local_tz):
        local_tz("HST10")

        assert parse_due_date("2024-03-15T08:30:00Z") == date(2024, 3, 14)

    def test_aware_datetime_object(self, local_tz):
        local_tz("UTC0")

        assert parse_due_date(datetime(2024, 3, 15, 23, 0, tzinfo=timezone(timedelta(hours=-5)))) == date(2024, 3, 16)
