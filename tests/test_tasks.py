"""Tests for core task logic."""

import time
from datetime import date, datetime

import pytest

from taskdesk.core.tasks import (
    DeadlineState,
    Priority,
    Task,
    TaskDraft,
    deadline_status,
    format_deadline,
    format_task_line,
    parse_local_date,
    validate_draft,
)


@pytest.fixture
def today():
    return date(2025, 3, 5)


def make_task(**overrides) -> Task:
    fields = {
        "id": "t1",
        "name": "Report",
        "assignee": "Kim",
        "deadline": "2025-03-10",
        "priority": Priority.HIGH,
    }
    fields.update(overrides)
    return Task(**fields)


class TestParseLocalDate:
    def test_parses_components(self):
        assert parse_local_date("2025-03-04") == date(2025, 3, 4)

    def test_first_and_last_day_of_year(self):
        assert parse_local_date("2025-01-01") == date(2025, 1, 1)
        assert parse_local_date("2024-12-31") == date(2024, 12, 31)

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="requires time.tzset")
    @pytest.mark.parametrize("tz", ["UTC", "America/Los_Angeles", "Asia/Seoul", "Pacific/Kiritimati", "Etc/GMT+12"])
    def test_independent_of_timezone(self, monkeypatch, tz):
        monkeypatch.setenv("TZ", tz)
        time.tzset()
        try:
            assert parse_local_date("2025-03-01") == date(2025, 3, 1)
            assert parse_local_date("2025-03-01").isoformat() == "2025-03-01"
        finally:
            monkeypatch.undo()
            time.tzset()

    @pytest.mark.parametrize("bad", ["2025-3-4", "2025/03/04", "20250304", "", "2025-03-04T00:00", "abcd-ef-gh"])
    def test_rejects_bad_format(self, bad):
        with pytest.raises(ValueError):
            parse_local_date(bad)

    def test_rejects_impossible_date(self):
        with pytest.raises(ValueError):
            parse_local_date("2025-02-30")

    def test_format_deadline_pads(self):
        assert format_deadline(date(2025, 3, 4)) == "2025-03-04"


class TestPriority:
    def test_rank_order(self):
        assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank

    def test_labels(self):
        assert Priority.HIGH.label("ko") == "높음"
        assert Priority.LOW.label("en") == "Low"


class TestTaskSerialization:
    def test_to_dict_uses_persisted_keys(self):
        task = make_task(completed=True, completion_date=datetime(2025, 3, 5, 14, 30))
        data = task.to_dict()
        assert data["priority"] == "high"
        assert data["enableReminders"] is True
        assert data["completionDate"] == "2025-03-05T14:30:00"
        assert "notes" not in data

    def test_to_dict_omits_completion_date_when_open(self):
        assert "completionDate" not in make_task().to_dict()

    def test_from_dict(self):
        task = Task.from_dict(
            {
                "id": "abc",
                "name": "Report",
                "assignee": "Kim",
                "deadline": "2025-03-10",
                "priority": "medium",
                "completed": True,
                "completionDate": "2025-03-05T09:00:00",
                "enableReminders": False,
                "notes": "draft first",
            }
        )
        assert task.priority is Priority.MEDIUM
        assert task.completion_date == datetime(2025, 3, 5, 9, 0)
        assert task.enable_reminders is False
        assert task.notes == "draft first"

    def test_from_dict_defaults(self):
        task = Task.from_dict(
            {"id": "abc", "name": "Report", "assignee": "Kim", "deadline": "2025-03-10", "priority": "low"}
        )
        assert task.completed is False
        assert task.completion_date is None
        assert task.enable_reminders is True

    def test_from_dict_drops_completion_date_on_open_task(self):
        task = Task.from_dict(
            {
                "id": "abc",
                "name": "Report",
                "assignee": "Kim",
                "deadline": "2025-03-10",
                "priority": "low",
                "completed": False,
                "completionDate": "2025-03-05T09:00:00",
            }
        )
        assert task.completion_date is None

    def test_from_dict_accepts_utc_timestamp(self):
        task = Task.from_dict(
            {
                "id": "abc",
                "name": "Report",
                "assignee": "Kim",
                "deadline": "2025-03-10",
                "priority": "low",
                "completed": True,
                "completionDate": "2025-03-05T09:00:00.000Z",
            }
        )
        assert task.completion_date is not None
        assert task.completion_date.tzinfo is None

    def test_from_dict_rejects_bad_priority(self):
        with pytest.raises(ValueError):
            Task.from_dict(
                {"id": "abc", "name": "Report", "assignee": "Kim", "deadline": "2025-03-10", "priority": "urgent"}
            )

    def test_from_dict_rejects_bad_deadline(self):
        with pytest.raises(ValueError):
            Task.from_dict(
                {"id": "abc", "name": "Report", "assignee": "Kim", "deadline": "03/10/2025", "priority": "low"}
            )

    @pytest.mark.parametrize(
        "override",
        [{"name": 123}, {"assignee": 7}, {"id": None}, {"id": 42}, {"deadline": 20250310}, {"notes": 5}],
    )
    def test_from_dict_rejects_wrong_types(self, override):
        entry = {"id": "abc", "name": "Report", "assignee": "Kim", "deadline": "2025-03-10", "priority": "low"}
        with pytest.raises(TypeError):
            Task.from_dict({**entry, **override})

    @pytest.mark.parametrize("override", [{"id": ""}, {"name": ""}, {"name": "  "}])
    def test_from_dict_rejects_empty_id_or_name(self, override):
        entry = {"id": "abc", "name": "Report", "assignee": "Kim", "deadline": "2025-03-10", "priority": "low"}
        with pytest.raises(ValueError):
            Task.from_dict({**entry, **override})


class TestValidateDraft:
    def test_valid(self):
        draft = TaskDraft("Report", "Kim", "2025-03-10", "high")
        assert validate_draft(draft, ["Kim", "Lee"]) == []

    def test_collects_all_errors(self):
        draft = TaskDraft("  ", "", "2025-3-10", "urgent")
        assert len(validate_draft(draft, language="en")) == 4

    def test_unknown_assignee(self):
        draft = TaskDraft("Report", "Park", "2025-03-10", "high")
        errors = validate_draft(draft, ["Kim", "Lee"], language="en")
        assert errors == ['Unknown assignee: "Park"']

    def test_assignee_membership_skipped_without_set(self):
        draft = TaskDraft("Report", "Park", "2025-03-10", "high")
        assert validate_draft(draft) == []

    def test_accepts_priority_enum(self):
        draft = TaskDraft("Report", "Kim", "2025-03-10", Priority.LOW)
        assert validate_draft(draft) == []


class TestDeadlineStatus:
    def test_completed(self, today):
        task = make_task(deadline="2025-03-01", completed=True, completion_date=datetime(2025, 3, 1))
        assert deadline_status(task, today).state is DeadlineState.COMPLETED

    def test_overdue(self, today):
        status = deadline_status(make_task(deadline="2025-03-03"), today)
        assert status.state is DeadlineState.OVERDUE
        assert status.days_remaining == -2

    def test_due_today(self, today):
        assert deadline_status(make_task(deadline="2025-03-05"), today).state is DeadlineState.DUE_TODAY

    def test_due_soon_boundary(self, today):
        assert deadline_status(make_task(deadline="2025-03-08"), today).state is DeadlineState.DUE_SOON
        assert deadline_status(make_task(deadline="2025-03-09"), today).state is DeadlineState.UPCOMING


class TestFormatTaskLine:
    def test_open_task(self, today):
        line = format_task_line(make_task(id="abcdef1234"), today, "en")
        assert line.startswith("[ ] abcdef12  Report")
        assert "[High]" in line
        assert "(2025-03-10)" in line

    def test_due_soon(self, today):
        line = format_task_line(make_task(deadline="2025-03-07"), today, "en")
        assert "2d left - 2025-03-07" in line

    def test_completed_and_reminders_off(self, today):
        task = make_task(completed=True, completion_date=datetime(2025, 3, 5), enable_reminders=False)
        line = format_task_line(task, today, "en")
        assert line.startswith("[x]")
        assert "Done - 2025-03-10" in line
        assert "(no reminders)" in line
