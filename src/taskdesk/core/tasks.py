"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .messages import DEFAULT_LANGUAGE, t

DEADLINE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DUE_SOON_DAYS = 3


class Priority(str, Enum):
    """Task priority. Sorts high < medium < low."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return PRIORITY_ORDER.index(self)

    def label(self, language: str = DEFAULT_LANGUAGE) -> str:
        return t(f"priority.{self.value}", language)


PRIORITY_ORDER = [Priority.HIGH, Priority.MEDIUM, Priority.LOW]


def parse_local_date(deadline: str) -> date:
    """
    Parse a YYYY-MM-DD deadline into a calendar date.

    Built from the year/month/day components so no timezone offset can ever
    shift the result to a neighbouring day.
    """
    if not isinstance(deadline, str) or not DEADLINE_PATTERN.match(deadline):
        raise ValueError(f"Invalid deadline: {deadline!r}")
    year, month, day = (int(part) for part in deadline.split("-"))
    return date(year, month, day)


def format_deadline(value: date) -> str:
    """Format a date as the canonical YYYY-MM-DD deadline string."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


@dataclass
class TaskDraft:
    """User-editable task fields, used for create and update."""

    name: str
    assignee: str
    deadline: str
    priority: Priority | str
    notes: str | None = None


@dataclass
class Task:
    """A tracked task."""

    id: str
    name: str
    assignee: str
    deadline: str
    priority: Priority
    completed: bool = False
    completion_date: datetime | None = None
    enable_reminders: bool = True
    notes: str | None = None

    @property
    def deadline_date(self) -> date:
        return parse_local_date(self.deadline)

    def to_dict(self) -> dict:
        """Serialize to the persisted JSON shape."""
        data = {
            "id": self.id,
            "name": self.name,
            "assignee": self.assignee,
            "deadline": self.deadline,
            "priority": self.priority.value,
            "completed": self.completed,
            "enableReminders": self.enable_reminders,
        }
        if self.completion_date is not None:
            data["completionDate"] = self.completion_date.isoformat()
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from a persisted snapshot entry.

        Raises KeyError, ValueError or TypeError for entries of the wrong shape.
        """
        for key in ("id", "name", "assignee", "deadline"):
            if not isinstance(data.get(key), str):
                raise TypeError(f"{key} must be a string, got {type(data.get(key)).__name__}")
        if not data["id"] or not data["name"].strip():
            raise ValueError("id and name must not be empty")
        if data.get("notes") is not None and not isinstance(data["notes"], str):
            raise TypeError(f"notes must be a string, got {type(data['notes']).__name__}")
        completed = bool(data.get("completed", False))
        completion_date = None
        if completed and data.get("completionDate"):
            raw = data["completionDate"]
            # JSON.stringify-style timestamps end in "Z"
            if raw.endswith("Z"):
                raw = raw[:-1] + "+00:00"
            completion_date = datetime.fromisoformat(raw)
            if completion_date.tzinfo is not None:
                completion_date = completion_date.astimezone().replace(tzinfo=None)
        parse_local_date(data["deadline"])
        return cls(
            id=data["id"],
            name=data["name"],
            assignee=data["assignee"],
            deadline=data["deadline"],
            priority=Priority(data["priority"]),
            completed=completed,
            completion_date=completion_date,
            enable_reminders=bool(data.get("enableReminders", True)),
            notes=data.get("notes") or None,
        )


def validate_draft(
    draft: TaskDraft,
    assignees: list[str] | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> list[str]:
    """
    Check a draft for presence and format problems.

    Returns a list of messages; an empty list means the draft is valid.
    """
    errors = []
    if not draft.name or not draft.name.strip():
        errors.append(t("validation.name", language))
    if not draft.assignee or not draft.assignee.strip():
        errors.append(t("validation.assignee", language))
    elif assignees is not None and draft.assignee not in assignees:
        errors.append(t("validation.assignee_unknown", language, assignee=draft.assignee))
    try:
        parse_local_date(draft.deadline)
    except ValueError:
        errors.append(t("validation.deadline", language))
    try:
        Priority(draft.priority)
    except ValueError:
        errors.append(t("validation.priority", language))
    return errors


class DeadlineState(Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    DUE_SOON = "due_soon"
    UPCOMING = "upcoming"


@dataclass
class DeadlineStatus:
    state: DeadlineState
    days_remaining: int


def deadline_status(task: Task, today: date | None = None) -> DeadlineStatus:
    """Classify a task's deadline relative to today."""
    today = today or date.today()
    days = (task.deadline_date - today).days
    if task.completed:
        return DeadlineStatus(DeadlineState.COMPLETED, days)
    if days < 0:
        return DeadlineStatus(DeadlineState.OVERDUE, days)
    if days == 0:
        return DeadlineStatus(DeadlineState.DUE_TODAY, days)
    if days <= DUE_SOON_DAYS:
        return DeadlineStatus(DeadlineState.DUE_SOON, days)
    return DeadlineStatus(DeadlineState.UPCOMING, days)


def format_task_line(
    task: Task,
    today: date | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Format a single task for terminal display.

    Pure function - no I/O.
    """
    status = deadline_status(task, today)
    check = "x" if task.completed else " "
    deadline = task.deadline
    if status.state is DeadlineState.DUE_SOON:
        deadline = f"{t('status.due_soon', language, days=status.days_remaining)} - {deadline}"
    elif status.state is not DeadlineState.UPCOMING:
        deadline = f"{t('status.' + status.state.value, language)} - {deadline}"
    bell = "" if task.enable_reminders else " (no reminders)"
    return (
        f"[{check}] {task.id[:8]}  {task.name}  "
        f"[{task.priority.label(language)}] {task.assignee} ({deadline}){bell}"
    )
