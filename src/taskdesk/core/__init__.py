"""Functional core - pure business logic with no I/O."""

from .tasks import (
    Priority,
    Task,
    TaskDraft,
    deadline_status,
    format_task_line,
    parse_local_date,
    validate_draft,
)
from .organizer import Group, ViewMode, organize
from .calendar import aggregate_by_date, batch_complete, tasks_for
from .archive import filter_by_name_substring, partition
from .schedule import SuggestScheduleInput, SuggestScheduleOutput, build_prompt, build_request

__all__ = [
    # Tasks
    "Priority",
    "Task",
    "TaskDraft",
    "deadline_status",
    "format_task_line",
    "parse_local_date",
    "validate_draft",
    # Organizer
    "Group",
    "ViewMode",
    "organize",
    # Calendar
    "aggregate_by_date",
    "batch_complete",
    "tasks_for",
    # Archive
    "filter_by_name_substring",
    "partition",
    # Schedule
    "SuggestScheduleInput",
    "SuggestScheduleOutput",
    "build_prompt",
    "build_request",
]
