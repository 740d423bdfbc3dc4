"""Grouped and sorted task views - pure functions, no I/O."""

from dataclasses import dataclass, field
from enum import Enum

from .messages import DEFAULT_LANGUAGE, t, weekday_name
from .tasks import PRIORITY_ORDER, Priority, Task, parse_local_date

UNASSIGNED_KEY = "unassigned"


class ViewMode(Enum):
    """Grouping dimension for the task list."""

    BY_ASSIGNEE = "assignee"
    BY_DEADLINE = "deadline"
    BY_PRIORITY = "priority"


class SortOption(Enum):
    """Within-group order for the assignee view. DEFAULT sorts by deadline."""

    DEFAULT = "default"
    DEADLINE = "deadline"
    PRIORITY = "priority"


@dataclass
class Group:
    """A labelled, ordered bucket of tasks."""

    key: str
    display_label: str
    tasks: list[Task] = field(default_factory=list)


def completed_first(tasks: list[Task]) -> list[Task]:
    """Stable partition: completed tasks, then incomplete, original order kept."""
    return [task for task in tasks if task.completed] + [task for task in tasks if not task.completed]


def _tie_break(view_mode: ViewMode, sort: SortOption = SortOption.DEFAULT):
    """Secondary sort key per view, applied after completed-first."""
    if view_mode is ViewMode.BY_ASSIGNEE:
        if sort is SortOption.PRIORITY:
            return lambda task: (not task.completed, task.priority.rank)
        return lambda task: (not task.completed, parse_local_date(task.deadline))
    if view_mode is ViewMode.BY_DEADLINE:
        return lambda task: (not task.completed, task.priority.rank, task.assignee)
    return lambda task: (not task.completed, parse_local_date(task.deadline), task.assignee)


def _group_key(task: Task, view_mode: ViewMode) -> str:
    if view_mode is ViewMode.BY_ASSIGNEE:
        return task.assignee or UNASSIGNED_KEY
    if view_mode is ViewMode.BY_DEADLINE:
        return task.deadline
    return task.priority.value


def group_label(key: str, view_mode: ViewMode, language: str = DEFAULT_LANGUAGE) -> str:
    """Human-readable heading for a group key."""
    if view_mode is ViewMode.BY_ASSIGNEE:
        return t("assignee.unassigned", language) if key == UNASSIGNED_KEY else key
    if view_mode is ViewMode.BY_DEADLINE:
        return f"{key} ({weekday_name(parse_local_date(key).weekday(), language)})"
    return Priority(key).label(language)


def _ordered_keys(keys: list[str], view_mode: ViewMode) -> list[str]:
    if view_mode is ViewMode.BY_ASSIGNEE:
        return sorted(keys)
    if view_mode is ViewMode.BY_DEADLINE:
        return sorted(keys, key=parse_local_date)
    return [p.value for p in PRIORITY_ORDER if p.value in keys]


def organize(
    tasks: list[Task],
    view_mode: ViewMode = ViewMode.BY_ASSIGNEE,
    language: str = DEFAULT_LANGUAGE,
    sort: SortOption = SortOption.DEFAULT,
) -> list[Group]:
    """
    Group tasks by the chosen dimension and sort within each group.

    Completed tasks surface first in every group. Groups without tasks are
    never emitted, so an empty input yields an empty list. ``sort`` picks the
    within-group order of the assignee view.
    """
    buckets: dict[str, list[Task]] = {}
    for task in completed_first(tasks):
        buckets.setdefault(_group_key(task, view_mode), []).append(task)

    sort_key = _tie_break(view_mode, sort)
    return [
        Group(
            key=key,
            display_label=group_label(key, view_mode, language),
            tasks=sorted(buckets[key], key=sort_key),
        )
        for key in _ordered_keys(list(buckets), view_mode)
    ]
