"""Active / archived split of the task list - no I/O."""

from datetime import datetime

from .tasks import Task

ARCHIVE_AFTER_DAYS = 1


def is_archived(task: Task, now: datetime | None = None) -> bool:
    """
    Completed at least one calendar day before now.

    Only the date components count, so anything finished today stays active
    whatever the hour.
    """
    if not task.completed or task.completion_date is None:
        return False
    now = now or datetime.now()
    return (now.date() - task.completion_date.date()).days >= ARCHIVE_AFTER_DAYS


def partition(tasks: list[Task], now: datetime | None = None) -> tuple[list[Task], list[Task]]:
    """
    Split tasks into (active, archived).

    Archived tasks are ordered most recently completed first.
    """
    now = now or datetime.now()
    active = []
    archived = []
    for task in tasks:
        (archived if is_archived(task, now) else active).append(task)
    archived.sort(key=lambda t: t.completion_date or datetime.min, reverse=True)
    return active, archived


def filter_by_name_substring(tasks: list[Task], term: str | None) -> list[Task]:
    """Case-insensitive name search; a blank term returns tasks unchanged."""
    if not term or not term.strip():
        return list(tasks)
    needle = term.strip().casefold()
    return [t for t in tasks if needle in t.name.casefold()]
