"""Date-keyed task aggregation for calendar views - no I/O."""

import calendar
from dataclasses import replace
from datetime import date, datetime

from .tasks import Task, parse_local_date


def aggregate_by_date(tasks: list[Task], include_completed: bool = True) -> dict[str, list[str]]:
    """
    Map each deadline to the distinct assignees with tasks on that date.

    Assignees keep first-seen order and appear at most once per date.
    """
    by_date: dict[str, list[str]] = {}
    for task in tasks:
        if task.completed and not include_completed:
            continue
        assignees = by_date.setdefault(task.deadline, [])
        if task.assignee not in assignees:
            assignees.append(task.assignee)
    return by_date


def tasks_for(tasks: list[Task], deadline: str, assignee: str) -> list[Task]:
    """Tasks due on a date for one assignee, complete or not."""
    return [t for t in tasks if t.deadline == deadline and t.assignee == assignee]


def all_complete(tasks: list[Task], deadline: str, assignee: str) -> bool:
    """True when the assignee has tasks on the date and all are done."""
    matching = tasks_for(tasks, deadline, assignee)
    return bool(matching) and all(t.completed for t in matching)


def batch_complete(
    tasks: list[Task],
    deadline: str,
    assignee: str,
    now: datetime | None = None,
) -> tuple[list[Task], int]:
    """
    Complete every open task for an assignee on a date.

    Returns (updated_tasks, count). The input list and its tasks are left
    untouched; a count of 0 means nothing matched.
    """
    now = now or datetime.now()
    updated = []
    count = 0
    for task in tasks:
        if task.deadline == deadline and task.assignee == assignee and not task.completed:
            updated.append(replace(task, completed=True, completion_date=now))
            count += 1
        else:
            updated.append(task)
    return updated, count


def due_dates(tasks: list[Task]) -> list[date]:
    """Sorted distinct deadlines of open tasks."""
    return sorted({parse_local_date(t.deadline) for t in tasks if not t.completed})


def month_grid(
    tasks: list[Task],
    year: int,
    month: int,
    include_completed: bool = True,
) -> list[list[tuple[date | None, list[str]]]]:
    """
    Lay out a month as Monday-first weeks of (day, assignees) cells.

    Days outside the month are (None, []).
    """
    by_date = aggregate_by_date(tasks, include_completed=include_completed)
    weeks = []
    for week in calendar.Calendar(firstweekday=0).monthdatescalendar(year, month):
        row = []
        for day in week:
            if day.month != month:
                row.append((None, []))
            else:
                row.append((day, by_date.get(day.isoformat(), [])))
        weeks.append(row)
    return weeks
