"""Taskdesk CLI - task tracker."""

import json
import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.archive import filter_by_name_substring, partition
from .core.calendar import all_complete, month_grid, tasks_for
from .core.messages import t, weekday_name
from .core.organizer import SortOption, ViewMode, organize
from .core.tasks import PRIORITY_ORDER, Task, TaskDraft, format_task_line, parse_local_date
from .repository import AssigneeResult, TaskRepository, ValidationError
from .workflows import get_advisor, get_repository

PRIORITY_CHOICES = click.Choice([p.value for p in PRIORITY_ORDER])


def _load() -> tuple:
    config = load_config()
    return config, get_repository(config)


def _resolve(repo: TaskRepository, task_id: str, language: str) -> Task:
    """Find a task by id prefix or exit with an error."""
    task = repo.find(task_id)
    if task is None:
        click.echo(f"Error: {t('task.not_found', language, task_id=task_id)}", err=True)
        sys.exit(1)
    return task


def _fail_validation(e: ValidationError) -> None:
    for message in e.errors:
        click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Taskdesk - task tracker CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


# ============== Tasks ==============


@main.command()
@click.argument("name")
@click.option("--assignee", "-a", default=None, help="Assignee (default: first assignee)")
@click.option("--deadline", "-d", required=True, help="Deadline as YYYY-MM-DD")
@click.option("--priority", "-p", type=PRIORITY_CHOICES, default="medium", show_default=True)
@click.option("--notes", "-n", default=None, help="Free-text notes")
def add(name: str, assignee: str | None, deadline: str, priority: str, notes: str | None):
    """Add a task."""
    config, repo = _load()
    if assignee is None:
        assignee = repo.assignees[0] if repo.assignees else ""
    try:
        task = repo.create(TaskDraft(name, assignee, deadline, priority, notes))
    except ValidationError as e:
        _fail_validation(e)
    click.echo(t("task.added", config.language, name=task.name))
    click.echo(f"  id: {task.id}")


@main.command()
@click.argument("task_id")
@click.option("--name", default=None)
@click.option("--assignee", "-a", default=None)
@click.option("--deadline", "-d", default=None)
@click.option("--priority", "-p", type=PRIORITY_CHOICES, default=None)
@click.option("--notes", "-n", default=None)
def edit(
    task_id: str,
    name: str | None,
    assignee: str | None,
    deadline: str | None,
    priority: str | None,
    notes: str | None,
):
    """Edit a task. Omitted fields keep their current value."""
    config, repo = _load()
    task = _resolve(repo, task_id, config.language)
    draft = TaskDraft(
        name=name if name is not None else task.name,
        assignee=assignee if assignee is not None else task.assignee,
        deadline=deadline if deadline is not None else task.deadline,
        priority=priority if priority is not None else task.priority,
        notes=notes if notes is not None else task.notes,
    )
    try:
        updated = repo.update(task.id, draft)
    except ValidationError as e:
        _fail_validation(e)
    click.echo(t("task.updated", config.language, name=updated.name))


@main.command()
@click.argument("task_id")
def done(task_id: str):
    """Mark a task complete."""
    config, repo = _load()
    task = repo.set_completed(_resolve(repo, task_id, config.language).id, True)
    click.echo(t("task.completed", config.language, name=task.name))


@main.command()
@click.argument("task_id")
def undo(task_id: str):
    """Mark a task incomplete again."""
    config, repo = _load()
    task = repo.set_completed(_resolve(repo, task_id, config.language).id, False)
    click.echo(t("task.reopened", config.language, name=task.name))


@main.command()
@click.argument("task_id")
@click.option("--on/--off", "enabled", default=None, help="Set explicitly instead of toggling")
def remind(task_id: str, enabled: bool | None):
    """Toggle reminders for a task."""
    config, repo = _load()
    target = _resolve(repo, task_id, config.language)
    if enabled is None:
        task = repo.toggle_reminder(target.id)
    else:
        task = repo.set_reminder(target.id, enabled)
    key = "reminder.on" if task.enable_reminders else "reminder.off"
    click.echo(t(key, config.language, name=task.name))


@main.command()
@click.argument("task_id")
@click.confirmation_option(prompt="Delete this task?")
def delete(task_id: str):
    """Delete a task."""
    config, repo = _load()
    task = repo.delete(_resolve(repo, task_id, config.language).id)
    click.echo(t("task.deleted", config.language, name=task.name))


@main.command("list")
@click.option(
    "--view",
    "-v",
    type=click.Choice([m.value for m in ViewMode]),
    default=ViewMode.BY_ASSIGNEE.value,
    show_default=True,
    help="Group tasks by",
)
@click.option(
    "--sort",
    type=click.Choice([s.value for s in SortOption]),
    default=SortOption.DEFAULT.value,
    show_default=True,
    help="Order within each assignee group",
)
@click.option("--search", "-s", default="", help="Filter by name substring")
@click.option("--archived", is_flag=True, help="Show tasks completed before today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tasks(view: str, sort: str, search: str, archived: bool, as_json: bool):
    """List tasks grouped by assignee, deadline or priority."""
    config, repo = _load()
    active, archived_tasks = partition(repo.tasks)
    tasks = filter_by_name_substring(archived_tasks if archived else active, search)

    if as_json:
        click.echo(json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False))
        return

    if archived:
        for task in tasks:
            click.echo(format_task_line(task, language=config.language))
        return

    groups = organize(tasks, ViewMode(view), config.language, SortOption(sort))
    if not groups:
        click.echo(t("list.empty", config.language))
        return

    for i, group in enumerate(groups):
        if i:
            click.echo()
        click.echo(f"### {group.display_label}")
        for task in group.tasks:
            click.echo(f"  {format_task_line(task, language=config.language)}")


# ============== Calendar ==============


@main.command()
@click.option("--month", "-m", default=None, help="Month as YYYY-MM (default: this month)")
@click.option("--open-only", is_flag=True, help="Only count incomplete tasks")
def calendar(month: str | None, open_only: bool):
    """Show a month calendar with assignees per day."""
    config, repo = _load()
    today = date.today()
    if month:
        try:
            year, month_num = (int(part) for part in month.split("-"))
            if not (1 <= month_num <= 12 and 1 < year < 9999):
                raise ValueError(month)
        except ValueError:
            click.echo(f"Error: invalid month '{month}', expected YYYY-MM", err=True)
            sys.exit(1)
    else:
        year, month_num = today.year, today.month

    click.echo(f"{year:04d}-{month_num:02d}")
    click.echo(" ".join(f"{weekday_name(i, config.language):<12}" for i in range(7)))
    for week in month_grid(repo.tasks, year, month_num, include_completed=not open_only):
        cells = []
        for day, assignees in week:
            if day is None:
                cells.append(" " * 12)
                continue
            badge = ""
            if assignees:
                badge = assignees[0] + (f"+{len(assignees) - 1}" if len(assignees) > 1 else "")
            marker = "*" if day == today else " "
            cells.append(f"{day.day:>2}{marker}{badge:<9}"[:12])
        click.echo(" ".join(cells))


@main.command()
@click.argument("deadline")
@click.argument("assignee")
@click.option("--complete", is_flag=True, help="Complete all of the assignee's open tasks on this date")
def day(deadline: str, assignee: str, complete: bool):
    """Show (or batch-complete) an assignee's tasks on a date."""
    config, repo = _load()
    try:
        parse_local_date(deadline)
    except ValueError:
        click.echo(f"Error: {t('validation.deadline', config.language)}", err=True)
        sys.exit(1)

    if complete:
        count = repo.batch_complete(deadline, assignee)
        key = "batch.done" if count else "batch.none"
        click.echo(t(key, config.language, date=deadline, assignee=assignee, count=count))

    for task in tasks_for(repo.tasks, deadline, assignee):
        click.echo(format_task_line(task, language=config.language))
    if all_complete(repo.tasks, deadline, assignee):
        click.echo(t("status.completed", config.language))


# ============== Assignees ==============


@main.group(invoke_without_command=True)
@click.pass_context
def assignees(ctx):
    """Manage assignees."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(assignees_list)


@assignees.command("list")
def assignees_list():
    """List assignees."""
    _, repo = _load()
    for name in repo.assignees:
        click.echo(name)


@assignees.command("add")
@click.argument("name")
def assignees_add(name: str):
    """Add an assignee."""
    config, repo = _load()
    result = repo.add_assignee(name)
    messages = {
        AssigneeResult.OK: "assignee.ok_add",
        AssigneeResult.EMPTY: "assignee.empty",
        AssigneeResult.ALREADY_EXISTS: "assignee.exists",
    }
    message = t(messages[result], config.language, name=name.strip())
    if result is not AssigneeResult.OK:
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)
    click.echo(message)


@assignees.command("remove")
@click.argument("name")
def assignees_remove(name: str):
    """Remove an assignee with no open tasks."""
    config, repo = _load()
    result = repo.remove_assignee(name)
    messages = {
        AssigneeResult.OK: "assignee.ok_remove",
        AssigneeResult.BLOCKED: "assignee.blocked",
        AssigneeResult.NOT_FOUND: "assignee.not_found",
    }
    message = t(messages[result], config.language, name=name)
    if result is not AssigneeResult.OK:
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)
    click.echo(message)


# ============== Schedule ==============


@main.command()
def suggest():
    """Ask the model for a schedule of the active tasks."""
    config, repo = _load()
    active, _ = partition(repo.tasks)
    click.echo(get_advisor(config).suggest(active))
