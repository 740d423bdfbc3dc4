"""Task repository - the single owner of the canonical task list."""

import json
import logging
import uuid
from dataclasses import replace
from datetime import datetime
from enum import Enum

from .core.calendar import batch_complete
from .core.messages import DEFAULT_LANGUAGE
from .core.tasks import Priority, Task, TaskDraft, validate_draft
from .ports.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a draft is rejected. State is left untouched."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class AssigneeResult(Enum):
    OK = "ok"
    EMPTY = "empty"
    ALREADY_EXISTS = "already_exists"
    BLOCKED = "blocked"
    NOT_FOUND = "not_found"


class TaskRepository:
    """
    In-memory task and assignee collections backed by a SnapshotStore.

    Every mutation finishes by writing the whole affected collection back
    to the store. Unknown task ids are silent no-ops.
    """

    def __init__(
        self,
        store: SnapshotStore,
        default_assignees: list[str] | None = None,
        tasks_key: str = "tasks",
        assignees_key: str = "assignees",
        language: str = DEFAULT_LANGUAGE,
    ):
        self.store = store
        self.default_assignees = list(default_assignees or [])
        self.tasks_key = tasks_key
        self.assignees_key = assignees_key
        self.language = language
        self._tasks: list[Task] = []
        self._assignees: list[str] = list(self.default_assignees)

    # ============== Loading / Saving ==============

    def _read_list(self, key: str) -> list | None:
        """Read a JSON list snapshot; None when absent or unusable."""
        try:
            raw = self.store.read(key)
        except (UnicodeDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable '{key}' snapshot: {e}")
            return None
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupt '{key}' snapshot: {e}")
            return None
        if not isinstance(data, list):
            logger.warning(f"Ignoring '{key}' snapshot: expected a list, got {type(data).__name__}")
            return None
        return data

    def load(self) -> tuple[list[Task], list[str]]:
        """Load both collections from the store, degrading to empty state."""
        tasks = []
        seen_ids = set()
        for entry in self._read_list(self.tasks_key) or []:
            try:
                task = Task.from_dict(entry)
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed task entry {entry!r}: {e}")
                continue
            if task.id in seen_ids:
                logger.warning(f"Skipping task with duplicate id {task.id!r}")
                continue
            seen_ids.add(task.id)
            tasks.append(task)
        self._tasks = tasks

        assignees = self._read_list(self.assignees_key)
        if assignees is None:
            self._assignees = list(self.default_assignees)
        else:
            self._assignees = []
            for name in assignees:
                if isinstance(name, str) and name.strip() and name not in self._assignees:
                    self._assignees.append(name)

        return self.tasks, self.assignees

    def _save_tasks(self) -> None:
        self.store.write(
            self.tasks_key,
            json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False),
        )

    def _save_assignees(self) -> None:
        self.store.write(self.assignees_key, json.dumps(self._assignees, ensure_ascii=False))

    # ============== Queries ==============

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def assignees(self) -> list[str]:
        return list(self._assignees)

    def get(self, task_id: str) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def find(self, prefix: str) -> Task | None:
        """Look up a task by full id or unique id prefix."""
        exact = self.get(prefix)
        if exact is not None:
            return exact
        matches = [t for t in self._tasks if t.id.startswith(prefix)]
        return matches[0] if len(matches) == 1 else None

    # ============== Task Mutations ==============

    def _validate(self, draft: TaskDraft, assignees: list[str] | None = None) -> None:
        errors = validate_draft(draft, assignees, self.language)
        if errors:
            raise ValidationError(errors)

    def create(self, draft: TaskDraft) -> Task:
        """Add a new task at the front of the list."""
        self._validate(draft, self._assignees)
        task = Task(
            id=uuid.uuid4().hex,
            name=draft.name,
            assignee=draft.assignee,
            deadline=draft.deadline,
            priority=Priority(draft.priority),
            notes=draft.notes or None,
        )
        self._tasks.insert(0, task)
        self._save_tasks()
        return task

    def update(self, task_id: str, draft: TaskDraft) -> Task | None:
        """Overwrite the editable fields of a task."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                self._validate(draft)
                updated = replace(
                    task,
                    name=draft.name,
                    assignee=draft.assignee,
                    deadline=draft.deadline,
                    priority=Priority(draft.priority),
                    notes=draft.notes or None,
                )
                self._tasks[i] = updated
                self._save_tasks()
                return updated
        return None

    def _replace(self, task_id: str, **changes) -> Task | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = replace(task, **changes)
                self._tasks[i] = updated
                self._save_tasks()
                return updated
        return None

    def set_completed(self, task_id: str, value: bool, now: datetime | None = None) -> Task | None:
        """
        Mark a task complete or incomplete.

        Completing stamps completion_date; reopening clears it. Completing an
        already completed task keeps its original stamp.
        """
        task = self.get(task_id)
        if task is None:
            return None
        if value and task.completed:
            return task
        if value:
            return self._replace(task_id, completed=True, completion_date=now or datetime.now())
        return self._replace(task_id, completed=False, completion_date=None)

    def toggle_completed(self, task_id: str, now: datetime | None = None) -> Task | None:
        """Flip completion. Returns the task in its new state."""
        task = self.get(task_id)
        if task is None:
            return None
        return self.set_completed(task_id, not task.completed, now)

    def set_reminder(self, task_id: str, value: bool) -> Task | None:
        return self._replace(task_id, enable_reminders=value)

    def toggle_reminder(self, task_id: str) -> Task | None:
        """Flip reminders. Returns the task in its new state."""
        task = self.get(task_id)
        if task is None:
            return None
        return self.set_reminder(task_id, not task.enable_reminders)

    def delete(self, task_id: str) -> Task | None:
        task = self.get(task_id)
        if task is None:
            return None
        self._tasks = [t for t in self._tasks if t.id != task_id]
        self._save_tasks()
        return task

    def batch_complete(self, deadline: str, assignee: str, now: datetime | None = None) -> int:
        """Complete an assignee's open tasks on a date. Returns the count."""
        updated, count = batch_complete(self._tasks, deadline, assignee, now)
        if count:
            self._tasks = updated
            self._save_tasks()
        return count

    # ============== Assignees ==============

    def add_assignee(self, name: str) -> AssigneeResult:
        name = (name or "").strip()
        if not name:
            return AssigneeResult.EMPTY
        if name in self._assignees:
            return AssigneeResult.ALREADY_EXISTS
        self._assignees.append(name)
        self._save_assignees()
        return AssigneeResult.OK

    def remove_assignee(self, name: str) -> AssigneeResult:
        if any(t.assignee == name and not t.completed for t in self._tasks):
            return AssigneeResult.BLOCKED
        if name not in self._assignees:
            return AssigneeResult.NOT_FOUND
        self._assignees.remove(name)
        self._save_assignees()
        return AssigneeResult.OK
