"""Tests for grouped and sorted task views."""

from datetime import datetime

import pytest

from taskdesk.core.organizer import SortOption, ViewMode, completed_first, group_label, organize
from taskdesk.core.tasks import Priority, Task


def make_task(id, assignee="Kim", deadline="2025-03-10", priority=Priority.MEDIUM, completed=False):
    return Task(
        id=id,
        name=f"Task {id}",
        assignee=assignee,
        deadline=deadline,
        priority=priority,
        completed=completed,
        completion_date=datetime(2025, 3, 1, 12, 0) if completed else None,
    )


@pytest.fixture
def sample_tasks():
    return [
        make_task("1", "Lee", "2025-03-12", Priority.LOW),
        make_task("2", "Kim", "2025-03-10", Priority.HIGH),
        make_task("3", "Kim", "2025-03-05", Priority.MEDIUM, completed=True),
        make_task("4", "", "2025-03-10", Priority.HIGH),
        make_task("5", "Kim", "2025-03-08", Priority.LOW),
        make_task("6", "Lee", "2025-03-10", Priority.MEDIUM),
    ]


def ids(tasks):
    return [t.id for t in tasks]


class TestCompletedFirst:
    def test_stable_partition(self, sample_tasks):
        assert ids(completed_first(sample_tasks)) == ["3", "1", "2", "4", "5", "6"]


class TestOrganize:
    def test_empty(self):
        for mode in ViewMode:
            assert organize([], mode) == []

    def test_single_task_by_assignee(self):
        task = Task(id="a", name="Report", assignee="Kim", deadline="2025-03-10", priority=Priority.HIGH)
        groups = organize([task], ViewMode.BY_ASSIGNEE)
        assert len(groups) == 1
        assert groups[0].key == "Kim"
        assert groups[0].display_label == "Kim"
        assert groups[0].tasks == [task]

    def test_by_assignee_groups_sorted_with_placeholder(self, sample_tasks):
        groups = organize(sample_tasks, ViewMode.BY_ASSIGNEE, language="en")
        assert [g.key for g in groups] == ["Kim", "Lee", "unassigned"]
        assert groups[2].display_label == "Unassigned"
        assert ids(groups[2].tasks) == ["4"]

    def test_by_assignee_completed_first_then_deadline(self, sample_tasks):
        kim = organize(sample_tasks, ViewMode.BY_ASSIGNEE)[0]
        assert ids(kim.tasks) == ["3", "5", "2"]

    def test_completed_first_beats_deadline(self):
        tasks = [
            make_task("early", deadline="2025-03-01"),
            make_task("late", deadline="2025-03-20", completed=True),
        ]
        group = organize(tasks, ViewMode.BY_ASSIGNEE)[0]
        assert ids(group.tasks) == ["late", "early"]

    def test_by_assignee_sort_by_priority(self, sample_tasks):
        kim = organize(sample_tasks, ViewMode.BY_ASSIGNEE, sort=SortOption.PRIORITY)[0]
        # Completed still first, then high before low
        assert ids(kim.tasks) == ["3", "2", "5"]

    def test_by_assignee_sort_deadline_matches_default(self, sample_tasks):
        default = organize(sample_tasks, ViewMode.BY_ASSIGNEE)
        by_deadline = organize(sample_tasks, ViewMode.BY_ASSIGNEE, sort=SortOption.DEADLINE)
        assert [ids(g.tasks) for g in default] == [ids(g.tasks) for g in by_deadline]

    def test_sort_option_leaves_other_views_alone(self, sample_tasks):
        default = organize(sample_tasks, ViewMode.BY_DEADLINE)
        with_sort = organize(sample_tasks, ViewMode.BY_DEADLINE, sort=SortOption.PRIORITY)
        assert [ids(g.tasks) for g in default] == [ids(g.tasks) for g in with_sort]

    def test_by_deadline_chronological(self, sample_tasks):
        groups = organize(sample_tasks, ViewMode.BY_DEADLINE)
        assert [g.key for g in groups] == ["2025-03-05", "2025-03-08", "2025-03-10", "2025-03-12"]

    def test_by_deadline_tie_break_priority_then_assignee(self, sample_tasks):
        groups = organize(sample_tasks, ViewMode.BY_DEADLINE)
        tenth = next(g for g in groups if g.key == "2025-03-10")
        # Both high: "" sorts before "Kim"; then medium Lee
        assert ids(tenth.tasks) == ["4", "2", "6"]

    def test_by_deadline_label_has_weekday(self, sample_tasks):
        groups = organize(sample_tasks, ViewMode.BY_DEADLINE, language="en")
        assert groups[0].display_label == "2025-03-05 (Wed)"
        ko_groups = organize(sample_tasks, ViewMode.BY_DEADLINE, language="ko")
        assert ko_groups[0].display_label == "2025-03-05 (수)"

    def test_by_priority_fixed_order(self, sample_tasks):
        groups = organize(sample_tasks, ViewMode.BY_PRIORITY)
        assert [g.key for g in groups] == ["high", "medium", "low"]
        assert [g.display_label for g in groups] == ["높음", "중간", "낮음"]

    def test_by_priority_omits_empty(self):
        tasks = [make_task("1", priority=Priority.LOW), make_task("2", priority=Priority.HIGH)]
        groups = organize(tasks, ViewMode.BY_PRIORITY)
        assert [g.key for g in groups] == ["high", "low"]
        assert len(groups) <= 3

    def test_by_priority_tie_break_deadline_then_assignee(self, sample_tasks):
        groups = organize(sample_tasks, ViewMode.BY_PRIORITY)
        medium = groups[1]
        assert ids(medium.tasks) == ["3", "6"]
        high = groups[0]
        assert ids(high.tasks) == ["4", "2"]

    def test_deadline_groups_sort_by_date_not_text(self):
        tasks = [make_task("1", deadline="2025-12-01"), make_task("2", deadline="2025-02-01")]
        groups = organize(tasks, ViewMode.BY_DEADLINE)
        assert [g.key for g in groups] == ["2025-02-01", "2025-12-01"]

    def test_every_task_appears_once(self, sample_tasks):
        for mode in ViewMode:
            groups = organize(sample_tasks, mode)
            assert sorted(t.id for g in groups for t in g.tasks) == sorted(ids(sample_tasks))


class TestGroupLabel:
    def test_assignee_raw_name(self):
        assert group_label("Kim", ViewMode.BY_ASSIGNEE) == "Kim"

    def test_placeholder_korean(self):
        assert group_label("unassigned", ViewMode.BY_ASSIGNEE, "ko") == "미지정"
