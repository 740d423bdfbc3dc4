"""Localized user-facing strings."""

DEFAULT_LANGUAGE = "ko"

MESSAGES: dict[str, dict[str, str]] = {
    "ko": {
        "priority.high": "높음",
        "priority.medium": "중간",
        "priority.low": "낮음",
        "assignee.unassigned": "미지정",
        "weekdays": "월,화,수,목,금,토,일",
        "advisor.no_tasks": "추천할 스케줄을 만들기 위한 업무가 없습니다. 먼저 업무를 추가해주세요.",
        "advisor.nothing_to_schedule": "완료되지 않은 업무가 없어 스케줄을 추천할 수 없습니다.",
        "advisor.error": "AI 스케줄 추천을 받는 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요.",
        "advisor.language": "Korean",
        "task.added": '"{name}" 업무가 성공적으로 추가되었습니다.',
        "task.updated": '"{name}" 업무가 성공적으로 수정되었습니다.',
        "task.deleted": '"{name}" 업무가 삭제되었습니다.',
        "task.not_found": "해당 업무를 찾을 수 없습니다: {task_id}",
        "task.completed": '"{name}" 업무를 완료했습니다.',
        "task.reopened": '"{name}" 업무를 다시 진행 중으로 변경했습니다.',
        "reminder.on": '"{name}" 업무의 알림이 활성화되었습니다.',
        "reminder.off": '"{name}" 업무의 알림이 비활성화되었습니다.',
        "batch.done": "{date} {assignee}님의 업무 {count}건을 완료 처리했습니다.",
        "batch.none": "{date} {assignee}님의 미완료 업무가 없습니다.",
        "assignee.ok_add": '담당자 "{name}"을(를) 추가했습니다.',
        "assignee.ok_remove": '담당자 "{name}"을(를) 삭제했습니다.',
        "assignee.empty": "담당자 이름을 입력해주세요.",
        "assignee.exists": '담당자 "{name}"은(는) 이미 존재합니다.',
        "assignee.blocked": '"{name}"님에게 미완료 업무가 있어 삭제할 수 없습니다.',
        "assignee.not_found": '담당자 "{name}"을(를) 찾을 수 없습니다.',
        "list.empty": "아직 등록된 업무가 없습니다.",
        "status.completed": "완료됨",
        "status.overdue": "마감 초과!",
        "status.due_today": "오늘 마감!",
        "status.due_soon": "{days}일 남음",
        "validation.name": "업무명을 입력해주세요.",
        "validation.assignee": "담당자를 선택해주세요.",
        "validation.assignee_unknown": '등록되지 않은 담당자입니다: "{assignee}"',
        "validation.deadline": "마감일은 YYYY-MM-DD 형식이어야 합니다.",
        "validation.priority": "중요도를 선택해주세요.",
    },
    "en": {
        "priority.high": "High",
        "priority.medium": "Medium",
        "priority.low": "Low",
        "assignee.unassigned": "Unassigned",
        "weekdays": "Mon,Tue,Wed,Thu,Fri,Sat,Sun",
        "advisor.no_tasks": "There are no tasks to build a schedule from. Add a task first.",
        "advisor.nothing_to_schedule": "Every task is already complete, so there is nothing to schedule.",
        "advisor.error": "Something went wrong while getting a schedule suggestion. Please try again later.",
        "advisor.language": "English",
        "task.added": 'Added task "{name}".',
        "task.updated": 'Updated task "{name}".',
        "task.deleted": 'Deleted task "{name}".',
        "task.not_found": "No task found for: {task_id}",
        "task.completed": 'Completed task "{name}".',
        "task.reopened": 'Reopened task "{name}".',
        "reminder.on": 'Reminders are now on for "{name}".',
        "reminder.off": 'Reminders are now off for "{name}".',
        "batch.done": "Completed {count} task(s) for {assignee} on {date}.",
        "batch.none": "{assignee} has no open tasks on {date}.",
        "assignee.ok_add": 'Added assignee "{name}".',
        "assignee.ok_remove": 'Removed assignee "{name}".',
        "assignee.empty": "Assignee name cannot be empty.",
        "assignee.exists": 'Assignee "{name}" already exists.',
        "assignee.blocked": '"{name}" still has open tasks and cannot be removed.',
        "assignee.not_found": 'No assignee named "{name}".',
        "list.empty": "No tasks yet.",
        "status.completed": "Done",
        "status.overdue": "OVERDUE",
        "status.due_today": "due TODAY",
        "status.due_soon": "{days}d left",
        "validation.name": "Task name is required.",
        "validation.assignee": "Assignee is required.",
        "validation.assignee_unknown": 'Unknown assignee: "{assignee}"',
        "validation.deadline": "Deadline must be in YYYY-MM-DD format.",
        "validation.priority": "Priority must be one of high, medium, low.",
    },
}


def t(key: str, language: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    """Look up a message, falling back to the default language."""
    table = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    text = table.get(key, MESSAGES[DEFAULT_LANGUAGE][key])
    return text.format(**kwargs) if kwargs else text


def weekday_name(weekday: int, language: str = DEFAULT_LANGUAGE) -> str:
    """Short weekday name, Monday = 0."""
    return t("weekdays", language).split(",")[weekday]
