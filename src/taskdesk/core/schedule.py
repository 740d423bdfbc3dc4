"""Schedule suggestion request shaping and response parsing - no I/O."""

import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .messages import DEFAULT_LANGUAGE, t
from .tasks import Task


class ScheduleTask(BaseModel):
    """One task as sent to the model."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(description="The name of the task.")
    assignee: StrictStr = Field(description="The person responsible for the task.")
    deadline: StrictStr = Field(description="The deadline for the task (YYYY-MM-DD).")
    priority: Literal["high", "medium", "low"]


class SuggestScheduleInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tasks: list[ScheduleTask]


class SuggestScheduleOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scheduleSuggestions: StrictStr


PROMPT_TEMPLATE = """You are an AI assistant that specializes in creating optimized schedules.

Given the following tasks, their assignees, deadlines, and priorities, create an optimized schedule in markdown format.

Tasks:
{task_lines}

Consider the priority and deadlines of each task to create the most efficient schedule.
Order the work by priority first, then by deadline.
The schedule should include time slots and assigned tasks. Use {language} for all text.
Use markdown to format the output.
"""


def build_request(tasks: list[Task]) -> SuggestScheduleInput:
    """Restrict to incomplete tasks and map them to the request schema."""
    return SuggestScheduleInput.model_validate(
        {
            "tasks": [
                {
                    "name": task.name,
                    "assignee": task.assignee,
                    "deadline": task.deadline,
                    "priority": task.priority.value,
                }
                for task in tasks
                if not task.completed
            ]
        }
    )


def build_prompt(request: SuggestScheduleInput, language: str = DEFAULT_LANGUAGE) -> str:
    """Render the fixed instruction template for a request."""
    task_lines = "\n".join(
        f"- Task Name: {task.name}\n"
        f"  Assignee: {task.assignee}\n"
        f"  Deadline: {task.deadline}\n"
        f"  Priority: {task.priority}"
        for task in request.tasks
    )
    return PROMPT_TEMPLATE.format(task_lines=task_lines, language=t("advisor.language", language))


def parse_response(text: str) -> SuggestScheduleOutput:
    """
    Turn raw model output into a validated response.

    A JSON object must match the response schema exactly; anything else is
    treated as the markdown suggestion itself.
    """
    stripped = text.strip()
    if stripped.startswith("{"):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            data = None
        if data is not None:
            return SuggestScheduleOutput.model_validate(data)
    if not stripped:
        raise ValueError("Empty schedule suggestion")
    return SuggestScheduleOutput(scheduleSuggestions=stripped)
