"""Schedule advisor - hands open tasks to an LLM for a schedule suggestion."""

import asyncio
import logging

from .core.messages import DEFAULT_LANGUAGE, t
from .core.schedule import build_prompt, build_request, parse_response
from .core.tasks import Task
from .ports.llm_service import LLMService

logger = logging.getLogger(__name__)


class ScheduleAdvisor:
    """
    Turns the open task list into a markdown schedule suggestion.

    Never raises: model and validation failures come back as a fixed
    localized error message.
    """

    def __init__(self, llm: LLMService, language: str = DEFAULT_LANGUAGE):
        self.llm = llm
        self.language = language

    def suggest(self, tasks: list[Task]) -> str:
        """Return a markdown schedule, or a localized message."""
        if not tasks:
            return t("advisor.no_tasks", self.language)

        try:
            request = build_request(tasks)
            if not request.tasks:
                return t("advisor.nothing_to_schedule", self.language)
            prompt = build_prompt(request, self.language)
            response = parse_response(self.llm.generate(prompt))
        except Exception:
            logger.exception("Error getting schedule suggestion")
            return t("advisor.error", self.language)

        return response.scheduleSuggestions

    async def suggest_async(self, tasks: list[Task]) -> str:
        """Run suggest() in a worker thread."""
        return await asyncio.to_thread(self.suggest, list(tasks))
