"""Shared wiring from Config to the repository and schedule advisor."""

from .adapters.file_snapshot import FileSnapshotStore
from .adapters.gemini_api import GeminiAPIService
from .advisor import ScheduleAdvisor
from .config import Config
from .ports.snapshot_store import SnapshotStore
from .repository import TaskRepository


def get_repository(config: Config, store: SnapshotStore | None = None) -> TaskRepository:
    """Build a repository for the configured data dir and load it."""
    repo = TaskRepository(
        store or FileSnapshotStore(config.resolved_data_dir),
        default_assignees=config.default_assignees,
        tasks_key=config.tasks_key,
        assignees_key=config.assignees_key,
        language=config.language,
    )
    repo.load()
    return repo


def get_advisor(config: Config) -> ScheduleAdvisor:
    """Build a schedule advisor backed by the Gemini API."""
    llm = GeminiAPIService(
        api_key=config.gemini_api_key,
        model=config.gemini_model,
        timeout=config.llm_timeout,
    )
    return ScheduleAdvisor(llm, language=config.language)
