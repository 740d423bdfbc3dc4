"""Configuration management for Taskdesk."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

TASKDESK_HOME = Path(os.environ.get("TASKDESK_HOME", Path.home() / "taskdesk"))
CONFIG_FILE = TASKDESK_HOME / "config" / "taskdesk.conf"
DATA_DIR = TASKDESK_HOME / "data"

DEFAULT_ASSIGNEES = ["최준원", "백옥주", "추효정", "추성욱", "신미경", "추상훈"]


@dataclass
class Config:
    """Taskdesk configuration."""

    language: str = "ko"
    default_assignees: list[str] = field(default_factory=lambda: list(DEFAULT_ASSIGNEES))
    data_dir: str = ""
    tasks_key: str = "tasks"
    assignees_key: str = "assignees"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    llm_timeout: int = 60

    @property
    def resolved_data_dir(self) -> Path:
        """Data directory, falling back to TASKDESK_HOME/data."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskdesk.conf, then environment overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "language":
                    config.language = value
                case "default_assignees":
                    config.default_assignees = [a.strip() for a in value.split(",") if a.strip()]
                case "data_dir":
                    config.data_dir = value
                case "tasks_key":
                    config.tasks_key = value
                case "assignees_key":
                    config.assignees_key = value
                case "gemini_api_key":
                    config.gemini_api_key = value
                case "gemini_model":
                    config.gemini_model = value
                case "llm_timeout":
                    try:
                        config.llm_timeout = int(value)
                    except ValueError:
                        logger.warning(f"Ignoring invalid LLM_TIMEOUT: {value!r}")
                case _:
                    logger.debug(f"Unknown config key: {key}")

    if not config.gemini_api_key:
        config.gemini_api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY", "")

    return config
