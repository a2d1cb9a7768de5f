"""Configuration settings using pydantic-settings."""
import logging
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    DATA_DIR: str = Field(
        default="",
        description="Directory for users/questions/admin JSON files (empty = platform cache dir)"
    )
    APP_DIR_NAME: str = Field(
        default="cyber-quiz",
        description="Folder name created under the platform cache dir"
    )

    # Admin
    DEFAULT_ADMIN_PASSWORD: str = Field(
        default="admin123",
        description="Admin password written on first run"
    )

    # Terminal
    UI_DELAY_SECONDS: float = Field(
        default=1.0,
        description="Cosmetic pause after status messages (0 disables)"
    )
    CLEAR_SCREEN: bool = Field(
        default=True,
        description="Clear the terminal before each screen"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    LOG_FILE: str = Field(
        default="",
        description="Path to log file (empty = quiz_trainer.log in the data dir)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()

USERS_FILE = "users.json"
QUESTIONS_FILE = "questions.json"
ADMIN_FILE = "admin.json"

OPTIONS_PER_QUESTION = 4

# Score bands, in percent
PRAISE_THRESHOLD = 80
NEUTRAL_THRESHOLD = 60

DELETE_CONFIRM_TOKEN = "DELETE"
MODULE_CONFIRM_TOKEN = "yes"


def resolve_data_dir(config: Settings = settings) -> Path:
    """Return the directory holding the JSON documents, creating it if absent."""
    if config.DATA_DIR:
        data_dir = Path(config.DATA_DIR).expanduser()
    else:
        cache_home = os.getenv("XDG_CACHE_HOME")
        if cache_home:
            data_dir = Path(cache_home) / config.APP_DIR_NAME
        else:
            try:
                data_dir = Path.home() / ".cache" / config.APP_DIR_NAME
            except RuntimeError:
                # No resolvable home: fall back to a dot-folder in the cwd
                logger.warning("Home directory could not be resolved, using current directory")
                data_dir = Path.cwd() / f".{config.APP_DIR_NAME}"

    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
