"""JSON document storage for users, questions and admin config."""
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from quiz_trainer.config import ADMIN_FILE, QUESTIONS_FILE, USERS_FILE
from quiz_trainer.db.models import AdminConfig, QuizData, User
from quiz_trainer.db.seed import default_admin_config, default_quiz_data

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(List[User])


class JsonStore:
    """
    Whole-document load/save of the three collections.

    Every save replaces the file. Loads never raise on bad content: an
    unreadable or malformed document is replaced by its fallback value
    (see the ``*_FALLBACK`` notes on each loader). This is best-effort by
    design and a known weak point: a corrupt users.json reads as empty and
    the next save overwrites it.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.users_path = self.data_dir / USERS_FILE
        self.questions_path = self.data_dir / QUESTIONS_FILE
        self.admin_path = self.data_dir / ADMIN_FILE

    # ========================================================================
    # USERS
    # ========================================================================

    def load_users(self) -> List[User]:
        """Load all users in storage order. USERS_FALLBACK: []."""
        if not self.users_path.exists():
            return []
        try:
            return _users_adapter.validate_json(self.users_path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning("Falling back to empty user list, %s unreadable: %s", self.users_path, e)
            return []

    def save_users(self, users: List[User]) -> None:
        self._write(self.users_path, _users_adapter.dump_json(users, indent=2))
        logger.info("Saved %d users", len(users))

    # ========================================================================
    # QUESTIONS
    # ========================================================================

    def load_questions(self) -> QuizData:
        """
        Load the question document.

        Absent file: the default question set is seeded and written.
        QUESTIONS_FALLBACK (file present but malformed): empty QuizData, not re-seeded.
        """
        if not self.questions_path.exists():
            quiz_data = default_quiz_data()
            logger.info("Seeding %d default questions into %s", len(quiz_data.questions), self.questions_path)
            self.save_questions(quiz_data)
            return quiz_data
        try:
            return QuizData.model_validate_json(self.questions_path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning("Falling back to empty question set, %s unreadable: %s", self.questions_path, e)
            return QuizData()

    def save_questions(self, quiz_data: QuizData) -> None:
        self._write(self.questions_path, quiz_data.model_dump_json(indent=2).encode("utf-8"))
        logger.info("Saved %d questions", len(quiz_data.questions))

    # ========================================================================
    # ADMIN CONFIG
    # ========================================================================

    def load_admin_config(self) -> AdminConfig:
        """
        Load the admin config.

        Absent file: the default password is seeded and written.
        ADMIN_FALLBACK (file present but malformed): default password, not written.
        """
        if not self.admin_path.exists():
            config = default_admin_config()
            logger.info("Seeding default admin config into %s", self.admin_path)
            self.save_admin_config(config)
            return config
        try:
            return AdminConfig.model_validate_json(self.admin_path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning("Falling back to default admin password, %s unreadable: %s", self.admin_path, e)
            return default_admin_config()

    def save_admin_config(self, config: AdminConfig) -> None:
        self._write(self.admin_path, config.model_dump_json(indent=2).encode("utf-8"))
        logger.info("Saved admin config")

    def _write(self, path: Path, payload: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
