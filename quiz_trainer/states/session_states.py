"""States of the interactive session."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from quiz_trainer.db.models import AdminConfig, QuizData, User
from quiz_trainer.db.storage import JsonStore
from quiz_trainer.ui.console import Console


class SessionState(Enum):
    LOGGED_OUT = "logged_out"    # No current user, login/registration screen
    MAIN_MENU = "main_menu"      # User chosen, waiting for a 1-5 choice
    QUIZ = "quiz"                # Selecting and taking a module quiz
    SCORES = "scores"            # Viewing own scores
    ADMIN = "admin"              # Password gate and admin panel
    TERMINATED = "terminated"    # Exit chosen, process ends with code 0


@dataclass
class Session:
    """Everything one interactive run works on.

    ``user`` is set at login, replaced on switch-user and dropped at exit.
    ``quiz_data`` and ``admin_config`` are the in-memory working copies;
    every mutation to them is written through ``store`` immediately.
    """
    store: JsonStore
    console: Console
    quiz_data: QuizData
    admin_config: AdminConfig
    user: Optional[User] = None
    state: SessionState = SessionState.LOGGED_OUT

    @classmethod
    def open(cls, store: JsonStore, console: Console) -> "Session":
        """Load questions and admin config (seeding defaults on first run)."""
        return cls(
            store=store,
            console=console,
            quiz_data=store.load_questions(),
            admin_config=store.load_admin_config(),
        )
