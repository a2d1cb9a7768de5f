import logging

from quiz_trainer.handlers.admin import admin_panel
from quiz_trainer.handlers.quiz import select_quiz_module
from quiz_trainer.handlers.results import view_scores
from quiz_trainer.handlers.start import login
from quiz_trainer.menus.main_menu import MAIN_MENU_CHOICES, MAIN_MENU_TEXT
from quiz_trainer.states.session_states import Session, SessionState

logger = logging.getLogger(__name__)

FAREWELL_TEXT = (
    "\nThank you for using Cyber Learning Quiz!\n"
    "Your progress has been saved."
)


def main_menu(session: Session) -> None:
    """MainMenu state: read one choice and move to the matching state."""
    console = session.console
    user = session.user
    console.header(f"User: {user.name} ({user.id})")
    console.write(MAIN_MENU_TEXT)
    choice = console.ask("\nEnter choice (1-5): ")

    next_state = MAIN_MENU_CHOICES.get(choice)
    if next_state is None:
        console.write("Invalid choice.")
        console.pause()
        return

    session.state = next_state


def run_session(session: Session) -> int:
    """
    Drive the session state machine until Exit is chosen.

    Returns the process exit code (always 0; only MainMenu 'Exit' ends the loop).
    """
    handlers = {
        SessionState.LOGGED_OUT: login,
        SessionState.MAIN_MENU: main_menu,
        SessionState.QUIZ: select_quiz_module,
        SessionState.SCORES: view_scores,
        SessionState.ADMIN: admin_panel,
    }

    while session.state is not SessionState.TERMINATED:
        if session.state is SessionState.LOGGED_OUT:
            # Switching user drops the current one before the login screen
            session.user = None
        handlers[session.state](session)

    logger.info("Session ended for %s", session.user.id if session.user else None)
    session.console.write(FAREWELL_TEXT)
    session.user = None
    return 0
