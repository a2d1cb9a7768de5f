import logging

from quiz_trainer.db.models import User
from quiz_trainer.db.queries import register_user
from quiz_trainer.menus.main_menu import LOGIN_MENU_TEXT
from quiz_trainer.menus.topic_menu import user_list
from quiz_trainer.services.answer_checker import parse_number
from quiz_trainer.states.session_states import Session, SessionState

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Cyber Learning Quiz Application"


def login(session: Session) -> User:
    """LoggedOut state: pick New or Returning user, then move to the main menu."""
    console = session.console
    console.header(WELCOME_TITLE)
    console.write(LOGIN_MENU_TEXT)
    choice = console.ask("\nEnter choice (1-2): ")

    if choice == "1":
        user = create_new_user(session)
    elif choice == "2":
        user = login_existing_user(session)
    else:
        console.write("Invalid choice. Creating new user...")
        console.wait()
        user = create_new_user(session)

    session.user = user
    session.state = SessionState.MAIN_MENU
    return user


def create_new_user(session: Session) -> User:
    console = session.console
    console.header("New User Registration")
    name = console.ask("Enter your name: ")

    user = register_user(session.store, name)

    console.write(f"\n✓ Welcome, {name}! Your User ID is: {user.id}")
    console.pause()
    return user


def login_existing_user(session: Session) -> User:
    """Returning-user list; anything but a valid 1-based number falls back to registration."""
    console = session.console
    users = session.store.load_users()

    if not users:
        console.write("\nNo existing users found. Creating new user...")
        console.wait()
        return create_new_user(session)

    console.header("Returning Users")
    console.write(user_list(users))
    number = parse_number(console.ask("\nEnter user number: "))

    if number is None or not 1 <= number <= len(users):
        console.write("Invalid selection. Creating new user...")
        console.wait()
        return create_new_user(session)

    user = users[number - 1]
    logger.info("User %s logged in", user.id)
    console.write(f"\n✓ Welcome back, {user.name}!")
    console.pause()
    return user
