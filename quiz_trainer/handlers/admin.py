import logging
from typing import Optional

from quiz_trainer.config import DELETE_CONFIRM_TOKEN, MODULE_CONFIRM_TOKEN, OPTIONS_PER_QUESTION
from quiz_trainer.db.queries import (
    add_question,
    change_admin_password,
    delete_user,
    module_choices,
    remove_module,
    remove_question,
)
from quiz_trainer.exceptions import QuizTrainerError
from quiz_trainer.menus.admin_menu import ADMIN_MENU_TEXT, MANAGE_USERS_TEXT
from quiz_trainer.menus.topic_menu import question_list, user_list
from quiz_trainer.services.admin_auth import check_admin_password
from quiz_trainer.services.answer_checker import parse_number
from quiz_trainer.services.progress_tracker import format_module_list, format_question_catalog
from quiz_trainer.states.session_states import Session, SessionState

logger = logging.getLogger(__name__)


def admin_panel(session: Session) -> None:
    """Password gate, then the admin menu loop until 'Back'."""
    console = session.console
    console.header("Admin Authentication")
    password = console.ask("Enter admin password: ")

    if not check_admin_password(session.admin_config, password):
        logger.warning("Admin access denied")
        console.write("\n✗ Access Denied! Incorrect password.")
        console.pause()
        session.state = SessionState.MAIN_MENU
        return

    console.write("\n✓ Access Granted!")
    console.wait()

    actions = {
        "1": add_new_question,
        "2": remove_question_screen,
        "3": add_new_module,
        "4": remove_module_screen,
        "5": manage_users,
        "6": list_all_questions,
        "7": change_password_screen,
    }

    while True:
        console.header("Admin Panel")
        console.write(ADMIN_MENU_TEXT)
        choice = console.ask("\nEnter choice (1-8): ")

        if choice == "8":
            break
        action = actions.get(choice)
        if action is None:
            console.write("Invalid choice.")
            console.pause()
            continue
        action(session)

    session.state = SessionState.MAIN_MENU


def add_new_question(session: Session, category: Optional[str] = None, module: Optional[str] = None) -> None:
    console = session.console
    console.header("Add New Question")

    if category is None:
        category = console.ask("Enter Category (e.g., CompTIA, Cisco): ")
    if module is None:
        module = console.ask("Enter Module (e.g., PenTest+, CCNA): ")

    text = console.ask("\nEnter Question: ")
    options = [console.ask(f"Enter Option {i}: ") for i in range(1, OPTIONS_PER_QUESTION + 1)]
    answer_number = parse_number(console.ask(f"\nEnter correct answer number (1-{OPTIONS_PER_QUESTION}): "))

    try:
        add_question(session.store, session.quiz_data, category, module, text, options, answer_number)
    except QuizTrainerError as e:
        logger.info("Add question rejected: %s", e)
        console.write("Invalid answer number.")
        console.pause()
        return

    console.write("\n✓ Question added successfully!")
    console.pause()


def remove_question_screen(session: Session) -> None:
    console = session.console
    console.header("Remove Question")
    questions = session.quiz_data.questions

    if not questions:
        console.write("No questions available to remove.")
        console.pause()
        return

    console.write(question_list(questions))
    number = parse_number(
        console.ask(f"\nEnter question number to remove (1-{len(questions)}) or 0 to cancel: ")
    )
    if number == 0:
        return

    try:
        remove_question(session.store, session.quiz_data, number)
    except QuizTrainerError:
        console.write("Invalid choice.")
        console.pause()
        return

    console.write("\n✓ Question removed successfully!")
    console.pause()


def add_new_module(session: Session) -> None:
    """Modules only exist through their questions, so this just names one and offers to add a question to it."""
    console = session.console
    console.header("Add New Module")
    console.write("To add a new module, simply add questions with the new category/module name.")
    console.write("Modules are created automatically when you add questions.\n")

    category = console.ask("Enter new Category name: ")
    module = console.ask("Enter new Module name: ")

    console.write(f"\nNew module '{category} - {module}' will be created when you add questions to it.")
    if console.ask("Would you like to add a question now? (y/n): ").lower() == "y":
        add_new_question(session, category=category, module=module)
    else:
        console.pause()


def remove_module_screen(session: Session) -> None:
    console = session.console
    console.header("Remove Module")

    choices = module_choices(session.quiz_data.questions)
    if not choices:
        console.write("No modules available to remove.")
        console.pause()
        return

    console.write(format_module_list(session.quiz_data.questions))
    number = parse_number(
        console.ask(f"\nEnter module number to remove (1-{len(choices)}) or 0 to cancel: ")
    )
    if number == 0:
        return

    if number is None or not 1 <= number <= len(choices):
        console.write("Invalid choice.")
        console.pause()
        return

    category, module = choices[number - 1]
    console.write(f"\n⚠ WARNING: This will delete all questions in {category} - {module}!")
    if console.ask("Are you sure? (yes/no): ").lower() == MODULE_CONFIRM_TOKEN:
        remove_module(session.store, session.quiz_data, category, module)
        console.write("\n✓ Module removed successfully!")
    else:
        console.write("\nCancelled.")
    console.pause()


def manage_users(session: Session) -> None:
    console = session.console
    console.header("User Management")
    users = session.store.load_users()

    if not users:
        console.write("No users found.")
        console.pause()
        return

    console.write(user_list(users, with_created=True))
    console.write()
    console.write(MANAGE_USERS_TEXT)

    if console.ask("\nEnter choice: ") == "1":
        number = parse_number(console.ask("Enter user number to delete: "))
        if number is not None and 1 <= number <= len(users):
            console.write(f"\n⚠ WARNING: Delete user {users[number - 1].name}?")
            if console.ask(f"Type '{DELETE_CONFIRM_TOKEN}' to confirm: ") == DELETE_CONFIRM_TOKEN:
                delete_user(session.store, number)
                console.write("\n✓ User deleted successfully!")
            else:
                console.write("\nCancelled.")
        else:
            console.write("Invalid selection.")

    console.pause()


def list_all_questions(session: Session) -> None:
    console = session.console
    console.header("All Questions")
    console.write(format_question_catalog(session.quiz_data.questions))
    console.write()
    console.pause()


def change_password_screen(session: Session) -> None:
    console = session.console
    console.header("Change Admin Password")

    current = console.ask("Enter current password: ")
    if not check_admin_password(session.admin_config, current):
        console.write("\n✗ Incorrect password!")
        console.pause()
        return

    new = console.ask("Enter new password: ")
    confirm = console.ask("Confirm new password: ")

    try:
        change_admin_password(session.store, session.admin_config, current, new, confirm)
    except QuizTrainerError as e:
        console.write(f"\n✗ {e}!")
        console.pause()
        return

    console.write("\n✓ Admin password changed successfully!")
    console.pause()
