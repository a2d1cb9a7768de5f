import logging
from typing import Tuple

from quiz_trainer.db.queries import module_choices, questions_in, record_score
from quiz_trainer.handlers.results import show_results
from quiz_trainer.menus.topic_menu import module_menu
from quiz_trainer.services.answer_checker import check_answer, parse_number
from quiz_trainer.states.session_states import Session, SessionState

logger = logging.getLogger(__name__)


def select_quiz_module(session: Session) -> None:
    """List modules, take the chosen one, then return to the main menu."""
    console = session.console
    console.header("Select Quiz Module")

    choices = module_choices(session.quiz_data.questions)
    if not choices:
        console.write("No quiz modules available.")
        console.pause()
        session.state = SessionState.MAIN_MENU
        return

    back_number = len(choices) + 1
    console.write(module_menu(session.quiz_data.questions, back_number))
    number = parse_number(console.ask("\nEnter choice: "))

    if number is not None and 1 <= number <= len(choices):
        category, module = choices[number - 1]
        run_quiz(session, category, module)
    elif number != back_number:
        console.write("Invalid choice.")
        console.pause()

    session.state = SessionState.MAIN_MENU


def run_quiz(session: Session, category: str, module: str) -> Tuple[int, int]:
    """
    Ask every question of one module once, in order, and record the score.

    The question list is snapshotted here; edits made after the quiz starts
    do not affect it. An empty module records nothing and returns (0, 0).
    """
    console = session.console
    questions = questions_in(session.quiz_data.questions, category, module)

    if not questions:
        console.write("No questions available for this module.")
        console.pause()
        return 0, 0

    correct = 0
    total = len(questions)

    for i, q in enumerate(questions, 1):
        console.header(f"{category} - {module} | Question {i} of {total}")
        console.write(q.question + "\n")
        for j, option in enumerate(q.options, 1):
            console.write(f"{j}. {option}")

        user_answer = console.ask("\nYour answer (1-4): ")
        if check_answer(q, user_answer):
            correct += 1
            console.write("\n✓ Correct!")
        else:
            console.write(f"\n✗ Incorrect. The correct answer was: {q.options[q.answer]}")
        console.pause()

    record_score(session.store, session.user, category, module, correct, total)
    show_results(session, category, module, correct, total)
    return correct, total
