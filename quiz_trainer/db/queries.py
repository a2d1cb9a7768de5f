"""Derived views and mutations over users, questions and admin config."""
import logging
import time
from typing import Dict, List, Optional, Sequence

from quiz_trainer.config import OPTIONS_PER_QUESTION
from quiz_trainer.db.models import AdminConfig, Question, QuizData, Score, User
from quiz_trainer.db.storage import JsonStore
from quiz_trainer.exceptions import (
    AuthenticationError,
    InvalidAnswerError,
    PasswordMismatchError,
    QuestionNotFoundError,
    UserNotFoundError,
)
from quiz_trainer.services.admin_auth import check_admin_password

logger = logging.getLogger(__name__)


# ============================================================================
# QUESTION VIEWS (recomputed on every call)
# ============================================================================

def available_modules(questions: Sequence[Question]) -> Dict[str, List[str]]:
    """Map category -> modules, both in order of first appearance."""
    modules: Dict[str, List[str]] = {}
    for q in questions:
        mods = modules.setdefault(q.category, [])
        if q.module not in mods:
            mods.append(q.module)
    return modules


def questions_in(questions: Sequence[Question], category: str, module: str) -> List[Question]:
    return [q for q in questions if q.category == category and q.module == module]


def count_in(questions: Sequence[Question], category: str, module: str) -> int:
    return sum(1 for q in questions if q.category == category and q.module == module)


def module_choices(questions: Sequence[Question]) -> List[tuple[str, str]]:
    """Flatten available_modules into the numbered order shown in menus."""
    return [
        (category, module)
        for category, mods in available_modules(questions).items()
        for module in mods
    ]


# ============================================================================
# USER OPERATIONS
# ============================================================================

def generate_user_id(name: str, users: Sequence[User]) -> str:
    """
    Build an id from the lower-cased, space-free name plus a numeric suffix.

    The suffix is one more than the highest suffix already taken for that
    base, so numbers freed by deleted users are not handed out again while
    a higher one is still in use.
    """
    base = name.replace(" ", "").lower()
    highest = 0
    for user in users:
        if user.id.startswith(base):
            rest = user.id[len(base):]
            if rest.isdigit():
                highest = max(highest, int(rest))
    return f"{base}{highest + 1}"


def save_user(store: JsonStore, user: User) -> None:
    """Re-read users.json, upsert the user by id and write it back."""
    users = store.load_users()
    for i, existing in enumerate(users):
        if existing.id == user.id:
            users[i] = user
            break
    else:
        users.append(user)
    store.save_users(users)


def register_user(store: JsonStore, name: str) -> User:
    """Create and persist a new user."""
    user = User(id=generate_user_id(name, store.load_users()), name=name)
    save_user(store, user)
    logger.info("Registered user %s", user.id)
    return user


def record_score(
    store: JsonStore,
    user: User,
    category: str,
    module: str,
    correct: int,
    total: int,
) -> Score:
    """Overwrite the user's score for (category, module) and persist all users."""
    score = Score(correct=correct, total=total)
    user.scores.setdefault(category, {})[module] = score
    save_user(store, user)
    logger.info("Recorded %d/%d for %s in %s/%s", correct, total, user.id, category, module)
    return score


def delete_user(store: JsonStore, number: int) -> User:
    """Delete the user at 1-based position ``number`` in storage order."""
    users = store.load_users()
    if not 1 <= number <= len(users):
        raise UserNotFoundError(f"No user number {number}")
    removed = users.pop(number - 1)
    store.save_users(users)
    logger.info("Deleted user %s", removed.id)
    return removed


# ============================================================================
# QUESTION OPERATIONS
# ============================================================================

def new_question_id(quiz_data: QuizData, now: Optional[float] = None) -> str:
    """Time-based id, bumped until it does not collide with an existing one."""
    stamp = int(now if now is not None else time.time())
    taken = {q.id for q in quiz_data.questions}
    question_id = f"q{stamp}"
    while question_id in taken:
        stamp += 1
        question_id = f"q{stamp}"
    return question_id


def add_question(
    store: JsonStore,
    quiz_data: QuizData,
    category: str,
    module: str,
    text: str,
    options: List[str],
    answer_number: Optional[int],
) -> Question:
    """
    Append a question and persist.

    ``answer_number`` is the 1-based correct option as typed by the admin;
    anything outside 1..4 (or None for non-numeric input) raises
    InvalidAnswerError and leaves quiz_data untouched.
    """
    if len(options) != OPTIONS_PER_QUESTION:
        raise InvalidAnswerError(f"Expected {OPTIONS_PER_QUESTION} options, got {len(options)}")
    if answer_number is None or not 1 <= answer_number <= OPTIONS_PER_QUESTION:
        raise InvalidAnswerError(f"Invalid answer number: {answer_number}")

    question = Question(
        id=new_question_id(quiz_data),
        question=text,
        options=list(options),
        answer=answer_number - 1,
        category=category,
        module=module,
    )
    quiz_data.questions.append(question)
    store.save_questions(quiz_data)
    logger.info("Added question %s to %s/%s", question.id, category, module)
    return question


def remove_question(store: JsonStore, quiz_data: QuizData, number: Optional[int]) -> Question:
    """Remove the question at 1-based position ``number`` and persist."""
    if number is None or not 1 <= number <= len(quiz_data.questions):
        raise QuestionNotFoundError(f"No question number {number}")
    removed = quiz_data.questions.pop(number - 1)
    store.save_questions(quiz_data)
    logger.info("Removed question %s", removed.id)
    return removed


def remove_module(store: JsonStore, quiz_data: QuizData, category: str, module: str) -> int:
    """Delete every question of (category, module) and persist. Returns the count removed."""
    kept = [q for q in quiz_data.questions if not (q.category == category and q.module == module)]
    removed = len(quiz_data.questions) - len(kept)
    quiz_data.questions = kept
    store.save_questions(quiz_data)
    logger.info("Removed module %s/%s (%d questions)", category, module, removed)
    return removed


# ============================================================================
# ADMIN CONFIG
# ============================================================================

def change_admin_password(
    store: JsonStore,
    config: AdminConfig,
    current: str,
    new: str,
    confirm: str,
) -> None:
    """Rotate the admin password after checking the current one and the confirmation."""
    if not check_admin_password(config, current):
        raise AuthenticationError("Incorrect password")
    if new != confirm:
        raise PasswordMismatchError("Passwords don't match")
    config.password = new
    store.save_admin_config(config)
    logger.info("Admin password changed")
