import re
from typing import Optional

from quiz_trainer.db.models import Question

_LEADING_INT = re.compile(r"^[+-]?\d+")


def parse_number(text: str) -> Optional[int]:
    """Read the leading integer of a typed line ("2", " 3 ", "4)"). Returns None if there is none."""
    match = _LEADING_INT.match(text.strip())
    if match is None:
        return None
    return int(match.group())


def answer_index(user_answer: str) -> Optional[int]:
    """Convert a 1-based typed option number to a zero-based index."""
    number = parse_number(user_answer)
    return None if number is None else number - 1


def check_answer(question: Question, user_answer: str) -> bool:
    """Check a typed option number against the question's answer index.

    Non-numeric or out-of-range input never matches, it is simply wrong.
    """
    return answer_index(user_answer) == question.answer
