from typing import List, Sequence

from quiz_trainer.db.models import Question, User
from quiz_trainer.services.progress_tracker import format_module_list


def module_menu(questions: Sequence[Question], back_number: int) -> str:
    """Module list followed by the 'back' entry numbered after the last module."""
    return format_module_list(questions) + f"\n\n{back_number}. Back to Main Menu"


def user_list(users: Sequence[User], with_created: bool = False) -> str:
    lines: List[str] = []
    for i, user in enumerate(users, 1):
        line = f"{i}. {user.name} (ID: {user.id})"
        if with_created:
            line += f" - Created: {user.created_at.strftime('%Y-%m-%d')}"
        lines.append(line)
    return "\n".join(lines)


def question_list(questions: Sequence[Question]) -> str:
    return "\n".join(
        f"{i}. [{q.category} - {q.module}] {q.question}"
        for i, q in enumerate(questions, 1)
    )
