from enum import Enum
from typing import Dict, List, Sequence

from quiz_trainer.config import NEUTRAL_THRESHOLD, PRAISE_THRESHOLD
from quiz_trainer.db.models import Question, Score, User
from quiz_trainer.db.queries import available_modules, count_in, questions_in


class ScoreBand(Enum):
    PRAISE = "praise"
    NEUTRAL = "neutral"
    DISCOURAGING = "discouraging"


BAND_MARKERS = {
    ScoreBand.PRAISE: "🎉",
    ScoreBand.NEUTRAL: "👍",
    ScoreBand.DISCOURAGING: "📚",
}


def score_percent(correct: int, total: int) -> float:
    """Percentage of correct answers. Zero questions count as 0%."""
    if total <= 0:
        return 0.0
    return correct / total * 100


def score_band(percent: float) -> ScoreBand:
    if percent >= PRAISE_THRESHOLD:
        return ScoreBand.PRAISE
    if percent >= NEUTRAL_THRESHOLD:
        return ScoreBand.NEUTRAL
    return ScoreBand.DISCOURAGING


def format_score(correct: int, total: int) -> str:
    """Format as ``c/t (p.p%) marker``."""
    percent = score_percent(correct, total)
    marker = BAND_MARKERS[score_band(percent)]
    return f"{correct}/{total} ({percent:.1f}%) {marker}"


def format_scores(user: User) -> str:
    """Format every recorded score of a user, grouped by category."""
    if not user.scores:
        return "No scores recorded yet. Take a quiz to get started!"

    lines: List[str] = []
    for category, modules in user.scores.items():
        lines.append(f"\n{category}:")
        for module, score in modules.items():
            lines.append(
                f"  {module}: {format_score(score.correct, score.total)}"
                f" - Last taken: {score.last_taken.strftime('%Y-%m-%d %H:%M')}"
            )
    return "\n".join(lines)


def format_module_list(questions: Sequence[Question]) -> str:
    """Numbered module list grouped by category, with question counts."""
    lines: List[str] = []
    idx = 1
    for category, modules in available_modules(questions).items():
        lines.append(f"\n{category}:")
        for module in modules:
            lines.append(f"  {idx}. {module} ({count_in(questions, category, module)} questions)")
            idx += 1
    return "\n".join(lines)


def format_question_catalog(questions: Sequence[Question]) -> str:
    """All questions grouped by category and module."""
    if not questions:
        return "No questions available."

    lines: List[str] = []
    for category, modules in available_modules(questions).items():
        lines.append(f"\n{category}:")
        for module in modules:
            module_questions = questions_in(questions, category, module)
            lines.append(f"\n  {module} ({len(module_questions)} questions):")
            for i, q in enumerate(module_questions, 1):
                lines.append(f"    {i}. {q.question}")
    return "\n".join(lines)


def score_summary(user: User) -> Dict[str, int]:
    """Totals across every recorded module."""
    scores: List[Score] = [s for modules in user.scores.values() for s in modules.values()]
    return {
        "modules_taken": len(scores),
        "total_questions_answered": sum(s.total for s in scores),
        "total_correct": sum(s.correct for s in scores),
    }


def format_overall_stats(user: User) -> str:
    """Overall statistics block shown under the score list."""
    stats = score_summary(user)
    if not stats["modules_taken"]:
        return ""

    return (
        f"\n📊 Overall:\n"
        f"Modules taken: {stats['modules_taken']}\n"
        f"Questions answered: {stats['total_questions_answered']}\n"
        f"Correct answers: {stats['total_correct']}"
    )
