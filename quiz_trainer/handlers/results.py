from quiz_trainer.services.progress_tracker import format_overall_stats, format_score, format_scores
from quiz_trainer.states.session_states import Session, SessionState


def show_results(session: Session, category: str, module: str, correct: int, total: int) -> None:
    """Show the final quiz results."""
    console = session.console
    console.header("Quiz Completed")
    console.write(f"Module: {category} - {module}")
    console.write(f"Score: {format_score(correct, total)}")
    console.pause()


def view_scores(session: Session) -> None:
    """Show every recorded score of the current user."""
    console = session.console
    console.header("Your Scores")
    console.write(format_scores(session.user))

    stats = format_overall_stats(session.user)
    if stats:
        console.write(stats)

    console.write()
    console.pause()
    session.state = SessionState.MAIN_MENU
