"""Main entry point for the quiz trainer."""
import logging
import sys
from pathlib import Path

from quiz_trainer.config import resolve_data_dir, settings
from quiz_trainer.db.storage import JsonStore
from quiz_trainer.handlers.menu import run_session
from quiz_trainer.states.session_states import Session
from quiz_trainer.ui.console import Console

logger = logging.getLogger(__name__)


def setup_logging(data_dir: Path) -> None:
    log_file = Path(settings.LOG_FILE) if settings.LOG_FILE else data_dir / "quiz_trainer.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    # stdout belongs to the interactive UI, so logs only go to the file
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.FileHandler(log_file, encoding="utf-8")],
    )


def main() -> None:
    data_dir = resolve_data_dir()
    setup_logging(data_dir)
    logger.info("Starting quiz trainer, data dir %s", data_dir)

    console = Console()
    console.write(f"📁 Data stored in: {data_dir}")
    console.wait()

    session = Session.open(JsonStore(data_dir), console)

    try:
        code = run_session(session)
    except KeyboardInterrupt:
        logger.info("Quiz trainer stopped by user")
        raise
    sys.exit(code)


if __name__ == "__main__":
    main()
