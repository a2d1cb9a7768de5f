"""Terminal input/output for the interactive session."""
import sys
import time
from typing import Callable, Optional, TextIO

from quiz_trainer.config import settings

CLEAR_SEQUENCE = "\033[H\033[2J"
PRESS_ENTER = "Press Enter to continue..."


class Console:
    """Line-oriented text source and sink.

    Every screen in the app goes through ``write``/``ask``, so tests can
    drive a whole session with a scripted ``input_func`` and read back the
    captured output.
    """

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output: Optional[TextIO] = None,
        delay: Optional[float] = None,
        clear_screen: Optional[bool] = None,
    ):
        self._input = input_func
        self.output = output if output is not None else sys.stdout
        self.delay = settings.UI_DELAY_SECONDS if delay is None else delay
        self.clear_screen = settings.CLEAR_SCREEN if clear_screen is None else clear_screen

    def write(self, text: str = "") -> None:
        self.output.write(text + "\n")
        self.output.flush()

    def ask(self, prompt: str) -> str:
        """Show a prompt and read one line, surrounding whitespace stripped."""
        self.output.write(prompt)
        self.output.flush()
        return self._input().strip()

    def pause(self) -> None:
        self.ask(PRESS_ENTER)

    def wait(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def header(self, title: str) -> None:
        """Start a new screen with a boxed title."""
        if self.clear_screen:
            self.output.write(CLEAR_SEQUENCE)
        width = max(40, len(title) + 2)
        self.write("╔" + "═" * width + "╗")
        self.write(f"║ {title:<{width - 1}}║")
        self.write("╚" + "═" * width + "╝")
        self.write()
