from __future__ import annotations
import atexit
import logging
import readline
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)


class LineReader:
    """
    Blocking line source with readline editing and history.

    KeyboardInterrupt and EOFError are not handled here: the shell treats
    them as fatal.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        history_file: Optional[Path] = None,
        history_length: int = 1000,
    ) -> None:
        self.console = console or Console()
        self.history_file = history_file
        self.history_length = history_length
        if history_file is not None:
            self._load_history()
            atexit.register(self.save_history)

    def _load_history(self) -> None:
        readline.set_history_length(self.history_length)
        if not self.history_file.exists():
            return
        try:
            readline.read_history_file(str(self.history_file))
        except OSError as e:
            logger.warning("could not read history %s: %s", self.history_file, e)

    def save_history(self) -> None:
        if self.history_file is None:
            return
        try:
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
            readline.write_history_file(str(self.history_file))
        except OSError as e:
            logger.warning("could not write history %s: %s", self.history_file, e)

    def read(self, prompt: Union[str, Text]) -> str:
        # input() under readline records the line in history
        return self.console.input(prompt, markup=False, emoji=False)
