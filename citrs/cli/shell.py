from __future__ import annotations
import logging
import sys
from typing import Callable, Dict, List, Optional, Protocol, Union

from rich.console import Console
from rich.text import Text

from .config import ShellConfig
from .defaults import populate
from .errors import ShellError, UnresolvedCommand, UnresolvedMode
from .lineinput import LineReader
from .mode import Mode
from .registry import Command, lookup
from .state import FLAG_TYPES, Error, FlagValue, Ok, State, prompt_for
from .tokenizer import parse_line

logger = logging.getLogger(__name__)

NO_MODE = "none"

# plain strings are shown literally, Text keeps its styling
PromptText = Union[str, Text]


class LineSource(Protocol):
    def read(self, prompt: PromptText) -> str: ...


def default_prompt(shell: "Shell") -> Text:
    return prompt_for(shell.state)


class Shell:
    """
    Mutable runtime context handed to every command action.

    Setup code fills `builtin` and `modes`; after that only actions touch
    the shell. `state` reflects the last line handled and only feeds the
    prompt.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: Callable[["Shell"], PromptText] = default_prompt,
    ) -> None:
        self.state: State = Ok()
        self.current_mode: Optional[int] = None
        self.modes: List[Mode] = []
        self.builtin: List[Command] = []
        self.flags: Dict[str, FlagValue] = {}
        self.console = console or Console(highlight=False)
        self.prompt = prompt

    # --- state ---

    def ok(self) -> None:
        self.state = Ok()

    def err(self, message: str) -> None:
        self.state = Error(message)

    def echo(self, text: str = "") -> None:
        self.console.out(text, highlight=False)

    # --- modes ---

    @property
    def active_mode(self) -> Optional[Mode]:
        if self.current_mode is None:
            return None
        return self.modes[self.current_mode]

    def set_mode(self, index: Optional[int]) -> None:
        if index is None:
            self.current_mode = None
            logger.debug("mode cleared")
            return
        if 0 <= index < len(self.modes):
            self.current_mode = index
            logger.debug("mode set to %s", self.modes[index].name)
            return
        # out of range: leave the current mode as it is
        logger.debug("ignoring mode index %d (%d modes)", index, len(self.modes))

    def find_mode_index(self, name: str) -> Optional[int]:
        for i, mode in enumerate(self.modes):
            if mode.name == name:
                return i
        return None

    def select_mode(self, name: str) -> None:
        idx = self.find_mode_index(name)
        if idx is not None:
            self.set_mode(idx)
        elif name == NO_MODE:
            self.set_mode(None)
        else:
            raise UnresolvedMode(name)

    # --- commands ---

    def commands(self) -> List[Command]:
        commands = list(self.builtin)
        mode = self.active_mode
        if mode is not None:
            commands.extend(mode.commands)
        return commands

    def find_command(self, name: str) -> Command:
        command = lookup(self.commands(), name)
        if command is None:
            raise UnresolvedCommand(name)
        return command

    # --- flags ---

    def set_flag(self, name: str, value: FlagValue) -> None:
        if not isinstance(value, FLAG_TYPES):
            raise TypeError(f"flag '{name}' must be str, bool or int, got {type(value).__name__}")
        self.flags[name] = value

    def get_flag(self, name: str, default: Optional[FlagValue] = None) -> Optional[FlagValue]:
        return self.flags.get(name, default)

    # --- loop ---

    def take_line(self, reader: LineSource) -> str:
        try:
            return reader.read(self.prompt(self))
        except KeyboardInterrupt:
            print("! CTRL-C", file=sys.stderr)
            sys.exit(1)
        except EOFError:
            print("! EOF", file=sys.stderr)
            sys.exit(1)
        except (OSError, ValueError) as e:
            logger.warning("line input failed: %s", e)
            raise ShellError("couldn't take line") from e

    def handle_line(self, line: str) -> None:
        name, args = parse_line(line)
        command = self.find_command(name)
        logger.debug("running %s %r", command.name, args)
        command.run(self, args)

    def step(self, reader: LineSource) -> None:
        """One prompt/read/execute cycle."""
        try:
            self.handle_line(self.take_line(reader))
        except ShellError as e:
            self._fail(str(e))
            return
        except Exception as e:
            logger.exception("command crashed")
            self._fail(str(e) or type(e).__name__)
            return
        self.ok()

    def _fail(self, message: str) -> None:
        self.echo(f"err: {message}")
        self.err(message)

    def run(self, reader: LineSource) -> None:
        while True:
            self.step(reader)


def run(config: Optional[ShellConfig] = None) -> None:
    config = config or ShellConfig.from_env()
    logging.basicConfig(level=config.log_level, format="[%(asctime)s] %(levelname)s: %(message)s")

    shell = Shell()
    populate(shell, config.start_mode)

    reader = LineReader(shell.console, config.history_file, config.history_length)
    shell.run(reader)
