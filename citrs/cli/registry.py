from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .shell import Shell

Action = Callable[["Shell", List[str]], None]


def noop(shell: "Shell", args: List[str]) -> None:
    return None


class CommandAction:
    """
    Base for stateful actions. Subclasses implement run(); instances are
    callable, so they can be handed to CommandBuilder.action() like a plain
    function.
    """

    def __call__(self, shell: "Shell", args: List[str]) -> None:
        self.run(shell, args)

    def run(self, shell: "Shell", args: List[str]) -> None:
        raise NotImplementedError('CommandAction.run must be implemented')


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    usage: str
    aliases: Tuple[str, ...]
    action: Action = noop

    def __post_init__(self) -> None:
        if not self.aliases:
            raise ValueError(f"command '{self.name}' needs at least one alias")

    def matches(self, name: str) -> bool:
        return name in self.aliases

    def run(self, shell: "Shell", args: List[str]) -> None:
        self.action(shell, args)


def lookup(commands: Iterable[Command], name: str) -> Optional[Command]:
    """First command whose aliases contain name, in iteration order."""
    for command in commands:
        if command.matches(name):
            return command
    return None
