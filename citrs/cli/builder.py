from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from .errors import ActionFailure
from .registry import Action, Command, noop

NOT_IMPLEMENTED = "not yet implemented"


@dataclass(frozen=True)
class Arg:
    label: str
    is_required: bool = False

    @classmethod
    def optional(cls, label: str) -> "Arg":
        return cls(label, is_required=False)

    @classmethod
    def required(cls, label: str) -> "Arg":
        return cls(label, is_required=True)

    def render(self) -> str:
        return f"<{self.label}>" if self.is_required else f"[{self.label}]"


def _not_implemented(shell, args) -> None:
    raise ActionFailure(NOT_IMPLEMENTED)


class CommandBuilder:
    """
    Fluent constructor for Command.

        CommandBuilder("help", "print help information")
            .action(show_help)
            .arg(Arg.optional("command"))
            .alias("?")
            .build()
    """

    def __init__(self, name: str, description: str) -> None:
        self._name = name
        self._description = description
        self._usage = name
        self._aliases: List[str] = [name]
        self._action: Action = noop
        self._built = False

    @classmethod
    def todo(cls, name: str) -> "CommandBuilder":
        return cls(name, NOT_IMPLEMENTED).action(_not_implemented)

    def _check(self) -> None:
        if self._built:
            raise RuntimeError(f"builder for '{self._name}' was already built")

    def action(self, action: Action) -> "CommandBuilder":
        self._check()
        self._action = action
        return self

    def arg(self, arg: Arg) -> "CommandBuilder":
        self._check()
        self._usage += f" {arg.render()}"
        return self

    def alias(self, alias: str) -> "CommandBuilder":
        self._check()
        self._aliases.append(alias)
        return self

    def aliases(self, aliases: Iterable[str]) -> "CommandBuilder":
        self._check()
        self._aliases.extend(aliases)
        return self

    def build(self) -> Command:
        self._check()
        self._built = True
        return Command(
            name=self._name,
            description=self._description,
            usage=self._usage,
            aliases=tuple(self._aliases),
            action=self._action,
        )
