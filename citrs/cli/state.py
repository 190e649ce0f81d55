from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from rich.text import Text


@dataclass(frozen=True)
class Ok:
    def __str__(self) -> str:
        return "Ok"


@dataclass(frozen=True)
class Error:
    message: str

    def __str__(self) -> str:
        return f'Error("{self.message}")'


State = Union[Ok, Error]

FlagValue = Union[str, bool, int]
FLAG_TYPES = (str, bool, int)


def is_error(state: State) -> bool:
    return isinstance(state, Error)


def prompt_for(state: State) -> Text:
    """Only the state picks the indicator."""
    if is_error(state):
        return Text.assemble(("!", "bold red"), " ")
    return Text("> ")
