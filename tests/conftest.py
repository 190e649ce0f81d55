from __future__ import annotations
import io

import pytest
from rich.console import Console

from citrs.cli.defaults import populate
from citrs.cli.shell import Shell


class ScriptedReader:
    """Line source fed from a list; exceptions in the list are raised, EOF when exhausted."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def shell(console):
    return Shell(console=console)


@pytest.fixture
def default_shell(console):
    sh = Shell(console=console)
    populate(sh)
    return sh


def output(sh: Shell) -> str:
    return sh.console.file.getvalue()
