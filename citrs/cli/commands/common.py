from __future__ import annotations
from typing import TYPE_CHECKING, List

from rich.table import Table
from rich.text import Text
from tabulate import tabulate

from ..builder import Arg, CommandBuilder
from ..errors import ActionFailure
from ..registry import Command, CommandAction
from ..state import FlagValue

if TYPE_CHECKING:
    from ..shell import Shell


def parse_flag_value(text: str) -> FlagValue:
    lowered = text.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(text)
    except ValueError:
        return text


def _flag_kind(value: FlagValue) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    return "string"


class Help(CommandAction):
    def run(self, shell: "Shell", args: List[str]) -> None:
        if args:
            command = shell.find_command(args[0])
            shell.echo(f"{command.name} - {command.description}")
            if len(command.aliases) > 1:
                shell.echo(f"aliases: {', '.join(command.aliases[1:])}")
            shell.echo(f"Usage: {command.usage}")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("command")
        table.add_column("description")
        table.add_column("mode")
        for command in shell.builtin:
            table.add_row(Text(command.name), Text(command.description), "")
        mode = shell.active_mode
        if mode is not None:
            for command in mode.commands:
                table.add_row(Text(command.name), Text(command.description), Text(mode.name))
        shell.console.print(table)


class ModeSwitch(CommandAction):
    def run(self, shell: "Shell", args: List[str]) -> None:
        if args:
            shell.select_mode(args[0])
            return

        current = shell.active_mode
        current_name = current.name if current else "none"
        shell.echo(f"mode: {current_name}")
        others = [m.name for m in shell.modes if m.name != current_name]
        if others:
            shell.echo("available:")
            for name in others:
                shell.echo(f"  - {name}")
        else:
            shell.echo("no other modes")


class Debug(CommandAction):
    def run(self, shell: "Shell", args: List[str]) -> None:
        if args:
            command = shell.find_command(args[0])
            shell.echo(f"name: {command.name}")
            shell.echo(f"aliases: {', '.join(command.aliases)}")
            shell.echo(f"usage: {command.usage}")
            shell.echo(f"action: {command.action!r}")
            return

        shell.echo(f"state: {shell.state}")
        shell.echo(f"builtin: {len(shell.builtin)}")
        mode = shell.active_mode
        if mode is not None:
            shell.echo(f"mode: {mode.name}")
            shell.echo(f"  '{mode.description}'")
            shell.echo(f"  commands: {len(mode.commands)}")
        else:
            shell.echo("no mode")
        if shell.flags:
            rows = [[k, _flag_kind(v), v] for k, v in sorted(shell.flags.items())]
            shell.echo(tabulate(rows, headers=["flag", "type", "value"], tablefmt="github"))


class Flag(CommandAction):
    def run(self, shell: "Shell", args: List[str]) -> None:
        if len(args) > 2:
            raise ActionFailure("usage: flag [name [value]]")
        if len(args) == 2:
            shell.set_flag(args[0], parse_flag_value(args[1]))
            return
        if len(args) == 1:
            value = shell.get_flag(args[0])
            if value is None:
                raise ActionFailure(f"no flag '{args[0]}'")
            shell.echo(f"{args[0]} = {value}")
            return

        if not shell.flags:
            shell.echo("no flags")
            return
        rows = [[k, _flag_kind(v), v] for k, v in sorted(shell.flags.items())]
        shell.echo(tabulate(rows, headers=["flag", "type", "value"], tablefmt="github"))


class Exit(CommandAction):
    def run(self, shell: "Shell", args: List[str]) -> None:
        raise SystemExit(0)


def load_common_commands() -> List[Command]:
    return [
        CommandBuilder("debug", "print debug information")
        .action(Debug())
        .arg(Arg.optional("cmd"))
        .aliases(["dbg", "!"])
        .build(),
        CommandBuilder("help", "print help information")
        .action(Help())
        .arg(Arg.optional("command"))
        .alias("?")
        .build(),
        CommandBuilder("mode", "change or print the current mode")
        .action(ModeSwitch())
        .arg(Arg.optional("name | none"))
        .build(),
        CommandBuilder("flag", "list, print or set shell flags")
        .action(Flag())
        .arg(Arg.optional("name"))
        .arg(Arg.optional("value"))
        .build(),
        CommandBuilder("exit", "leave the shell")
        .action(Exit())
        .aliases(["quit", "q"])
        .build(),
    ]
