from __future__ import annotations


class ShellError(Exception):
    """Recoverable failure: printed, folded into the shell state, loop continues."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmptyInput(ShellError):
    def __init__(self, message: str = "no command provided") -> None:
        super().__init__(message)


class UnresolvedCommand(ShellError):
    def __init__(self, name: str) -> None:
        super().__init__(f"command not found: {name}")
        self.name = name


class UnresolvedMode(ShellError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no mode '{name}'")
        self.name = name


class ActionFailure(ShellError):
    """Raised by command actions; the message is shown to the user verbatim."""
