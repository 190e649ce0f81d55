from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .commands import load_common_commands
from .loader import discover_modes

if TYPE_CHECKING:
    from .shell import Shell


def populate(shell: "Shell", start_mode: Optional[str] = None) -> None:
    """Install builtins and discovered modes, then pick the start mode (first one by default)."""
    shell.builtin = load_common_commands()
    shell.modes = discover_modes()
    if start_mode is None:
        shell.set_mode(0)
    else:
        shell.select_mode(start_mode)
