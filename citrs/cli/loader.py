from __future__ import annotations
import importlib
import importlib.util
import logging
import pkgutil
from typing import List

from .mode import Mode
from .registry import Command

logger = logging.getLogger(__name__)

MODES_PACKAGE = 'citrs.cli.modes'


def _describe(pkg) -> str:
    description = getattr(pkg, 'DESCRIPTION', None)
    if description:
        return description
    doc = (pkg.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else ''


def discover_commands(commands_pkg_name: str) -> List[Command]:
    """Every Command defined at module level under a commands package, by module name."""
    commands_pkg = importlib.import_module(commands_pkg_name)
    found: List[Command] = []
    for subinfo in pkgutil.iter_modules(commands_pkg.__path__):
        module = importlib.import_module(f"{commands_pkg_name}.{subinfo.name}")
        for obj in vars(module).values():
            # commands imported from a sibling module are only taken once
            if isinstance(obj, Command) and not any(obj is f for f in found):
                found.append(obj)
    return found


def discover_modes(package_root: str = MODES_PACKAGE) -> List[Mode]:
    pkg = importlib.import_module(package_root)
    modes: List[Mode] = []
    for modinfo in pkgutil.iter_modules(pkg.__path__):
        if not modinfo.ispkg:
            continue
        mode_pkg = importlib.import_module(f"{package_root}.{modinfo.name}")
        commands_pkg_name = f"{package_root}.{modinfo.name}.commands"
        if importlib.util.find_spec(commands_pkg_name) is None:
            logger.debug("skipping mode package %s: no commands", modinfo.name)
            continue
        commands = discover_commands(commands_pkg_name)
        modes.append(Mode(name=modinfo.name, description=_describe(mode_pkg), commands=commands))
        logger.debug("loaded mode %s (%d commands)", modinfo.name, len(commands))
    return modes
