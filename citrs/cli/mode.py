from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .registry import Command


@dataclass(frozen=True)
class Mode:
    name: str
    description: str
    commands: List[Command] = field(default_factory=list)
