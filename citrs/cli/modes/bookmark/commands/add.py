from __future__ import annotations
from ....builder import CommandBuilder

add = CommandBuilder.todo("add").build()
