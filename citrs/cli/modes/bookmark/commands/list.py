from __future__ import annotations
from ....builder import CommandBuilder

list_ = CommandBuilder.todo("list").build()
