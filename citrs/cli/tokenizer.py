from __future__ import annotations
import re
from typing import List, Tuple

from .errors import EmptyInput

_HEAD_SPLIT = re.compile(r"\s")


def split_args(text: str) -> List[str]:
    """
    Quote-aware split of the argument region.

    Only plain spaces separate arguments. A double quote always closes the
    current argument and toggles quoting; quote characters are dropped.
    An unmatched quote is tolerated.
    """
    args: List[str] = []
    buf: List[str] = []
    in_quotes = False

    def flush() -> None:
        if buf:
            args.append("".join(buf))
            buf.clear()

    for ch in text:
        if ch == " " and not in_quotes:
            flush()
        elif ch == '"':
            flush()
            in_quotes = not in_quotes
        else:
            buf.append(ch)
    flush()
    return args


def parse_line(line: str) -> Tuple[str, List[str]]:
    parts = _HEAD_SPLIT.split(line, maxsplit=1)
    name = parts[0]
    if not name:
        raise EmptyInput()
    if len(parts) == 1:
        return name, []
    return name, split_args(parts[1])
