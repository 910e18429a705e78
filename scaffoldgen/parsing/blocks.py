"""Fenced block extraction from raw completion text."""

from __future__ import annotations

import re
from typing import Iterator, List

from ..models import RawBlock

FENCE = "```"

# Header must sit directly after the opening fence and end the line.
_BLOCK_PATTERN = re.compile(r"```(?:(\S+)\n)?(.*?)```", re.DOTALL)


def normalise_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def iter_blocks(text: str) -> Iterator[RawBlock]:
    """Yield non-empty fenced blocks in the order they appear."""
    order = 0
    for match in _BLOCK_PATTERN.finditer(normalise_newlines(text)):
        header, body = match.group(1), match.group(2).strip()
        if not body:
            continue
        yield RawBlock(header=header, body=body, order=order)
        order += 1


def extract_blocks(text: str) -> List[RawBlock]:
    return list(iter_blocks(text))


__all__ = ["FENCE", "RawBlock", "extract_blocks", "iter_blocks", "normalise_newlines"]
