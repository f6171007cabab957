"""
Text adapter: ``A, B, C`` for a schema and ``A,B->C,D`` for an FD, one per line.
"""

import re
from typing import Iterable, List

from .errors import FDParseError
from .models import FunctionalDependency, Schema

ARROW = re.compile(r"-+>")


def parse_attributes(text: str) -> List[str]:
    return [attr.strip() for attr in text.split(",") if attr.strip()]


def parse_schema(text: str, name: str = "R") -> Schema:
    return Schema(name, parse_attributes(text))


def parse_fd(text: str) -> FunctionalDependency:
    parts = ARROW.split(text)
    if len(parts) != 2:
        raise FDParseError(f"Invalid FD '{text.strip()}'. Please use 'A, B -> C, D' format.")
    left_side, right_side = parts
    return FunctionalDependency(parse_attributes(left_side), parse_attributes(right_side))


def parse_fds(lines: Iterable[str]) -> List[FunctionalDependency]:
    fds = []
    for line in lines:
        line = line.split("#", 1)[0].strip()
        if line:
            fds.append(parse_fd(line))
    return fds
