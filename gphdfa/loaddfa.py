"""Build a DFA from a .gph adjacency-list descriptor.

Layout::

    1                  initial state
    2                  final state
    1: 97 2 | 37 3     <state>: <symbol> <dest> [| <symbol> <dest> ...]
    2: 97 1 | 27 3
    3: 37 1 | 27 2

Every malformed line is collected and reported together; no DFA is built
from a descriptor with problems.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .dfa import DFA
from .errors import (
    DescriptorNotFoundError,
    DescriptorReadError,
    MalformedDescriptorError,
    MalformedKind,
    MalformedLine,
)
from .table import TransitionTable

logger = logging.getLogger("gphdfa.loaddfa")

MAX_SYMBOL = 255
HEADER_FIELDS = ("initial", "final")
_INTEGER = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class DescriptorStats:
    nvertices: int = 0
    nedges: int = 0


@dataclass(frozen=True)
class Descriptor:
    initial_state: int
    final_state: int
    table: TransitionTable
    stats: DescriptorStats


class _LineError(Exception):
    def __init__(self, kind: MalformedKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def _to_int(token: str, what: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise _LineError(MalformedKind.INVALID_INTEGER, f"{what} {token!r} is not an integer")
    return int(token)


def _to_state(token: str, what: str) -> int:
    state = _to_int(token.strip(), what)
    if state < 0:
        raise _LineError(MalformedKind.NEGATIVE_STATE, f"{what} {state} is negative")
    return state


def _parse_clause(clause: str) -> tuple[int, int]:
    clause = clause.strip()
    pair = clause.split(" ") if clause else []
    if len(pair) != 2:
        raise _LineError(
            MalformedKind.TOKEN_COUNT,
            f"expected '<symbol> <dest>', got {len(pair)} token(s) in {clause!r}",
        )
    symbol = _to_int(pair[0], "symbol")
    if not 0 <= symbol <= MAX_SYMBOL:
        raise _LineError(MalformedKind.SYMBOL_OUT_OF_RANGE, f"symbol {symbol} is outside 0..{MAX_SYMBOL}")
    return symbol, _to_state(pair[1], "destination state")


def _parse_adjacency(line: str) -> tuple[int, list[tuple[int, int]]]:
    state_part, colon, transitions_part = line.partition(":")
    if not colon:
        raise _LineError(MalformedKind.MISSING_COLON, "expected '<state>: <symbol> <dest> | ...'")
    state = _to_state(state_part, "state")
    return state, [_parse_clause(clause) for clause in transitions_part.split("|")]


def parse_lines(lines: Iterable[str]) -> Descriptor:
    """Parse descriptor lines into header states, a table and its stats."""
    table = TransitionTable()
    problems: list[MalformedLine] = []
    header: list[Optional[int]] = []
    nvertices = 0
    nedges = 0

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        in_header = len(header) < len(HEADER_FIELDS)
        try:
            if in_header:
                header.append(_to_state(line, f"{HEADER_FIELDS[len(header)]} state"))
                continue
            if not line.strip():
                continue
            state, clauses = _parse_adjacency(line)
        except _LineError as exc:
            if in_header:
                header.append(None)
            problems.append(MalformedLine(line_no, line, exc.kind, exc.message))
            continue

        table.declare_state(state)
        for symbol, dest in clauses:
            table.add_transition(state, symbol, dest)
        nvertices += 1
        nedges += len(clauses)

    for field in HEADER_FIELDS[len(header):]:
        problems.append(
            MalformedLine(len(header) + 1, "", MalformedKind.MISSING_HEADER, f"{field} state line is missing")
        )
        header.append(None)

    if problems:
        raise MalformedDescriptorError(problems)

    stats = DescriptorStats(nvertices=nvertices, nedges=nedges)
    logger.debug("Parsed descriptor: %d vertices, %d edges", stats.nvertices, stats.nedges)
    return Descriptor(initial_state=header[0], final_state=header[1], table=table, stats=stats)


def loads(text: str, *, skip_self_loops: bool = True, validate: bool = True) -> DFA:
    descriptor = parse_lines(text.splitlines())
    dfa = DFA.from_descriptor(descriptor, skip_self_loops=skip_self_loops)
    if validate:
        dfa.validate()
    return dfa


def read_descriptor(filename: str) -> Descriptor:
    try:
        with open(filename, encoding="utf-8") as f:
            return parse_lines(f.readlines())
    except FileNotFoundError:
        raise DescriptorNotFoundError(str(filename)) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorReadError(str(filename), str(exc)) from exc


def load_from_file(filename: str, *, skip_self_loops: bool = True, validate: bool = True) -> DFA:
    logger.info("Building DFA from %s", filename)
    dfa = DFA.from_descriptor(read_descriptor(filename), skip_self_loops=skip_self_loops)
    if validate:
        dfa.validate()
    return dfa
