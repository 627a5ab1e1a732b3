"""Adjacency-list state diagram used by the DFA."""

from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple


class Transition(NamedTuple):
    symbol: int
    dest: int


class TransitionTable:
    """Maps each state to its outgoing transitions in declaration order.

    Every state seen as a source or a destination has an entry, empty when
    the state has no outgoing edges.
    """

    def __init__(self):
        self._states: Dict[int, List[Transition]] = {}
        self._sources: set[int] = set()

    def declare_state(self, state: int) -> None:
        self._states.setdefault(state, [])

    def add_transition(self, state: int, symbol: int, dest: int) -> None:
        self._states.setdefault(state, []).append(Transition(symbol, dest))
        self._sources.add(state)
        self.declare_state(dest)

    def transitions_from(self, state: int) -> tuple[Transition, ...]:
        # unknown states behave like states with no edges
        return tuple(self._states.get(state, ()))

    def degree(self, state: int) -> int:
        return len(self._states.get(state, ()))

    @property
    def states(self) -> list[int]:
        return sorted(self._states)

    @property
    def nvertices(self) -> int:
        return len(self._states)

    @property
    def nedges(self) -> int:
        return sum(len(adj) for adj in self._states.values())

    def listing(self) -> list[str]:
        """Flat `<state>: <symbol> <dest> ...` lines for every source state."""
        lines = []
        for state in sorted(self._sources):
            pairs = " ".join(f"{t.symbol} {t.dest}" for t in self._states[state])
            lines.append(f"{state}: {pairs}")
        return lines

    def __contains__(self, state: object) -> bool:
        return state in self._states

    def __iter__(self) -> Iterator[int]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"TransitionTable(nvertices={self.nvertices}, nedges={self.nedges})"
