from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

from .errors import UnknownStateReferenceError
from .table import TransitionTable

if TYPE_CHECKING:
    from .loaddfa import Descriptor


class DFA:
    """Runs a state diagram over a sequence of 8-bit symbol codes.

    q is the initial state and f the final state. By default a transition
    whose destination is the current state is never taken, matching the
    original .gph tool; pass skip_self_loops=False to follow such edges.
    """

    def __init__(self, table: TransitionTable, initial_state: int, final_state: int, skip_self_loops: bool = True):
        self._table = table
        self._q = initial_state
        self._f = final_state
        self.skip_self_loops = skip_self_loops

    @classmethod
    def from_descriptor(cls, descriptor: Descriptor, skip_self_loops: bool = True) -> DFA:
        return cls(descriptor.table, descriptor.initial_state, descriptor.final_state, skip_self_loops=skip_self_loops)

    @property
    def initial_state(self) -> int:
        return self._q

    @initial_state.setter
    def initial_state(self, state: int) -> None:
        self._q = state

    @property
    def final_state(self) -> int:
        return self._f

    @final_state.setter
    def final_state(self, state: int) -> None:
        self._f = state

    @property
    def table(self) -> TransitionTable:
        return self._table

    @table.setter
    def table(self, table: TransitionTable) -> None:
        self._table = table

    def step(self, state: int, symbol: int) -> int:
        # first match wins; no match leaves the state where it is
        for t in self._table.transitions_from(state):
            if t.symbol != symbol:
                continue
            if self.skip_self_loops and t.dest == state:
                continue
            return t.dest
        return state

    def trace(self, input_codes: Iterable[int]) -> list[int]:
        """Return every state visited, starting with the initial state."""
        cur_state = self._q
        path = [cur_state]
        for symbol in input_codes:
            cur_state = self.step(cur_state, symbol)
            path.append(cur_state)
        return path

    def execute(self, input_codes: Iterable[int]) -> bool:
        cur_state = self._q
        for symbol in input_codes:
            cur_state = self.step(cur_state, symbol)
        return cur_state == self._f

    #Converts a string to its byte codes before running it
    def contains(self, input_string: Union[str, bytes]) -> bool:
        if isinstance(input_string, str):
            try:
                input_string = input_string.encode("latin-1")
            except UnicodeEncodeError as exc:
                raise ValueError(f"Input has a symbol outside the 8-bit range: {input_string!r}") from exc
        return self.execute(input_string)

    def validate(self) -> None:
        unknown = []
        if self._q not in self._table:
            unknown.append(("initial", self._q))
        if self._f not in self._table:
            unknown.append(("final", self._f))
        if unknown:
            raise UnknownStateReferenceError(unknown)

    def __repr__(self) -> str:
        return f"DFA(q={self._q}, f={self._f}, {self._table!r})"
