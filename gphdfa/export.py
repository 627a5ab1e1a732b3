from __future__ import annotations

from typing import Iterable

from automata.fa.dfa import DFA as AutomataDFA

from .dfa import DFA


def state_name(state: int) -> str:
    return 'q' + str(state)


def symbol_of(code: int) -> str:
    return chr(code)


def to_automata_dfa(dfa: DFA) -> AutomataDFA:
    """Convert to an automata-lib DFA that accepts exactly the same inputs.

    Symbols are the declared codes as one-character strings. Each
    (state, symbol) pair goes wherever DFA.step sends it, so unmatched
    symbols turn into explicit self-loops and the transitions are total.
    """
    table = dfa.table
    states = set(table) | {dfa.initial_state, dfa.final_state}
    codes = sorted({t.symbol for state in table for t in table.transitions_from(state)})

    new_transitions = {}
    for state in states:
        dest = {}
        for code in codes:
            dest[symbol_of(code)] = state_name(dfa.step(state, code))
        new_transitions[state_name(state)] = dest

    return AutomataDFA(
        states=set(state_name(s) for s in states),
        input_symbols=set(symbol_of(c) for c in codes),
        transitions=new_transitions,
        initial_state=state_name(dfa.initial_state),
        final_states={state_name(dfa.final_state)},
    )


#Codes outside the alphabet never move the engine, so they are dropped here
def accepts(automaton: AutomataDFA, input_codes: Iterable[int]) -> bool:
    word = "".join(symbol_of(c) for c in input_codes if symbol_of(c) in automaton.input_symbols)
    return automaton.accepts_input(word)
