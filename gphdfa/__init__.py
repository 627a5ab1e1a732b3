"""Deterministic finite automata built from .gph adjacency-list descriptors."""

from .dfa import DFA
from .errors import (
    ConfigError,
    DescriptorNotFoundError,
    DescriptorReadError,
    GphDfaError,
    MalformedDescriptorError,
    MalformedKind,
    MalformedLine,
    UnknownStateReferenceError,
)
from .export import accepts, to_automata_dfa
from .loaddfa import Descriptor, DescriptorStats, load_from_file, loads, parse_lines, read_descriptor
from .table import Transition, TransitionTable

__all__ = [
    "ConfigError",
    "DFA",
    "Descriptor",
    "DescriptorNotFoundError",
    "DescriptorReadError",
    "DescriptorStats",
    "GphDfaError",
    "MalformedDescriptorError",
    "MalformedKind",
    "MalformedLine",
    "Transition",
    "TransitionTable",
    "UnknownStateReferenceError",
    "accepts",
    "load_from_file",
    "loads",
    "parse_lines",
    "read_descriptor",
    "to_automata_dfa",
]
