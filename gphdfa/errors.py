"""Errors raised while loading descriptors and configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GphDfaError(Exception):
    pass


class DescriptorNotFoundError(GphDfaError):
    def __init__(self, filename: str):
        super().__init__(f"Descriptor file not found: {filename}")
        self.filename = filename


class DescriptorReadError(GphDfaError):
    def __init__(self, filename: str, reason: str):
        super().__init__(f"Cannot read descriptor {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class MalformedKind(enum.Enum):
    MISSING_HEADER = "missing header"
    INVALID_INTEGER = "invalid integer"
    NEGATIVE_STATE = "negative state"
    MISSING_COLON = "missing colon"
    TOKEN_COUNT = "wrong token count"
    SYMBOL_OUT_OF_RANGE = "symbol out of range"


@dataclass(frozen=True)
class MalformedLine:
    """One offending descriptor line."""

    line_no: int
    text: str
    kind: MalformedKind
    message: str

    def __str__(self) -> str:
        return f"line {self.line_no}: {self.kind.value}: {self.message} ({self.text!r})"


class MalformedDescriptorError(GphDfaError):
    """Every malformed line found in one descriptor."""

    def __init__(self, problems: list[MalformedLine]):
        self.problems = list(problems)
        lines = "\n".join("  " + str(p) for p in self.problems)
        super().__init__(f"{len(self.problems)} malformed line(s) in descriptor:\n{lines}")

    def kinds(self) -> set[MalformedKind]:
        return {p.kind for p in self.problems}


class UnknownStateReferenceError(GphDfaError):
    def __init__(self, references: list[tuple[str, int]]):
        self.references = list(references)
        detail = ", ".join(f"{field} state {state}" for field, state in self.references)
        super().__init__(f"Unknown state reference: {detail}")


class ConfigError(GphDfaError):
    pass


__all__ = [
    "ConfigError",
    "DescriptorNotFoundError",
    "DescriptorReadError",
    "GphDfaError",
    "MalformedDescriptorError",
    "MalformedKind",
    "MalformedLine",
    "UnknownStateReferenceError",
]
