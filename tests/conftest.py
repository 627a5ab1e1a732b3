"""Shared fixtures for gphdfa tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gphdfa import DFA, loads

EXAMPLE_DESCRIPTOR = """\
1
2
1: 97 2 | 37 3
2: 97 1 | 27 3
3: 37 1 | 27 2
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_DESCRIPTOR


@pytest.fixture
def example_dfa() -> DFA:
    return loads(EXAMPLE_DESCRIPTOR)


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    path = tmp_path / "dfa.gph"
    path.write_text(EXAMPLE_DESCRIPTOR, encoding="utf-8")
    return path
