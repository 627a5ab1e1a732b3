"""Tests for the .gph descriptor parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from gphdfa import (
    DescriptorNotFoundError,
    MalformedDescriptorError,
    MalformedKind,
    Transition,
    UnknownStateReferenceError,
    load_from_file,
    loads,
    parse_lines,
)


def _problems(text: str):
    with pytest.raises(MalformedDescriptorError) as excinfo:
        parse_lines(text.splitlines())
    return excinfo.value.problems


class TestParseLines:
    def test_example_descriptor(self, example_text: str) -> None:
        descriptor = parse_lines(example_text.splitlines())
        assert descriptor.initial_state == 1
        assert descriptor.final_state == 2
        assert descriptor.table.transitions_from(1) == (Transition(97, 2), Transition(37, 3))
        assert descriptor.table.transitions_from(3) == (Transition(37, 1), Transition(27, 2))
        assert descriptor.stats.nvertices == 3
        assert descriptor.stats.nedges == 6

    def test_blank_lines_and_crlf_are_tolerated(self) -> None:
        descriptor = parse_lines(["0\r\n", " 4 \r\n", "\n", "0: 1 4\r\n", "   \n"])
        assert (descriptor.initial_state, descriptor.final_state) == (0, 4)
        assert descriptor.table.transitions_from(0) == (Transition(1, 4),)
        assert descriptor.stats.nvertices == 1

    def test_repeated_state_lines_append(self) -> None:
        descriptor = parse_lines(["1", "2", "1: 97 2", "1: 98 3"])
        assert descriptor.table.transitions_from(1) == (Transition(97, 2), Transition(98, 3))

    def test_split_happens_at_first_colon_only(self) -> None:
        problems = _problems("1\n2\n1: 97 2 : 3\n")
        assert problems[0].kind is MalformedKind.TOKEN_COUNT


class TestMalformedLines:
    def test_single_token_clause(self) -> None:
        problems = _problems("1\n2\n1: 97\n")
        assert len(problems) == 1
        assert problems[0].kind is MalformedKind.TOKEN_COUNT
        assert problems[0].line_no == 3
        assert problems[0].text == "1: 97"

    def test_extra_token_clause(self) -> None:
        problems = _problems("1\n2\n1: 97 2 3\n")
        assert problems[0].kind is MalformedKind.TOKEN_COUNT

    def test_double_space_is_not_a_separator(self) -> None:
        problems = _problems("1\n2\n1: 97  2\n")
        assert problems[0].kind is MalformedKind.TOKEN_COUNT

    def test_trailing_pipe_leaves_empty_clause(self) -> None:
        problems = _problems("1\n2\n1: 97 2 |\n")
        assert problems[0].kind is MalformedKind.TOKEN_COUNT

    def test_missing_colon(self) -> None:
        problems = _problems("1\n2\n1 97 2\n")
        assert problems[0].kind is MalformedKind.MISSING_COLON

    def test_non_integer_tokens(self) -> None:
        problems = _problems("x\n2\n1: a 2\nb: 97 2\n")
        assert [p.kind for p in problems] == [MalformedKind.INVALID_INTEGER] * 3
        assert [p.line_no for p in problems] == [1, 3, 4]

    def test_negative_state(self) -> None:
        problems = _problems("-1\n2\n1: 97 -2\n")
        assert [p.kind for p in problems] == [MalformedKind.NEGATIVE_STATE] * 2

    def test_symbol_out_of_range(self) -> None:
        problems = _problems("1\n2\n1: 256 2 | -1 3\n")
        assert problems[0].kind is MalformedKind.SYMBOL_OUT_OF_RANGE

    def test_missing_headers(self) -> None:
        problems = _problems("")
        assert [(p.line_no, p.kind) for p in problems] == [
            (1, MalformedKind.MISSING_HEADER),
            (2, MalformedKind.MISSING_HEADER),
        ]

    def test_missing_final_header(self) -> None:
        problems = _problems("1")
        assert [(p.line_no, p.kind) for p in problems] == [(2, MalformedKind.MISSING_HEADER)]

    def test_all_offending_lines_are_reported(self) -> None:
        text = "1\n2\n1: 97\n2: 97 1\n3 27 2\n4: 300 1\n"
        with pytest.raises(MalformedDescriptorError) as excinfo:
            parse_lines(text.splitlines())
        assert [p.line_no for p in excinfo.value.problems] == [3, 5, 6]
        assert excinfo.value.kinds() == {
            MalformedKind.TOKEN_COUNT,
            MalformedKind.MISSING_COLON,
            MalformedKind.SYMBOL_OUT_OF_RANGE,
        }
        assert "line 5" in str(excinfo.value)


class TestLoads:
    def test_builds_executable_dfa(self, example_text: str) -> None:
        dfa = loads(example_text)
        assert dfa.execute(b"a") is True

    def test_unknown_header_state(self) -> None:
        with pytest.raises(UnknownStateReferenceError) as excinfo:
            loads("1\n9\n1: 97 2\n")
        assert excinfo.value.references == [("final", 9)]

    def test_validation_can_be_disabled(self) -> None:
        dfa = loads("1\n9\n1: 97 2\n", validate=False)
        assert dfa.execute(b"a") is False

    def test_self_loop_policy_is_forwarded(self) -> None:
        text = "1\n2\n1: 97 1 | 97 2\n"
        assert loads(text).execute(b"a") is True
        assert loads(text, skip_self_loops=False).execute(b"a") is False


class TestLoadFromFile:
    def test_reads_file(self, example_file: Path) -> None:
        dfa = load_from_file(str(example_file))
        assert (dfa.initial_state, dfa.final_state) == (1, 2)
        assert dfa.execute([37, 27]) is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DescriptorNotFoundError):
            load_from_file(str(tmp_path / "missing.gph"))
