"""Command line entrypoint: evaluate an input string against a .gph descriptor."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from .config import LOG_LEVELS, Config, load_config
from .dfa import DFA
from .errors import GphDfaError, MalformedDescriptorError
from .export import accepts, to_automata_dfa
from .loaddfa import read_descriptor
from .log import configure_logging

logger = logging.getLogger("gphdfa.cli")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"Invalid Input! {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="gphdfa",
        description="Run a DFA described by a .gph file over an input string.",
        epilog="An input that looks like an option is still read as the input string; "
        "use -- before it when it matches one of the options above.",
        allow_abbrev=False,
    )
    parser.add_argument("descriptor", help="Path to the .gph descriptor file.")
    parser.add_argument("input", nargs="?", default=None, help="Input string; each byte is one symbol.")
    parser.add_argument("--config", type=Path, default=None, help="YAML or JSON configuration file.")
    parser.add_argument(
        "--allow-self-loops",
        action="store_true",
        help="Follow transitions that lead back to the current state.",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Do not check that the initial and final states exist in the table.",
    )
    parser.add_argument("--list", action="store_true", help="Print the state diagram before evaluating.")
    parser.add_argument("--trace", action="store_true", help="Print the states visited by the input.")
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Also evaluate the input with an equivalent automata-lib DFA and report whether both agree.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level.",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> Config:
    config = load_config(args.config) if args.config else Config()
    if args.log_level:
        config = dataclasses.replace(config, logging=dataclasses.replace(config.logging, level=args.log_level))
    return config


def _build_dfa(args: argparse.Namespace, config: Config) -> DFA:
    descriptor = read_descriptor(args.descriptor)
    skip_self_loops = config.engine.skip_self_loops and not args.allow_self_loops
    dfa = DFA.from_descriptor(descriptor, skip_self_loops=skip_self_loops)
    if config.engine.validate_states and not args.no_validate:
        dfa.validate()

    if args.list:
        for line in dfa.table.listing():
            print(line)
        print(f"vertices: {descriptor.stats.nvertices}, edges: {descriptor.stats.nedges}")
    return dfa


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    # an input such as "-x" is left over as an unknown option
    args, extras = parser.parse_known_args(argv)
    if args.input is None and len(extras) == 1:
        args.input = extras[0]
    elif extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    if args.input is None:
        parser.error("the following arguments are required: input")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = _load_settings(args)
    except GphDfaError as exc:
        print(f"Cannot load configuration: {exc}", file=sys.stderr)
        return 1

    configure_logging(config.logging)

    print(f"Building DFA from {args.descriptor}")
    try:
        dfa = _build_dfa(args, config)
    except MalformedDescriptorError as exc:
        logger.error("Descriptor %s rejected with %d problem(s)", args.descriptor, len(exc.problems))
        for problem in exc.problems:
            print(f"{args.descriptor}: {problem}", file=sys.stderr)
        return 1
    except GphDfaError as exc:
        logger.error("Cannot build DFA: %s", exc)
        print(exc, file=sys.stderr)
        return 1

    codes = os.fsencode(args.input)
    print(f"Input: {args.input}")
    if args.trace:
        print("Trace: " + " -> ".join(str(state) for state in dfa.trace(codes)))

    accepted = dfa.execute(codes)
    if args.cross_check:
        agrees = accepts(to_automata_dfa(dfa), codes) == accepted
        print(f"Cross-check (automata-lib): {'agrees' if agrees else 'disagrees'}")
        if not agrees:
            logger.error("automata-lib disagrees with the engine on input %r", args.input)

    if accepted:
        print("Evaluation: True")
        return 0
    print("Evaluation: False")
    return 1


if __name__ == "__main__":
    sys.exit(main())
