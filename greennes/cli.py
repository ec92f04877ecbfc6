"""Command-line entry point for running programs in the emulator."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .emulator import DebugLevel, load_program, run_emulator
from .errors import EmuError, LoadError
from .state import State


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="greennes")
    parser.add_argument(
        "-d",
        "--debug",
        type=DebugLevel,
        choices=list(DebugLevel),
        default=DebugLevel.NONE,
        metavar="{" + ",".join(level.value for level in DebugLevel) + "}",
        help="Debug level",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    run = commands.add_parser("run", help="Runs a NES program in the emulator.")
    run.add_argument("path", help="Path to the NES program to execute.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the requested command and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "run":
        try:
            state = load_program(State(), args.path)
        except LoadError as err:
            print(f"Loading program failed: {err}", file=sys.stderr)
            return 1

        try:
            final_state = run_emulator(state, args.debug)
        except EmuError as err:
            print(f"Running program failed: {err}", file=sys.stderr)
            return 1

        cycle_count = final_state.half_cycle_count // 2
        print(f"Completed {cycle_count} cycles. Final State:\n{final_state.trace()}")

        status02 = final_state.read_from_memory((0x00, 0x02))
        status03 = final_state.read_from_memory((0x00, 0x03))
        print(f"[0x02, 0x03]: [0x{status02:02X}, 0x{status03:02X}]")

    return 0


if __name__ == "__main__":
    sys.exit(main())