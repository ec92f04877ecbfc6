"""Loading program images and running the CPU until it halts."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Union

from .cycles import FETCH_INSTRUCTION, get_cycles
from .errors import FileOpenFailed, MissingHeader
from .state import MEMORY_LENGTH, PROGRAM_START_ADDRESS, State

PROGRAM_HEADER_LENGTH = 16

# Half-cycles spent by the reset sequence before the first instruction.
_RESET_HALF_CYCLES = 14


class DebugLevel(Enum):
    """How much tracing output the emulator prints while running."""

    NONE = "none"
    LOW = "low"
    HIGH = "high"


def run_emulator(state: State, debug_level: DebugLevel) -> State:
    """Run cycles until the CPU halts and return the final state.

    With ``DebugLevel.LOW`` a trace line is printed before each instruction
    fetch; with ``DebugLevel.HIGH`` a detailed line is printed before every
    cycle.
    """
    state.half_cycle_count = _RESET_HALF_CYCLES

    while not state.is_halted:
        if state.cycle_queue:
            phase1, phase2 = state.cycle_queue.popleft()
            if debug_level is DebugLevel.HIGH:
                print(state.detail())
            phase1(state)
            phase2(state)
        else:
            if debug_level is DebugLevel.LOW:
                print(state.trace())
            elif debug_level is DebugLevel.HIGH:
                print()
                print(state.detail())

            phase1, phase2 = FETCH_INSTRUCTION
            phase1(state)
            phase2(state)
            state.cycle_queue.extend(get_cycles(state.instruction_register))

        state.half_cycle_count += 2

    return state


def load_program(state: State, path_to_program: Union[str, Path]) -> State:
    """Copy a program image, minus its header, into memory at the start address.

    Bytes that would fall beyond the top of memory are dropped.
    """
    try:
        program = Path(path_to_program).read_bytes()
    except OSError as exc:
        raise FileOpenFailed(str(exc)) from exc

    if len(program) < PROGRAM_HEADER_LENGTH:
        raise MissingHeader()

    state.program_counter = (PROGRAM_START_ADDRESS >> 8, PROGRAM_START_ADDRESS & 0xFF)

    payload = program[PROGRAM_HEADER_LENGTH:][: MEMORY_LENGTH - PROGRAM_START_ADDRESS]
    state.memory[PROGRAM_START_ADDRESS : PROGRAM_START_ADDRESS + len(payload)] = payload
    if payload:
        state.data_bus = payload[-1]

    return state