import pytest

from greennes import operations
from greennes.half_cycles import (
    get_pc,
    get_effective_address,
    read_low_effective_address_byte,
    read_opcode,
)
from greennes.instructions import (
    Miscellaneous,
    Read,
    ReadModifyWrite,
    SingleByte,
    Store,
    Unofficial,
)
from greennes.state import State


def _run(state, cycles):
    """Execute the given cycles and any cycles the operations queue up."""
    state.cycle_queue.extend(cycles)
    while state.cycle_queue:
        first, second = state.cycle_queue.popleft()
        first(state)
        second(state)
    return state


def _state_at(*program):
    state = State()
    state.program_counter = (0xC0, 0x00)
    for offset, byte in enumerate(program):
        state.memory[0xC000 + offset] = byte
    return state


def test_single_byte_runs_operation_then_reads_opcode():
    assert SingleByte.DEFAULT.cycles(operations.inx) == [(operations.inx, read_opcode)]


def test_read_immediate_is_one_cycle():
    assert Read.IMMEDIATE.cycles(operations.lda) == [(get_pc, operations.lda)]


def test_jump_absolute_cycles():
    assert Miscellaneous.JUMP_ABSOLUTE.cycles(operations.jmp_absolute) == [
        (get_pc, read_low_effective_address_byte),
        (get_pc, operations.jmp_absolute),
    ]


def test_halt_cycle():
    assert Unofficial.HALT.cycles(operations.jam) == [(operations.nop, operations.jam)]


@pytest.mark.parametrize(
    "mode",
    [*Read, *Store, *ReadModifyWrite, *Unofficial, Miscellaneous.BRANCH],
)
def test_operation_runs_last(mode):
    cycles = mode.cycles(operations.nop)
    assert cycles[-1][1] is operations.nop
    assert all(len(cycle) == 2 for cycle in cycles)


def test_read_absolute_loads_value():
    state = _state_at(0x34, 0x12)
    state.memory[0x1234] = 0x42
    _run(state, Read.ABSOLUTE.cycles(operations.lda))
    assert state.accumulator == 0x42
    assert state.program_counter == (0xC0, 0x02)


def test_read_absolute_x_page_cross_reads_corrected_address():
    state = _state_at(0xFF, 0x12)
    state.x_index_register = 1
    state.memory[0x1300] = 7
    state.memory[0x1200] = 9
    _run(state, Read.ABSOLUTE_X.cycles(operations.lda_absolute_indexed))
    assert state.accumulator == 7
    assert state.crossed_page is True


def test_read_zero_page_x_wraps_within_page():
    state = _state_at(0xFF)
    state.x_index_register = 2
    state.memory[0x0001] = 0x11
    state.memory[0x0101] = 0x22
    _run(state, Read.ZERO_PAGE_X.cycles(operations.ldy))
    assert state.y_index_register == 0x11


def test_read_indirect_x_follows_pointer():
    state = _state_at(0x20)
    state.x_index_register = 4
    state.memory[0x0024] = 0x00
    state.memory[0x0025] = 0x30
    state.memory[0x3000] = 0x5A
    _run(state, Read.INDIRECT_X.cycles(operations.lda))
    assert state.accumulator == 0x5A


def test_store_indirect_y_writes_to_indexed_address():
    state = _state_at(0x10)
    state.memory[0x0010] = 0x20
    state.memory[0x0011] = 0x30
    state.y_index_register = 5
    state.accumulator = 0x99
    _run(state, Store.INDIRECT_Y.cycles(operations.sta))
    assert state.memory[0x3025] == 0x99


def test_store_zero_page_y():
    state = _state_at(0x40)
    state.y_index_register = 3
    state.x_index_register = 0x77
    _run(state, Store.ZERO_PAGE_Y.cycles(operations.stx))
    assert state.memory[0x0043] == 0x77


def test_read_modify_write_zero_page_increments_memory():
    state = _state_at(0x40)
    state.memory[0x0040] = 0x7F
    _run(state, ReadModifyWrite.ZERO_PAGE.cycles(operations.inc))
    assert state.memory[0x0040] == 0x80
    assert state.negative is True


def test_unofficial_absolute_dcp_decrements_and_compares():
    state = _state_at(0x00, 0x20)
    state.memory[0x2000] = 0x06
    state.accumulator = 0x05
    _run(state, Unofficial.ABSOLUTE.cycles(operations.dcp))
    assert state.memory[0x2000] == 0x05
    assert state.zero is True
    assert state.carry is True


def test_halt_stops_the_cpu():
    state = _run(State(), Unofficial.HALT.cycles(operations.jam))
    assert state.is_halted is True


def test_push_then_pull_restores_accumulator_and_stack_pointer():
    state = _state_at()
    state.accumulator = 0x5A
    _run(state, Miscellaneous.PUSH.cycles(operations.pha))
    assert state.memory[0x01FD] == 0x5A
    state.accumulator = 0
    _run(state, Miscellaneous.PULL.cycles(operations.pla))
    assert state.accumulator == 0x5A
    assert state.stack_pointer == 0xFD


def test_jump_to_subroutine_and_return_round_trip():
    state = _state_at(0x00, 0x80)
    _run(state, Miscellaneous.JUMP_TO_SUBROUTINE.cycles(operations.jsr))
    assert state.program_counter == (0x80, 0x00)
    assert state.memory[0x01FD] == 0xC0
    assert state.memory[0x01FC] == 0x01
    _run(state, Miscellaneous.RETURN_FROM_SUBROUTINE.cycles(operations.nop))
    assert state.program_counter == (0xC0, 0x02)
    assert state.stack_pointer == 0xFD


def test_jump_indirect_does_not_carry_into_high_byte():
    state = _state_at(0xFF, 0x02)
    state.memory[0x02FF] = 0x34
    state.memory[0x0200] = 0x12
    state.memory[0x0300] = 0x56
    _run(state, Miscellaneous.JUMP_INDIRECT.cycles(operations.nop))
    assert state.program_counter == (0x12, 0x34)


def test_branch_taken_moves_program_counter():
    state = _state_at(0x04)
    state.carry = True
    _run(state, Miscellaneous.BRANCH.cycles(operations.bcs))
    assert state.program_counter == (0xC0, 0x05)


def test_branch_not_taken_leaves_no_extra_cycles():
    state = _state_at(0x04)
    state.carry = False
    cycles = Miscellaneous.BRANCH.cycles(operations.bcs)
    _run(state, cycles)
    assert state.program_counter == (0xC0, 0x01)
    assert list(state.cycle_queue) == []


def test_store_absolute_x_uses_effective_address():
    cycles = Store.ABSOLUTE_X.cycles(operations.sta)
    assert cycles[-1] == (get_effective_address, operations.sta)
    state = _state_at(0xFE, 0x20)
    state.x_index_register = 3
    state.accumulator = 0x42
    _run(state, cycles)
    assert state.memory[0x2101] == 0x42