"""Instruction operations executed on the final half-cycle of each instruction."""

from __future__ import annotations

from .half_cycles import branch_across_page, get_effective_address, read_opcode
from .state import HalfCycle, State

_SIGN_BIT = 0b1000_0000
_IGNORED_STATUS_BITS = 0b0011_0000
_KEPT_STATUS_BITS = 0b1100_1111


def _set_zero_negative(state: State, result: int) -> None:
    state.zero = result == 0
    state.negative = bool(result & _SIGN_BIT)


def _repeat_on_page_cross(state: State, operation: HalfCycle) -> None:
    """Queue one more cycle that redoes ``operation`` at the fixed-up address."""
    if state.crossed_page:
        state.cycle_queue.append((get_effective_address, operation))


def _read(state: State) -> int:
    return state.read_from_memory(state.address_bus)


def _write(state: State, data: int) -> None:
    state.write_to_memory(state.address_bus, data)


# Access


def lda(state: State) -> None:
    data = _read(state)
    state.accumulator = data
    _set_zero_negative(state, data)


def lda_indirect_y(state: State) -> None:
    lda(state)
    _repeat_on_page_cross(state, lda)


def lda_absolute_indexed(state: State) -> None:
    lda(state)
    _repeat_on_page_cross(state, lda)


def ldx(state: State) -> None:
    data = _read(state)
    state.x_index_register = data
    _set_zero_negative(state, data)


def ldx_absolute_indexed(state: State) -> None:
    ldx(state)
    _repeat_on_page_cross(state, ldx)


def ldy(state: State) -> None:
    data = _read(state)
    state.y_index_register = data
    _set_zero_negative(state, data)


def ldy_absolute_indexed(state: State) -> None:
    ldy(state)
    _repeat_on_page_cross(state, ldy)


def sta(state: State) -> None:
    _write(state, state.accumulator)


def stx(state: State) -> None:
    _write(state, state.x_index_register)


def sty(state: State) -> None:
    _write(state, state.y_index_register)


# Arithmetic


def inc(state: State) -> None:
    result = (_read(state) + 1) & 0xFF
    _set_zero_negative(state, result)
    _write(state, result)


def inx(state: State) -> None:
    result = (state.x_index_register + 1) & 0xFF
    _set_zero_negative(state, result)
    state.x_index_register = result


def iny(state: State) -> None:
    result = (state.y_index_register + 1) & 0xFF
    _set_zero_negative(state, result)
    state.y_index_register = result


def dec(state: State) -> None:
    result = (_read(state) - 1) & 0xFF
    _set_zero_negative(state, result)
    _write(state, result)


def dex(state: State) -> None:
    result = (state.x_index_register - 1) & 0xFF
    _set_zero_negative(state, result)
    state.x_index_register = result


def dey(state: State) -> None:
    result = (state.y_index_register - 1) & 0xFF
    _set_zero_negative(state, result)
    state.y_index_register = result


def _add_with_carry(state: State, operand: int) -> None:
    accumulator = state.accumulator
    total = accumulator + operand + int(state.carry)
    result = total & 0xFF

    state.accumulator = result
    state.carry = total > 0xFF
    state.zero = result == 0
    state.overflow = bool((accumulator ^ result) & (operand ^ result) & _SIGN_BIT)
    state.negative = bool(result & _SIGN_BIT)


def adc(state: State) -> None:
    _add_with_carry(state, _read(state))


def adc_indirect_y(state: State) -> None:
    adc(state)
    _repeat_on_page_cross(state, adc)


def adc_absolute_indexed(state: State) -> None:
    adc(state)
    _repeat_on_page_cross(state, adc)


def sbc(state: State) -> None:
    _add_with_carry(state, ~_read(state) & 0xFF)


def sbc_indirect_y(state: State) -> None:
    sbc(state)
    _repeat_on_page_cross(state, sbc)


def sbc_absolute_indexed(state: State) -> None:
    sbc(state)
    _repeat_on_page_cross(state, sbc)


# Bitwise


def and_(state: State) -> None:
    result = state.accumulator & _read(state)
    state.accumulator = result
    _set_zero_negative(state, result)


def and_indirect_y(state: State) -> None:
    and_(state)
    _repeat_on_page_cross(state, and_)


def and_absolute_indexed(state: State) -> None:
    and_(state)
    _repeat_on_page_cross(state, and_)


def bit(state: State) -> None:
    data = _read(state)
    state.zero = (state.accumulator & data) == 0
    state.overflow = bool(data & 0b0100_0000)
    state.negative = bool(data & _SIGN_BIT)


def eor(state: State) -> None:
    result = state.accumulator ^ _read(state)
    state.accumulator = result
    _set_zero_negative(state, result)


def eor_indirect_y(state: State) -> None:
    eor(state)
    _repeat_on_page_cross(state, eor)


def eor_absolute_indexed(state: State) -> None:
    eor(state)
    _repeat_on_page_cross(state, eor)


def ora(state: State) -> None:
    result = state.accumulator | _read(state)
    state.accumulator = result
    _set_zero_negative(state, result)


def ora_indirect_y(state: State) -> None:
    ora(state)
    _repeat_on_page_cross(state, ora)


def ora_absolute_indexed(state: State) -> None:
    ora(state)
    _repeat_on_page_cross(state, ora)


# Branches


def do_branch(state: State, condition: bool) -> None:
    """Read the branch offset and, if taken, queue the extra branch cycles."""
    offset = _read(state)
    if not condition:
        return

    pc_high, pc_low = state.program_counter
    signed_offset = offset - 0x100 if offset & _SIGN_BIT else offset
    target = pc_low + signed_offset
    target_low = target & 0xFF
    crossed = not 0 <= target <= 0xFF

    state.effective_address = (pc_high, target_low)
    state.crossed_page = crossed
    state.cycle_queue.append((get_effective_address, read_opcode))

    if crossed:
        state.cycle_queue.append((branch_across_page, read_opcode))
    else:
        state.program_counter = (pc_high, target_low)


def bcs(state: State) -> None:
    do_branch(state, state.carry)


def bcc(state: State) -> None:
    do_branch(state, not state.carry)


def beq(state: State) -> None:
    do_branch(state, state.zero)


def bne(state: State) -> None:
    do_branch(state, not state.zero)


def bmi(state: State) -> None:
    do_branch(state, state.negative)


def bpl(state: State) -> None:
    do_branch(state, not state.negative)


def bvs(state: State) -> None:
    do_branch(state, state.overflow)


def bvc(state: State) -> None:
    do_branch(state, not state.overflow)


# Compare


def _compare(state: State, register: int) -> None:
    data = _read(state)
    result = (register - data) & 0xFF
    state.carry = register >= data
    state.zero = register == data
    state.negative = bool(result & _SIGN_BIT)


def cmp(state: State) -> None:
    _compare(state, state.accumulator)


def cmp_indirect_y(state: State) -> None:
    cmp(state)
    _repeat_on_page_cross(state, cmp)


def cmp_absolute_indexed(state: State) -> None:
    cmp(state)
    _repeat_on_page_cross(state, cmp)


def cpx(state: State) -> None:
    _compare(state, state.x_index_register)


def cpy(state: State) -> None:
    _compare(state, state.y_index_register)


# Flags


def sec(state: State) -> None:
    state.carry = True


def clc(state: State) -> None:
    state.carry = False


def sed(state: State) -> None:
    state.decimal_mode = True


def cld(state: State) -> None:
    state.decimal_mode = False


def sei(state: State) -> None:
    state.interrupt_disable = True


def cli(state: State) -> None:
    state.interrupt_disable = False


def clv(state: State) -> None:
    state.overflow = False


# Jumps


def _jump_to_read_high_byte(state: State) -> None:
    data = _read(state)
    state.effective_address = (data, state.effective_address[1])
    state.data_bus = data
    state.program_counter = state.effective_address


def jsr(state: State) -> None:
    _jump_to_read_high_byte(state)


def jmp_absolute(state: State) -> None:
    _jump_to_read_high_byte(state)


def _pull_status(state: State) -> None:
    # The B flag and the unused bit keep their current values.
    pulled = _read(state) & _KEPT_STATUS_BITS
    kept = state.processor_status_register & _IGNORED_STATUS_BITS
    state.processor_status_register = pulled | kept


def rti(state: State) -> None:
    _pull_status(state)


# Other


def nop(state: State) -> None:
    """Do nothing."""


def nop_absolute_indexed(state: State) -> None:
    _repeat_on_page_cross(state, nop)


# Shifts


def _shift_memory(state: State, shift) -> None:
    result = shift(state, _read(state))
    _write(state, result)


def _shift_accumulator(state: State, shift) -> None:
    state.accumulator = shift(state, state.accumulator)


def _asl(state: State, data: int) -> int:
    result = (data << 1) & 0xFF
    state.carry = bool(data & _SIGN_BIT)
    _set_zero_negative(state, result)
    return result


def _lsr(state: State, data: int) -> int:
    result = data >> 1
    state.carry = bool(data & 1)
    state.zero = result == 0
    state.negative = False
    return result


def _rol(state: State, data: int) -> int:
    result = ((data << 1) | int(state.carry)) & 0xFF
    state.carry = bool(data & _SIGN_BIT)
    _set_zero_negative(state, result)
    return result


def _ror(state: State, data: int) -> int:
    result = (data >> 1) | (int(state.carry) << 7)
    state.carry = bool(data & 1)
    _set_zero_negative(state, result)
    return result


def asl(state: State) -> None:
    _shift_memory(state, _asl)


def asl_accumulator(state: State) -> None:
    _shift_accumulator(state, _asl)


def lsr(state: State) -> None:
    _shift_memory(state, _lsr)


def lsr_accumulator(state: State) -> None:
    _shift_accumulator(state, _lsr)


def rol(state: State) -> None:
    _shift_memory(state, _rol)


def rol_accumulator(state: State) -> None:
    _shift_accumulator(state, _rol)


def ror(state: State) -> None:
    _shift_memory(state, _ror)


def ror_accumulator(state: State) -> None:
    _shift_accumulator(state, _ror)


# Stack


def pha(state: State) -> None:
    _write(state, state.accumulator)


def php(state: State) -> None:
    _write(state, state.processor_status_register | _IGNORED_STATUS_BITS)


def plp(state: State) -> None:
    _pull_status(state)


def pla(state: State) -> None:
    result = _read(state)
    _set_zero_negative(state, result)
    state.accumulator = result


# Transfers


def tax(state: State) -> None:
    result = state.accumulator
    state.x_index_register = result
    state.address_bus = state.program_counter
    _set_zero_negative(state, result)


def tay(state: State) -> None:
    result = state.accumulator
    state.y_index_register = result
    state.address_bus = state.program_counter
    _set_zero_negative(state, result)


def tsx(state: State) -> None:
    result = state.stack_pointer
    state.x_index_register = result
    state.address_bus = state.program_counter
    _set_zero_negative(state, result)


def txa(state: State) -> None:
    result = state.x_index_register
    state.accumulator = result
    state.address_bus = state.program_counter
    _set_zero_negative(state, result)


def txs(state: State) -> None:
    state.stack_pointer = state.x_index_register
    state.address_bus = state.program_counter


def tya(state: State) -> None:
    result = state.y_index_register
    state.accumulator = result
    state.address_bus = state.program_counter
    _set_zero_negative(state, result)


# Unofficial opcodes


def lax(state: State) -> None:
    lda(state)
    ldx(state)


def lax_indirect_y(state: State) -> None:
    lax(state)
    _repeat_on_page_cross(state, lax)


def lax_absolute_indexed(state: State) -> None:
    lax(state)
    _repeat_on_page_cross(state, lax)


def sax(state: State) -> None:
    _write(state, state.accumulator & state.x_index_register)


def usbc(state: State) -> None:
    sbc(state)


def dcp(state: State) -> None:
    dec(state)
    cmp(state)


def isc(state: State) -> None:
    inc(state)
    sbc(state)


def slo(state: State) -> None:
    asl(state)
    ora(state)


def rla(state: State) -> None:
    rol(state)
    and_(state)


def sre(state: State) -> None:
    lsr(state)
    eor(state)


def rra(state: State) -> None:
    ror(state)
    adc(state)


def jam(state: State) -> None:
    state.is_halted = True