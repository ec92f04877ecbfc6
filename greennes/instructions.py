"""Cycle sequences for each instruction family and addressing mode."""

from __future__ import annotations

from enum import Enum, auto
from typing import List

from .half_cycles import (
    get_base_zero_page_address,
    get_effective_address,
    get_effective_zero_page_address,
    get_effective_zero_page_x_indexed_address,
    get_effective_zero_page_y_indexed_address,
    get_high_interrupt_vector,
    get_indirect_high_address_byte,
    get_indirect_low_address_byte,
    get_indirect_x_indexed_high_address_byte,
    get_indirect_x_indexed_low_address_byte,
    get_indirect_y_indexed_address,
    get_indirect_zero_page_high_address_byte,
    get_indirect_zero_page_low_address_byte,
    get_low_interrupt_vector,
    get_pc,
    get_pc_without_increment,
    get_sp,
    get_x_indexed_base_address_with_carry,
    get_y_indexed_base_address_with_carry,
    pop_stack,
    push_stack,
    read_data,
    read_high_base_address_byte,
    read_high_effective_address_byte,
    read_high_indirect_address_byte,
    read_high_pc_address_byte,
    read_low_base_address_byte,
    read_low_effective_address_byte,
    read_low_indirect_address_byte,
    read_low_pc_address_byte,
    read_opcode,
    write_data,
    write_pc_high,
    write_pc_low,
    write_status,
)
from .operations import nop
from .state import Cycle, HalfCycle

FETCH_HIGH_EFFECTIVE_ADDRESS_BYTE: Cycle = (get_pc, read_high_effective_address_byte)
FETCH_LOW_EFFECTIVE_ADDRESS_BYTE: Cycle = (get_pc, read_low_effective_address_byte)
FETCH_HIGH_BASE_ADDRESS_BYTE: Cycle = (get_pc, read_high_base_address_byte)
FETCH_LOW_BASE_ADDRESS_BYTE: Cycle = (get_pc, read_low_base_address_byte)

_INDIRECT_X_ADDRESSING: List[Cycle] = [
    FETCH_LOW_BASE_ADDRESS_BYTE,
    (get_base_zero_page_address, read_data),
    (get_indirect_x_indexed_low_address_byte, read_low_effective_address_byte),
    (get_indirect_x_indexed_high_address_byte, read_high_effective_address_byte),
]

_INDIRECT_Y_POINTER: List[Cycle] = [
    (get_pc, read_low_indirect_address_byte),
    (get_indirect_zero_page_low_address_byte, read_low_base_address_byte),
    (get_indirect_zero_page_high_address_byte, read_high_base_address_byte),
]

_MODIFY_EFFECTIVE: List[Cycle] = [
    (get_effective_address, read_data),
    (get_effective_address, write_data),
]


class Miscellaneous(Enum):
    """Stack, jump, interrupt and branch instructions."""

    PUSH = auto()
    PULL = auto()
    JUMP_TO_SUBROUTINE = auto()
    BREAK = auto()
    RETURN_FROM_INTERRUPT = auto()
    JUMP_ABSOLUTE = auto()
    JUMP_INDIRECT = auto()
    RETURN_FROM_SUBROUTINE = auto()
    BRANCH = auto()

    def cycles(self, operation: HalfCycle) -> List[Cycle]:
        """Cycles that follow the opcode fetch, ending with ``operation`` where used."""
        match self:
            case Miscellaneous.PUSH:
                return [
                    (get_pc_without_increment, read_data),
                    (push_stack, operation),
                ]
            case Miscellaneous.PULL:
                return [
                    (get_pc_without_increment, read_data),
                    (pop_stack, read_data),
                    (get_sp, operation),
                ]
            case Miscellaneous.JUMP_TO_SUBROUTINE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    (get_sp, read_data),
                    (push_stack, write_pc_high),
                    (push_stack, write_pc_low),
                    (get_pc, operation),
                ]
            case Miscellaneous.BREAK:
                return [
                    (get_pc, read_data),
                    (push_stack, write_pc_high),
                    (push_stack, write_pc_low),
                    (push_stack, write_status),
                    (get_low_interrupt_vector, read_high_effective_address_byte),
                    (get_high_interrupt_vector, read_low_effective_address_byte),
                ]
            case Miscellaneous.RETURN_FROM_INTERRUPT:
                return [
                    (get_pc, read_data),
                    (pop_stack, read_data),
                    (pop_stack, operation),
                    (pop_stack, read_low_pc_address_byte),
                    (get_sp, read_high_pc_address_byte),
                ]
            case Miscellaneous.JUMP_ABSOLUTE:
                return [FETCH_LOW_EFFECTIVE_ADDRESS_BYTE, (get_pc, operation)]
            case Miscellaneous.JUMP_INDIRECT:
                return [
                    (get_pc, read_low_indirect_address_byte),
                    (get_pc, read_high_indirect_address_byte),
                    (get_indirect_low_address_byte, read_low_pc_address_byte),
                    (get_indirect_high_address_byte, read_high_pc_address_byte),
                ]
            case Miscellaneous.RETURN_FROM_SUBROUTINE:
                return [
                    (get_pc, read_data),
                    (pop_stack, read_data),
                    (pop_stack, read_low_pc_address_byte),
                    (get_sp, read_high_pc_address_byte),
                    (get_pc, read_data),
                ]
            case Miscellaneous.BRANCH:
                return [(get_pc, operation)]
        raise ValueError(f"unknown instruction kind: {self!r}")


class Read(Enum):
    """Instructions that read an operand from memory."""

    IMMEDIATE = auto()
    ZERO_PAGE = auto()
    ABSOLUTE = auto()
    INDIRECT_X = auto()
    INDIRECT_Y = auto()
    ABSOLUTE_X = auto()
    ABSOLUTE_Y = auto()
    ZERO_PAGE_X = auto()
    ZERO_PAGE_Y = auto()

    def cycles(self, operation: HalfCycle) -> List[Cycle]:
        """Cycles that follow the opcode fetch, ending with ``operation``."""
        match self:
            case Read.IMMEDIATE:
                return [(get_pc, operation)]
            case Read.ZERO_PAGE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    (get_effective_zero_page_address, operation),
                ]
            case Read.ABSOLUTE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    FETCH_HIGH_EFFECTIVE_ADDRESS_BYTE,
                    (get_effective_address, operation),
                ]
            case Read.INDIRECT_X:
                return [*_INDIRECT_X_ADDRESSING, (get_effective_address, operation)]
            case Read.INDIRECT_Y:
                return [
                    *_INDIRECT_Y_POINTER,
                    (get_y_indexed_base_address_with_carry, operation),
                ]
            case Read.ABSOLUTE_X:
                return [
                    (get_pc, read_low_base_address_byte),
                    (get_pc, read_high_base_address_byte),
                    (get_x_indexed_base_address_with_carry, operation),
                ]
            case Read.ABSOLUTE_Y:
                return [
                    (get_pc, read_low_base_address_byte),
                    (get_pc, read_high_base_address_byte),
                    (get_y_indexed_base_address_with_carry, operation),
                ]
            case Read.ZERO_PAGE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    (get_base_zero_page_address, read_data),
                    (get_effective_zero_page_x_indexed_address, operation),
                ]
            case Read.ZERO_PAGE_Y:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    (get_base_zero_page_address, read_data),
                    (get_effective_zero_page_y_indexed_address, operation),
                ]
        raise ValueError(f"unknown addressing mode: {self!r}")


class ReadModifyWrite(Enum):
    """Instructions that read, modify and write back a memory operand."""

    ZERO_PAGE = auto()
    ABSOLUTE = auto()
    ZERO_PAGE_X = auto()
    ABSOLUTE_X = auto()

    def cycles(self, operation: HalfCycle) -> List[Cycle]:
        """Cycles that follow the opcode fetch, ending with ``operation``."""
        match self:
            case ReadModifyWrite.ZERO_PAGE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    (get_effective_zero_page_address, read_data),
                    (get_effective_zero_page_address, write_data),
                    (get_effective_zero_page_address, operation),
                ]
            case ReadModifyWrite.ABSOLUTE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    FETCH_HIGH_EFFECTIVE_ADDRESS_BYTE,
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
            case ReadModifyWrite.ZERO_PAGE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    (get_base_zero_page_address, read_data),
                    (get_effective_zero_page_x_indexed_address, read_data),
                    (get_effective_zero_page_x_indexed_address, write_data),
                    (get_effective_zero_page_x_indexed_address, operation),
                ]
            case ReadModifyWrite.ABSOLUTE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    FETCH_HIGH_BASE_ADDRESS_BYTE,
                    (get_x_indexed_base_address_with_carry, read_data),
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
        raise ValueError(f"unknown addressing mode: {self!r}")


class SingleByte(Enum):
    """Implied and accumulator instructions with no operand bytes."""

    DEFAULT = auto()

    def cycles(self, operation: HalfCycle) -> List[Cycle]:
        """A single cycle running ``operation`` and then re-reading the opcode."""
        return [(operation, read_opcode)]


class Store(Enum):
    """Instructions that write a register to memory."""

    ZERO_PAGE = auto()
    ABSOLUTE = auto()
    INDIRECT_X = auto()
    INDIRECT_Y = auto()
    ABSOLUTE_X = auto()
    ABSOLUTE_Y = auto()
    ZERO_PAGE_X = auto()
    ZERO_PAGE_Y = auto()

    def cycles(self, operation: HalfCycle) -> List[Cycle]:
        """Cycles that follow the opcode fetch, ending with ``operation``."""
        match self:
            case Store.ZERO_PAGE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    (get_effective_zero_page_address, operation),
                ]
            case Store.ABSOLUTE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    FETCH_HIGH_EFFECTIVE_ADDRESS_BYTE,
                    (get_effective_address, operation),
                ]
            case Store.INDIRECT_X:
                return [*_INDIRECT_X_ADDRESSING, (get_effective_address, operation)]
            case Store.INDIRECT_Y:
                return [
                    *_INDIRECT_Y_POINTER,
                    (get_indirect_y_indexed_address, read_data),
                    (get_effective_address, operation),
                ]
            case Store.ABSOLUTE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    FETCH_HIGH_BASE_ADDRESS_BYTE,
                    (get_x_indexed_base_address_with_carry, read_data),
                    (get_effective_address, operation),
                ]
            case Store.ABSOLUTE_Y:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    FETCH_HIGH_BASE_ADDRESS_BYTE,
                    (get_y_indexed_base_address_with_carry, read_data),
                    (get_effective_address, operation),
                ]
            case Store.ZERO_PAGE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    (get_base_zero_page_address, read_data),
                    (get_effective_zero_page_x_indexed_address, operation),
                ]
            case Store.ZERO_PAGE_Y:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    (get_base_zero_page_address, read_data),
                    (get_effective_zero_page_y_indexed_address, operation),
                ]
        raise ValueError(f"unknown addressing mode: {self!r}")


class Unofficial(Enum):
    """Undocumented opcodes, mostly following the read-modify-write timing."""

    ZERO_PAGE = auto()
    ZERO_PAGE_X = auto()
    ABSOLUTE = auto()
    ABSOLUTE_X = auto()
    ABSOLUTE_Y = auto()
    INDIRECT_X = auto()
    INDIRECT_Y = auto()
    HALT = auto()

    def cycles(self, operation: HalfCycle) -> List[Cycle]:
        """Cycles that follow the opcode fetch, ending with ``operation``."""
        match self:
            case Unofficial.ZERO_PAGE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    (get_effective_zero_page_address, read_data),
                    (get_effective_zero_page_address, write_data),
                    (get_effective_zero_page_address, operation),
                ]
            case Unofficial.ZERO_PAGE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    (get_base_zero_page_address, read_data),
                    (get_effective_zero_page_x_indexed_address, read_data),
                    (get_effective_zero_page_x_indexed_address, write_data),
                    (get_effective_zero_page_x_indexed_address, operation),
                ]
            case Unofficial.ABSOLUTE:
                return [
                    FETCH_LOW_EFFECTIVE_ADDRESS_BYTE,
                    FETCH_HIGH_EFFECTIVE_ADDRESS_BYTE,
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
            case Unofficial.ABSOLUTE_X:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    FETCH_HIGH_BASE_ADDRESS_BYTE,
                    (get_x_indexed_base_address_with_carry, read_data),
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
            case Unofficial.ABSOLUTE_Y:
                return [
                    FETCH_LOW_BASE_ADDRESS_BYTE,
                    FETCH_HIGH_BASE_ADDRESS_BYTE,
                    (get_y_indexed_base_address_with_carry, read_data),
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
            case Unofficial.INDIRECT_X:
                return [
                    *_INDIRECT_X_ADDRESSING,
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
            case Unofficial.INDIRECT_Y:
                return [
                    *_INDIRECT_Y_POINTER,
                    (get_y_indexed_base_address_with_carry, read_data),
                    *_MODIFY_EFFECTIVE,
                    (get_effective_address, operation),
                ]
            case Unofficial.HALT:
                return [(nop, operation)]
        raise ValueError(f"unknown addressing mode: {self!r}")