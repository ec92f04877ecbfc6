"""Decoding of opcodes into the cycles that execute them."""

from __future__ import annotations

from typing import Dict, List, Tuple, Union

from . import operations as ops
from .errors import UnsupportedOpcodeError
from .half_cycles import get_pc, read_opcode
from .instructions import (
    Miscellaneous,
    Read,
    ReadModifyWrite,
    SingleByte,
    Store,
    Unofficial,
)
from .state import Cycle, HalfCycle

FETCH_INSTRUCTION: Cycle = (get_pc, read_opcode)

_Kind = Union[Miscellaneous, Read, ReadModifyWrite, SingleByte, Store, Unofficial]

_IMPLIED = SingleByte.DEFAULT

_OPCODES: Dict[int, Tuple[_Kind, HalfCycle]] = {
    0x00: (Miscellaneous.BREAK, ops.nop),
    0x01: (Read.INDIRECT_X, ops.ora),
    0x02: (Unofficial.HALT, ops.jam),
    0x03: (Unofficial.INDIRECT_X, ops.slo),
    0x04: (Read.ZERO_PAGE, ops.nop),
    0x05: (Read.ZERO_PAGE, ops.ora),
    0x06: (ReadModifyWrite.ZERO_PAGE, ops.asl),
    0x07: (Unofficial.ZERO_PAGE, ops.slo),
    0x08: (Miscellaneous.PUSH, ops.php),
    0x09: (Read.IMMEDIATE, ops.ora),
    0x0A: (_IMPLIED, ops.asl_accumulator),
    0x0C: (Read.ABSOLUTE, ops.nop),
    0x0D: (Read.ABSOLUTE, ops.ora),
    0x0E: (ReadModifyWrite.ABSOLUTE, ops.asl),
    0x0F: (Unofficial.ABSOLUTE, ops.slo),
    0x10: (Miscellaneous.BRANCH, ops.bpl),
    0x11: (Read.INDIRECT_Y, ops.ora_indirect_y),
    0x12: (Unofficial.HALT, ops.jam),
    0x13: (Unofficial.INDIRECT_Y, ops.slo),
    0x14: (Read.ZERO_PAGE_X, ops.nop),
    0x15: (Read.ZERO_PAGE_X, ops.ora),
    0x16: (ReadModifyWrite.ZERO_PAGE_X, ops.asl),
    0x17: (Unofficial.ZERO_PAGE_X, ops.slo),
    0x18: (_IMPLIED, ops.clc),
    0x19: (Read.ABSOLUTE_Y, ops.ora),
    0x1A: (_IMPLIED, ops.nop),
    0x1B: (Unofficial.ABSOLUTE_Y, ops.slo),
    0x1C: (Read.ABSOLUTE_X, ops.nop_absolute_indexed),
    0x1D: (Read.ABSOLUTE_X, ops.ora_absolute_indexed),
    0x1E: (ReadModifyWrite.ABSOLUTE_X, ops.asl),
    0x1F: (Unofficial.ABSOLUTE_X, ops.slo),
    0x20: (Miscellaneous.JUMP_TO_SUBROUTINE, ops.jsr),
    0x21: (Read.INDIRECT_X, ops.and_),
    0x22: (Unofficial.HALT, ops.jam),
    0x23: (Unofficial.INDIRECT_X, ops.rla),
    0x24: (Read.ZERO_PAGE, ops.bit),
    0x25: (Read.ZERO_PAGE, ops.and_),
    0x26: (ReadModifyWrite.ZERO_PAGE, ops.rol),
    0x27: (Unofficial.ZERO_PAGE, ops.rla),
    0x28: (Miscellaneous.PULL, ops.plp),
    0x29: (Read.IMMEDIATE, ops.and_),
    0x2A: (_IMPLIED, ops.rol_accumulator),
    0x2C: (Read.ABSOLUTE, ops.bit),
    0x2D: (Read.ABSOLUTE, ops.and_),
    0x2E: (ReadModifyWrite.ABSOLUTE, ops.rol),
    0x2F: (Unofficial.ABSOLUTE, ops.rla),
    0x30: (Miscellaneous.BRANCH, ops.bmi),
    0x31: (Read.INDIRECT_Y, ops.and_indirect_y),
    0x32: (Unofficial.HALT, ops.jam),
    0x33: (Unofficial.INDIRECT_Y, ops.rla),
    0x34: (Read.ZERO_PAGE_X, ops.nop),
    0x35: (Read.ZERO_PAGE_X, ops.and_),
    0x36: (ReadModifyWrite.ZERO_PAGE_X, ops.rol),
    0x37: (Unofficial.ZERO_PAGE_X, ops.rla),
    0x38: (_IMPLIED, ops.sec),
    0x39: (Read.ABSOLUTE_Y, ops.and_),
    0x3A: (_IMPLIED, ops.nop),
    0x3B: (Unofficial.ABSOLUTE_Y, ops.rla),
    0x3C: (Read.ABSOLUTE_X, ops.nop_absolute_indexed),
    0x3D: (Read.ABSOLUTE_X, ops.and_absolute_indexed),
    0x3E: (ReadModifyWrite.ABSOLUTE_X, ops.rol),
    0x3F: (Unofficial.ABSOLUTE_X, ops.rla),
    0x40: (Miscellaneous.RETURN_FROM_INTERRUPT, ops.rti),
    0x41: (Read.INDIRECT_X, ops.eor),
    0x42: (Unofficial.HALT, ops.jam),
    0x43: (Unofficial.INDIRECT_X, ops.sre),
    0x44: (Read.ZERO_PAGE, ops.nop),
    0x45: (Read.ZERO_PAGE, ops.eor),
    0x46: (ReadModifyWrite.ZERO_PAGE, ops.lsr),
    0x47: (Unofficial.ZERO_PAGE, ops.sre),
    0x48: (Miscellaneous.PUSH, ops.pha),
    0x49: (Read.IMMEDIATE, ops.eor),
    0x4A: (_IMPLIED, ops.lsr_accumulator),
    0x4C: (Miscellaneous.JUMP_ABSOLUTE, ops.jmp_absolute),
    0x4D: (Read.ABSOLUTE, ops.eor),
    0x4E: (ReadModifyWrite.ABSOLUTE, ops.lsr),
    0x4F: (Unofficial.ABSOLUTE, ops.sre),
    0x50: (Miscellaneous.BRANCH, ops.bvc),
    0x51: (Read.INDIRECT_Y, ops.eor_indirect_y),
    0x52: (Unofficial.HALT, ops.jam),
    0x53: (Unofficial.INDIRECT_Y, ops.sre),
    0x54: (Read.ZERO_PAGE_X, ops.nop),
    0x55: (Read.ZERO_PAGE_X, ops.eor),
    0x56: (ReadModifyWrite.ZERO_PAGE_X, ops.lsr),
    0x57: (Unofficial.ZERO_PAGE_X, ops.sre),
    0x58: (_IMPLIED, ops.cli),
    0x59: (Read.ABSOLUTE_Y, ops.eor),
    0x5A: (_IMPLIED, ops.nop),
    0x5B: (Unofficial.ABSOLUTE_Y, ops.sre),
    0x5C: (Read.ABSOLUTE_X, ops.nop_absolute_indexed),
    0x5D: (Read.ABSOLUTE_X, ops.eor_absolute_indexed),
    0x5E: (ReadModifyWrite.ABSOLUTE_X, ops.lsr),
    0x5F: (Unofficial.ABSOLUTE_X, ops.sre),
    # RTS and JMP (indirect) do all their work in the addressing cycles.
    0x60: (Miscellaneous.RETURN_FROM_SUBROUTINE, ops.nop),
    0x61: (Read.INDIRECT_X, ops.adc),
    0x62: (Unofficial.HALT, ops.jam),
    0x63: (Unofficial.INDIRECT_X, ops.rra),
    0x64: (Read.ZERO_PAGE, ops.nop),
    0x65: (Read.ZERO_PAGE, ops.adc),
    0x66: (ReadModifyWrite.ZERO_PAGE, ops.ror),
    0x67: (Unofficial.ZERO_PAGE, ops.rra),
    0x68: (Miscellaneous.PULL, ops.pla),
    0x69: (Read.IMMEDIATE, ops.adc),
    0x6A: (_IMPLIED, ops.ror_accumulator),
    0x6C: (Miscellaneous.JUMP_INDIRECT, ops.nop),
    0x6D: (Read.ABSOLUTE, ops.adc),
    0x6E: (ReadModifyWrite.ABSOLUTE, ops.ror),
    0x6F: (Unofficial.ABSOLUTE, ops.rra),
    0x70: (Miscellaneous.BRANCH, ops.bvs),
    0x71: (Read.INDIRECT_Y, ops.adc_indirect_y),
    0x72: (Unofficial.HALT, ops.jam),
    0x73: (Unofficial.INDIRECT_Y, ops.rra),
    0x74: (Read.ZERO_PAGE_X, ops.nop),
    0x75: (Read.ZERO_PAGE_X, ops.adc),
    0x76: (ReadModifyWrite.ZERO_PAGE_X, ops.ror),
    0x77: (Unofficial.ZERO_PAGE_X, ops.rra),
    0x78: (_IMPLIED, ops.sei),
    0x79: (Read.ABSOLUTE_Y, ops.adc),
    0x7A: (_IMPLIED, ops.nop),
    0x7B: (Unofficial.ABSOLUTE_Y, ops.rra),
    0x7C: (Read.ABSOLUTE_X, ops.nop_absolute_indexed),
    0x7D: (Read.ABSOLUTE_X, ops.adc_absolute_indexed),
    0x7E: (ReadModifyWrite.ABSOLUTE_X, ops.ror),
    0x7F: (Unofficial.ABSOLUTE_X, ops.rra),
    0x80: (Read.IMMEDIATE, ops.nop),
    0x81: (Store.INDIRECT_X, ops.sta),
    0x82: (Read.IMMEDIATE, ops.nop),
    0x83: (Store.INDIRECT_X, ops.sax),
    0x84: (Store.ZERO_PAGE, ops.sty),
    0x85: (Store.ZERO_PAGE, ops.sta),
    0x86: (Store.ZERO_PAGE, ops.stx),
    0x87: (Store.ZERO_PAGE, ops.sax),
    0x88: (_IMPLIED, ops.dey),
    0x89: (Read.IMMEDIATE, ops.nop),
    0x8A: (_IMPLIED, ops.txa),
    0x8C: (Store.ABSOLUTE, ops.sty),
    0x8D: (Store.ABSOLUTE, ops.sta),
    0x8E: (Store.ABSOLUTE, ops.stx),
    0x8F: (Store.ABSOLUTE, ops.sax),
    0x90: (Miscellaneous.BRANCH, ops.bcc),
    0x91: (Store.INDIRECT_Y, ops.sta),
    0x92: (Unofficial.HALT, ops.jam),
    0x94: (Store.ZERO_PAGE_X, ops.sty),
    0x95: (Store.ZERO_PAGE_X, ops.sta),
    0x96: (Store.ZERO_PAGE_Y, ops.stx),
    0x97: (Store.ZERO_PAGE_Y, ops.sax),
    0x98: (_IMPLIED, ops.tya),
    0x99: (Store.ABSOLUTE_Y, ops.sta),
    0x9A: (_IMPLIED, ops.txs),
    0x9D: (Store.ABSOLUTE_X, ops.sta),
    0xA0: (Read.IMMEDIATE, ops.ldy),
    0xA1: (Read.INDIRECT_X, ops.lda),
    0xA2: (Read.IMMEDIATE, ops.ldx),
    0xA3: (Read.INDIRECT_X, ops.lax),
    0xA4: (Read.ZERO_PAGE, ops.ldy),
    0xA5: (Read.ZERO_PAGE, ops.lda),
    0xA6: (Read.ZERO_PAGE, ops.ldx),
    0xA7: (Read.ZERO_PAGE, ops.lax),
    0xA8: (_IMPLIED, ops.tay),
    0xA9: (Read.IMMEDIATE, ops.lda),
    0xAA: (_IMPLIED, ops.tax),
    0xAC: (Read.ABSOLUTE, ops.ldy),
    0xAD: (Read.ABSOLUTE, ops.lda),
    0xAE: (Read.ABSOLUTE, ops.ldx),
    0xAF: (Read.ABSOLUTE, ops.lax),
    0xB0: (Miscellaneous.BRANCH, ops.bcs),
    0xB1: (Read.INDIRECT_Y, ops.lda_indirect_y),
    0xB2: (Unofficial.HALT, ops.jam),
    0xB3: (Read.INDIRECT_Y, ops.lax_indirect_y),
    0xB4: (Read.ZERO_PAGE_X, ops.ldy),
    0xB5: (Read.ZERO_PAGE_X, ops.lda),
    0xB6: (Read.ZERO_PAGE_Y, ops.ldx),
    0xB7: (Read.ZERO_PAGE_Y, ops.lax),
    0xB8: (_IMPLIED, ops.clv),
    0xB9: (Read.ABSOLUTE_Y, ops.lda_absolute_indexed),
    0xBA: (_IMPLIED, ops.tsx),
    0xBC: (Read.ABSOLUTE_X, ops.ldy_absolute_indexed),
    0xBD: (Read.ABSOLUTE_X, ops.lda_absolute_indexed),
    0xBE: (Read.ABSOLUTE_Y, ops.ldx_absolute_indexed),
    0xBF: (Read.ABSOLUTE_Y, ops.lax_absolute_indexed),
    0xC0: (Read.IMMEDIATE, ops.cpy),
    0xC1: (Read.INDIRECT_X, ops.cmp),
    0xC2: (Read.IMMEDIATE, ops.nop),
    0xC3: (Unofficial.INDIRECT_X, ops.dcp),
    0xC4: (Read.ZERO_PAGE, ops.cpy),
    0xC5: (Read.ZERO_PAGE, ops.cmp),
    0xC6: (ReadModifyWrite.ZERO_PAGE, ops.dec),
    0xC7: (Unofficial.ZERO_PAGE, ops.dcp),
    0xC8: (_IMPLIED, ops.iny),
    0xC9: (Read.IMMEDIATE, ops.cmp),
    0xCA: (_IMPLIED, ops.dex),
    0xCC: (Read.ABSOLUTE, ops.cpy),
    0xCD: (Read.ABSOLUTE, ops.cmp),
    0xCE: (ReadModifyWrite.ABSOLUTE, ops.dec),
    0xCF: (Unofficial.ABSOLUTE, ops.dcp),
    0xD0: (Miscellaneous.BRANCH, ops.bne),
    0xD1: (Read.INDIRECT_Y, ops.cmp_indirect_y),
    0xD2: (Unofficial.HALT, ops.jam),
    0xD3: (Unofficial.INDIRECT_Y, ops.dcp),
    0xD4: (Read.ZERO_PAGE_X, ops.nop),
    0xD5: (Read.ZERO_PAGE_X, ops.cmp),
    0xD6: (ReadModifyWrite.ZERO_PAGE_X, ops.dec),
    0xD7: (Unofficial.ZERO_PAGE_X, ops.dcp),
    0xD8: (_IMPLIED, ops.cld),
    0xD9: (Read.ABSOLUTE_Y, ops.cmp),
    0xDA: (_IMPLIED, ops.nop),
    0xDB: (Unofficial.ABSOLUTE_Y, ops.dcp),
    0xDC: (Read.ABSOLUTE_X, ops.nop_absolute_indexed),
    0xDD: (Read.ABSOLUTE_X, ops.cmp_absolute_indexed),
    0xDE: (ReadModifyWrite.ABSOLUTE_X, ops.dec),
    0xDF: (Unofficial.ABSOLUTE_X, ops.dcp),
    0xE0: (Read.IMMEDIATE, ops.cpx),
    0xE1: (Read.INDIRECT_X, ops.sbc),
    0xE2: (Read.IMMEDIATE, ops.nop),
    0xE3: (Unofficial.INDIRECT_X, ops.isc),
    0xE4: (Read.ZERO_PAGE, ops.cpx),
    0xE5: (Read.ZERO_PAGE, ops.sbc),
    0xE6: (ReadModifyWrite.ZERO_PAGE, ops.inc),
    0xE7: (Unofficial.ZERO_PAGE, ops.isc),
    0xE8: (_IMPLIED, ops.inx),
    0xE9: (Read.IMMEDIATE, ops.sbc),
    0xEA: (_IMPLIED, ops.nop),
    0xEB: (Read.IMMEDIATE, ops.usbc),
    0xEC: (Read.ABSOLUTE, ops.cpx),
    0xED: (Read.ABSOLUTE, ops.sbc),
    0xEE: (ReadModifyWrite.ABSOLUTE, ops.inc),
    0xEF: (Unofficial.ABSOLUTE, ops.isc),
    0xF0: (Miscellaneous.BRANCH, ops.beq),
    0xF1: (Read.INDIRECT_Y, ops.sbc_indirect_y),
    0xF2: (Unofficial.HALT, ops.jam),
    0xF3: (Unofficial.INDIRECT_Y, ops.isc),
    0xF4: (Read.ZERO_PAGE_X, ops.nop),
    0xF5: (Read.ZERO_PAGE_X, ops.sbc),
    0xF6: (ReadModifyWrite.ZERO_PAGE_X, ops.inc),
    0xF7: (Unofficial.ZERO_PAGE_X, ops.isc),
    0xF8: (_IMPLIED, ops.sed),
    0xF9: (Read.ABSOLUTE_Y, ops.sbc),
    0xFA: (_IMPLIED, ops.nop),
    0xFB: (Unofficial.ABSOLUTE_Y, ops.isc),
    0xFC: (Read.ABSOLUTE_X, ops.nop_absolute_indexed),
    0xFD: (Read.ABSOLUTE_X, ops.sbc_absolute_indexed),
    0xFE: (ReadModifyWrite.ABSOLUTE_X, ops.inc),
    0xFF: (Unofficial.ABSOLUTE_X, ops.isc),
}


def get_cycles(opcode: int) -> List[Cycle]:
    """Return the cycles that execute ``opcode`` after it has been fetched.

    Raises ``ValueError`` for values outside a byte and
    ``UnsupportedOpcodeError`` for opcodes the emulator does not implement.
    """
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode out of range: {opcode!r}")
    try:
        kind, operation = _OPCODES[opcode]
    except KeyError:
        raise UnsupportedOpcodeError(opcode) from None
    return kind.cycles(operation)