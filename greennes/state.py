"""CPU registers, buses and memory of the emulated 6502."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Tuple

MAX_MEMORY_ADDRESS = 0xFFFF
PROGRAM_START_ADDRESS = 0xC000
STACK_PAGE_HIGH_ADDRESS = 0x01
MEMORY_LENGTH = MAX_MEMORY_ADDRESS + 1

Address = Tuple[int, int]
HalfCycle = Callable[["State"], None]
Cycle = Tuple[HalfCycle, HalfCycle]

_NEGATIVE = 0b1000_0000
_OVERFLOW = 0b0100_0000
_BREAK = 0b0001_0000
_DECIMAL = 0b0000_1000
_INTERRUPT = 0b0000_0100
_ZERO = 0b0000_0010
_CARRY = 0b0000_0001


def _join(address: Address) -> int:
    high, low = address
    return (high << 8) | low


def _split(value: int) -> Address:
    value &= 0xFFFF
    return (value >> 8, value & 0xFF)


@dataclass
class State:
    """Complete machine state: registers, buses, memory and pending cycles."""

    cycle_queue: Deque[Cycle] = field(default_factory=deque, repr=False)
    half_cycle_count: int = 0
    is_halted: bool = False
    memory: bytearray = field(
        default_factory=lambda: bytearray(MEMORY_LENGTH), repr=False
    )
    crossed_page: bool = False
    accumulator: int = 0
    x_index_register: int = 0
    y_index_register: int = 0
    program_counter: Address = (0, 0)
    stack_pointer: int = 0xFD
    processor_status_register: int = 0b0010_0100  # NV1B_DIZC
    instruction_register: int = 0
    address_bus: Address = (0, 0)
    data_bus: int = 0
    base_address: Address = (0, 0)
    effective_address: Address = (0, 0)
    indirect_address: Address = (0, 0)

    def _get_flag(self, mask: int) -> bool:
        return bool(self.processor_status_register & mask)

    def _set_flag(self, mask: int, value: bool) -> None:
        if value:
            self.processor_status_register |= mask
        else:
            self.processor_status_register &= ~mask & 0xFF

    @property
    def negative(self) -> bool:
        """Negative (N) flag."""
        return self._get_flag(_NEGATIVE)

    @negative.setter
    def negative(self, value: bool) -> None:
        self._set_flag(_NEGATIVE, value)

    @property
    def overflow(self) -> bool:
        """Overflow (V) flag."""
        return self._get_flag(_OVERFLOW)

    @overflow.setter
    def overflow(self, value: bool) -> None:
        self._set_flag(_OVERFLOW, value)

    @property
    def break_flag(self) -> bool:
        """Break (B) flag."""
        return self._get_flag(_BREAK)

    @break_flag.setter
    def break_flag(self, value: bool) -> None:
        self._set_flag(_BREAK, value)

    @property
    def decimal_mode(self) -> bool:
        """Decimal mode (D) flag."""
        return self._get_flag(_DECIMAL)

    @decimal_mode.setter
    def decimal_mode(self, value: bool) -> None:
        self._set_flag(_DECIMAL, value)

    @property
    def interrupt_disable(self) -> bool:
        """Interrupt disable (I) flag."""
        return self._get_flag(_INTERRUPT)

    @interrupt_disable.setter
    def interrupt_disable(self, value: bool) -> None:
        self._set_flag(_INTERRUPT, value)

    @property
    def zero(self) -> bool:
        """Zero (Z) flag."""
        return self._get_flag(_ZERO)

    @zero.setter
    def zero(self, value: bool) -> None:
        self._set_flag(_ZERO, value)

    @property
    def carry(self) -> bool:
        """Carry (C) flag."""
        return self._get_flag(_CARRY)

    @carry.setter
    def carry(self, value: bool) -> None:
        self._set_flag(_CARRY, value)

    def read_from_memory(self, address: Address) -> int:
        """Read a byte, placing it on the data bus."""
        data = self.memory[_join(address)]
        self.data_bus = data
        return data

    def write_to_memory(self, address: Address, data: int) -> None:
        """Write a byte, placing it on the data bus."""
        self.data_bus = data
        self.memory[_join(address)] = data

    def increment_pc(self) -> None:
        """Advance the program counter by one, wrapping at 0xFFFF."""
        self.program_counter = _split(_join(self.program_counter) + 1)

    def push_stack(self) -> None:
        """Move the stack pointer down by one byte."""
        self.stack_pointer = (self.stack_pointer - 1) & 0xFF

    def pop_stack(self) -> None:
        """Move the stack pointer up by one byte."""
        self.stack_pointer = (self.stack_pointer + 1) & 0xFF

    def _peek3(self, start: int) -> str:
        return " ".join(
            f"{self.memory[(start + offset) & 0xFFFF]:02X}" for offset in range(3)
        )

    def trace(self) -> str:
        """Short one-line trace in the style of a CPU log."""
        pch, pcl = self.program_counter
        return (
            f"{pch:02X}{pcl:02X}  {self._peek3(_join(self.program_counter))}  "
            f"\t\t\t\t\tA:{self.accumulator:02X} X:{self.x_index_register:02X} "
            f"Y:{self.y_index_register:02X} P:{self.processor_status_register:02X} "
            f"SP:{self.stack_pointer:02X} CYC:{self.half_cycle_count // 2}"
        )

    def detail(self) -> str:
        """Detailed one-line dump including the buses and stack."""
        pch, pcl = self.program_counter
        abh, abl = self.address_bus
        stack_start = _join((0x10, self.stack_pointer))
        return (
            f"{pch:02X}{pcl:02X} [{self._peek3(_join(self.program_counter))}] "
            f"ADDR_BUS: {abh:02X}{abl:02X} [{self._peek3(_join(self.address_bus))}] "
            f"DATA_BUS: {self.data_bus:02X} "
            f"IR:{self.instruction_register:02X} A:{self.accumulator:02X} "
            f"X:{self.x_index_register:02X} Y:{self.y_index_register:02X} "
            f"P:{self.processor_status_register:02X} SP:{self.stack_pointer:02X} "
            f"[{self._peek3(stack_start)}] "
            f"CYC:{self.half_cycle_count // 2}"
        )

    def __str__(self) -> str:
        return self.detail()