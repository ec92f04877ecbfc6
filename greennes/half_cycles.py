"""Half-cycle steps that drive the address and data buses."""

from __future__ import annotations

from .state import STACK_PAGE_HIGH_ADDRESS, State


def get_pc(state: State) -> None:
    state.address_bus = state.program_counter
    state.increment_pc()


def get_pc_without_increment(state: State) -> None:
    state.address_bus = state.program_counter


def get_sp(state: State) -> None:
    state.address_bus = (STACK_PAGE_HIGH_ADDRESS, state.stack_pointer)


def push_stack(state: State) -> None:
    state.address_bus = (STACK_PAGE_HIGH_ADDRESS, state.stack_pointer)
    state.stack_pointer = (state.stack_pointer - 1) & 0xFF


def pop_stack(state: State) -> None:
    state.address_bus = (STACK_PAGE_HIGH_ADDRESS, state.stack_pointer)
    state.stack_pointer = (state.stack_pointer + 1) & 0xFF


def get_effective_address(state: State) -> None:
    state.address_bus = state.effective_address


def branch_across_page(state: State) -> None:
    high, low = state.effective_address
    new_address = ((high + 1) & 0xFF, low)
    state.effective_address = new_address
    state.address_bus = new_address
    state.program_counter = new_address


def get_effective_zero_page_address(state: State) -> None:
    state.address_bus = (0x00, state.effective_address[1])


def get_base_zero_page_address(state: State) -> None:
    state.address_bus = (0x00, state.base_address[1])


def get_effective_zero_page_x_indexed_address(state: State) -> None:
    state.address_bus = (0x00, (state.base_address[1] + state.x_index_register) & 0xFF)


def get_effective_zero_page_y_indexed_address(state: State) -> None:
    state.address_bus = (0x00, (state.base_address[1] + state.y_index_register) & 0xFF)


def get_indirect_x_indexed_low_address_byte(state: State) -> None:
    state.address_bus = (0x00, (state.base_address[1] + state.x_index_register) & 0xFF)


def get_indirect_x_indexed_high_address_byte(state: State) -> None:
    state.address_bus = (
        0x00,
        (state.base_address[1] + state.x_index_register + 1) & 0xFF,
    )


def get_indirect_low_address_byte(state: State) -> None:
    state.address_bus = state.indirect_address


def get_indirect_high_address_byte(state: State) -> None:
    high, low = state.indirect_address
    state.address_bus = (high, (low + 1) & 0xFF)


def get_indirect_zero_page_low_address_byte(state: State) -> None:
    state.address_bus = (0x00, state.indirect_address[1])


def get_indirect_zero_page_high_address_byte(state: State) -> None:
    state.address_bus = (0x00, (state.indirect_address[1] + 1) & 0xFF)


def get_indirect_y_indexed_address(state: State) -> None:
    high, low = state.base_address
    effective_low = (low + state.y_index_register) & 0xFF
    state.effective_address = (high, effective_low)
    state.address_bus = (high, effective_low)


def _indexed_with_carry(state: State, index: int) -> None:
    high, low = state.base_address
    total = low + index
    effective_low = total & 0xFF
    overflow = total > 0xFF
    # The bus carries the uncorrected high byte; the effective address is fixed up.
    state.address_bus = (high, effective_low)
    state.effective_address = ((high + overflow) & 0xFF, effective_low)
    state.crossed_page = overflow


def get_x_indexed_base_address_with_carry(state: State) -> None:
    """Index the base address by X; the bus high byte may be stale."""
    _indexed_with_carry(state, state.x_index_register)


def get_y_indexed_base_address_with_carry(state: State) -> None:
    """Index the base address by Y; the bus high byte may be stale."""
    _indexed_with_carry(state, state.y_index_register)


def get_low_interrupt_vector(state: State) -> None:
    state.address_bus = (0xFF, 0xFE)


def get_high_interrupt_vector(state: State) -> None:
    state.address_bus = (0xFF, 0xFF)


def read_opcode(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.data_bus = data
    state.instruction_register = data


def read_high_pc_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.program_counter = (data, state.program_counter[1])


def read_low_pc_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.program_counter = (state.program_counter[0], data)


def read_high_effective_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.effective_address = (data, state.effective_address[1])


def read_low_effective_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.effective_address = (state.effective_address[0], data)


def read_high_base_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.base_address = (data, state.base_address[1])


def read_low_base_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.base_address = (state.base_address[0], data)


def read_high_indirect_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.indirect_address = (data, state.indirect_address[1])


def read_low_indirect_address_byte(state: State) -> None:
    data = state.read_from_memory(state.address_bus)
    state.indirect_address = (state.indirect_address[0], data)


def read_data(state: State) -> None:
    state.read_from_memory(state.address_bus)


def write_data(state: State) -> None:
    state.write_to_memory(state.address_bus, state.data_bus)


def write_pc_high(state: State) -> None:
    state.write_to_memory(state.address_bus, state.program_counter[0])


def write_pc_low(state: State) -> None:
    state.write_to_memory(state.address_bus, state.program_counter[1])


def write_status(state: State) -> None:
    state.write_to_memory(state.address_bus, state.processor_status_register)