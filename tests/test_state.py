import pytest

from greennes.state import MEMORY_LENGTH, State

FLAGS = [
    "negative",
    "overflow",
    "break_flag",
    "decimal_mode",
    "interrupt_disable",
    "zero",
    "carry",
]


def test_default_registers():
    state = State()
    assert state.stack_pointer == 0xFD
    assert state.processor_status_register == 0b0010_0100
    assert len(state.memory) == MEMORY_LENGTH
    assert len(state.cycle_queue) == 0
    assert state.is_halted is False


def test_default_flags():
    state = State()
    assert state.interrupt_disable is True
    assert [getattr(state, name) for name in FLAGS if name != "interrupt_disable"] == [
        False
    ] * 6


def test_write_then_read_round_trip():
    state = State()
    state.write_to_memory((0x12, 0x34), 0xAB)
    assert state.data_bus == 0xAB
    state.data_bus = 0
    assert state.read_from_memory((0x12, 0x34)) == 0xAB
    assert state.data_bus == 0xAB


def test_high_and_low_bytes_address_distinct_cells():
    state = State()
    state.write_to_memory((0x00, 0x02), 0x11)
    state.write_to_memory((0x02, 0x00), 0x22)
    assert state.read_from_memory((0x00, 0x02)) == 0x11
    assert state.read_from_memory((0x02, 0x00)) == 0x22


def test_last_memory_cell_is_addressable():
    state = State()
    state.write_to_memory((0xFF, 0xFF), 0x7E)
    assert state.read_from_memory((0xFF, 0xFF)) == 0x7E


def test_increment_pc_carries_into_high_byte():
    state = State(program_counter=(0x12, 0xFF))
    state.increment_pc()
    assert state.program_counter == (0x13, 0x00)


def test_increment_pc_wraps_at_end_of_memory():
    state = State(program_counter=(0xFF, 0xFF))
    state.increment_pc()
    assert state.program_counter == (0, 0)


def test_stack_push_pop_round_trip():
    state = State()
    original = state.stack_pointer
    state.push_stack()
    assert state.stack_pointer < original
    state.pop_stack()
    assert state.stack_pointer == original


def test_stack_push_wraps():
    state = State(stack_pointer=0)
    state.push_stack()
    assert state.stack_pointer == 0xFF
    state.pop_stack()
    assert state.stack_pointer == 0


@pytest.mark.parametrize("name", FLAGS)
def test_flag_set_and_clear(name):
    state = State()
    others = {other: getattr(state, other) for other in FLAGS if other != name}
    setattr(state, name, True)
    assert getattr(state, name) is True
    setattr(state, name, False)
    assert getattr(state, name) is False
    assert {other: getattr(state, other) for other in others} == others


def test_all_flags_set_fill_status_register():
    state = State()
    for name in FLAGS:
        setattr(state, name, True)
    assert state.processor_status_register == 0xFF


def test_flags_do_not_touch_unused_bit():
    state = State()
    for name in FLAGS:
        setattr(state, name, False)
    assert state.processor_status_register == 0x20


def _loaded_state():
    state = State(program_counter=(0xC0, 0x00), half_cycle_count=14)
    for offset, value in enumerate((0x4C, 0xF5, 0xC5)):
        state.write_to_memory((0xC0, offset), value)
    state.address_bus = (0xC0, 0x00)
    state.data_bus = 0x4C
    state.instruction_register = 0x4C
    return state


def test_trace_format():
    state = _loaded_state()
    assert state.trace() == (
        "C000  4C F5 C5  \t\t\t\t\tA:00 X:00 Y:00 P:24 SP:FD CYC:7"
    )


def test_detail_format_and_str():
    state = _loaded_state()
    expected = (
        "C000 [4C F5 C5] ADDR_BUS: C000 [4C F5 C5] DATA_BUS: 4C "
        "IR:4C A:00 X:00 Y:00 P:24 SP:FD [00 00 00] CYC:7"
    )
    assert state.detail() == expected
    assert str(state) == expected


def test_trace_memory_window_wraps():
    state = State(program_counter=(0xFF, 0xFF))
    state.write_to_memory((0xFF, 0xFF), 0x11)
    state.write_to_memory((0x00, 0x00), 0x22)
    state.write_to_memory((0x00, 0x01), 0x33)
    assert state.trace().startswith("FFFF  11 22 33")


def test_trace_reports_registers():
    state = State(accumulator=0x5A, x_index_register=0x3C, y_index_register=0x7F)
    line = state.trace()
    assert "A:5A X:3C Y:7F" in line
    assert line.endswith("CYC:0")