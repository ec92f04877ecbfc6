import pytest

from greennes.emulator import (
    PROGRAM_HEADER_LENGTH,
    DebugLevel,
    load_program,
    run_emulator,
)
from greennes.errors import FileOpenFailed, MissingHeader, UnsupportedOpcodeError
from greennes.state import State

HEADER = b"NES\x1a" + bytes(12)


def _write_rom(tmp_path, program: bytes, name: str = "program.nes"):
    path = tmp_path / name
    path.write_bytes(HEADER + program)
    return path


# LDA #$42; STA $10; JAM
SIMPLE_PROGRAM = bytes([0xA9, 0x42, 0x85, 0x10, 0x02])

# Writes the test results to 0x02 and 0x03 like nestest and halts.
RESULT_PROGRAM = bytes(
    [
        0xA9, 0xFF,  # LDA #$FF
        0x85, 0x02,  # STA $02
        0xA9, 0x00,  # LDA #$00
        0x85, 0x02,  # STA $02
        0x85, 0x03,  # STA $03
        0x02,  # JAM
    ]
)


def test_header_length_bounds_the_loaded_program(tmp_path):
    assert PROGRAM_HEADER_LENGTH == 16
    exact = tmp_path / "exact.nes"
    exact.write_bytes(bytes([0x11]) * PROGRAM_HEADER_LENGTH + b"\xEA")
    state = load_program(State(), exact)
    assert state.memory[0xC000] == 0xEA
    assert state.memory[0xC001] == 0

    short = tmp_path / "short_by_one.nes"
    short.write_bytes(bytes(PROGRAM_HEADER_LENGTH - 1))
    with pytest.raises(MissingHeader):
        load_program(State(), short)


def test_load_program_places_code_at_start_address(tmp_path):
    path = _write_rom(tmp_path, SIMPLE_PROGRAM)
    state = load_program(State(), str(path))
    assert state.program_counter == (0xC0, 0x00)
    assert bytes(state.memory[0xC000:0xC005]) == SIMPLE_PROGRAM
    assert state.memory[0xC005] == 0


def test_load_program_skips_header(tmp_path):
    path = _write_rom(tmp_path, b"\xEA")
    state = load_program(State(), path)
    assert state.memory[0xC000] == 0xEA
    assert b"NES" not in bytes(state.memory)


def test_load_program_drops_bytes_past_end_of_memory(tmp_path):
    payload = bytes([0xAA]) * 0x4000 + b"\x55"
    path = _write_rom(tmp_path, payload)
    state = load_program(State(), path)
    assert state.memory[0xFFFF] == 0xAA
    assert state.memory[0x0000] == 0


def test_load_program_missing_file(tmp_path):
    with pytest.raises(FileOpenFailed) as info:
        load_program(State(), str(tmp_path / "absent.nes"))
    assert str(info.value).startswith("failed to open program file: ")


def test_load_program_short_file(tmp_path):
    path = tmp_path / "short.nes"
    path.write_bytes(b"NES\x1a")
    with pytest.raises(MissingHeader) as info:
        load_program(State(), path)
    assert str(info.value) == "the program header is missing"


def test_load_program_header_only_is_accepted(tmp_path):
    path = _write_rom(tmp_path, b"")
    state = load_program(State(), path)
    assert state.program_counter == (0xC0, 0x00)
    assert state.memory[0xC000] == 0


def test_run_simple_program(tmp_path):
    path = _write_rom(tmp_path, SIMPLE_PROGRAM)
    state = run_emulator(load_program(State(), path), DebugLevel.NONE)
    assert state.is_halted
    assert state.accumulator == 0x42
    assert state.memory[0x10] == 0x42
    assert state.half_cycle_count == 28
    assert state.program_counter == (0xC0, 0x05)


def test_run_reports_results_like_nestest(tmp_path):
    path = _write_rom(tmp_path, RESULT_PROGRAM)
    final_state = run_emulator(load_program(State(), path), DebugLevel.NONE)
    assert final_state.read_from_memory((0x00, 0x02)) == 0x00
    assert final_state.read_from_memory((0x00, 0x03)) == 0x00


def test_run_unsupported_opcode_raises(tmp_path):
    path = _write_rom(tmp_path, bytes([0x0B]))
    with pytest.raises(UnsupportedOpcodeError) as info:
        run_emulator(load_program(State(), path), DebugLevel.NONE)
    assert info.value.opcode == 0x0B


def test_low_debug_prints_one_line_per_instruction(tmp_path, capsys):
    path = _write_rom(tmp_path, SIMPLE_PROGRAM)
    run_emulator(load_program(State(), path), DebugLevel.LOW)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("C000  A9 42 85")
    assert lines[1].startswith("C002  85 10 02")
    assert lines[2].startswith("C004  02 00 00")


def test_none_debug_prints_nothing(tmp_path, capsys):
    path = _write_rom(tmp_path, SIMPLE_PROGRAM)
    run_emulator(load_program(State(), path), DebugLevel.NONE)
    assert capsys.readouterr().out == ""


def test_high_debug_prints_detail_lines(tmp_path, capsys):
    path = _write_rom(tmp_path, SIMPLE_PROGRAM)
    run_emulator(load_program(State(), path), DebugLevel.HIGH)
    lines = capsys.readouterr().out.splitlines()
    detail_lines = [line for line in lines if line]
    assert all("ADDR_BUS:" in line for line in detail_lines)
    # One detail line for each of the seven cycles, plus a blank line per fetch.
    assert len(detail_lines) == 7
    assert lines.count("") == 3


def test_debug_level_values():
    assert DebugLevel("low") is DebugLevel.LOW
    assert [level.value for level in DebugLevel] == ["none", "low", "high"]