# greennes

A 6502 CPU emulator for NES program images. Each instruction runs as a
series of clock cycles. Each cycle has two phases. The first phase puts an
address on the address bus. The second phase reads or writes data on the
data bus. The per-instruction trace is laid out like the `nestest`
reference log.

The official 6502 instruction set is supported. Most of the common
unofficial opcodes are supported too: `LAX`, `SAX`, `DCP`, `ISC`, `SLO`,
`RLA`, `SRE`, `RRA`, `USBC`, the extra `NOP`s, and the `JAM` opcodes that
halt the processor. The unstable opcodes `0x0B`, `0x2B`, `0x4B`, `0x6B`,
`0x8B`, `0x93`, `0x9B`, `0x9C`, `0x9E`, `0x9F`, `0xAB`, `0xBB` and `0xCB`
are not implemented. Fetching any of them raises `UnsupportedOpcodeError`.

## Installation

```
pip install .
```

## Command line

Run a program image:

```
greennes run path/to/program.nes
```

The command loads the image as follows:

- It skips the first 16 bytes, which form the header.
- It copies the rest of the file into memory starting at `0xC000`.
- It drops any bytes that would fall past `0xFFFF`.

Execution starts at `0xC000`. The run ends only when a `JAM` opcode halts
the processor. When it ends, the command prints:

- the number of cycles completed,
- the final CPU state as a trace line,
- the two bytes at `0x02` and `0x03`. `nestest` uses these to report
  failures, and `0x00, 0x00` means every test passed.

Use `-d` / `--debug` (`none`, `low` or `high`; the default is `none`) to
trace execution:

- `-d low` prints one trace line before each instruction fetch:

  ```
  greennes -d low run path/to/nestest.nes > nestest.out
  ```

- `-d high` prints a detailed line before every cycle. That line shows the
  program counter, the address and data buses, the registers and the bytes
  around the stack pointer. Each instruction fetch is also preceded by a
  blank line.

The command exits with status 1, and prints a message to standard error,
when either of these happens:

- the file cannot be read, or is shorter than its header;
- an unsupported opcode is reached.

## Library use

```python
from greennes.emulator import DebugLevel, load_program, run_emulator
from greennes.state import State

state = load_program(State(), "path/to/nestest.nes")
final = run_emulator(state, DebugLevel.NONE)

print(final.half_cycle_count // 2, "cycles")
print(final.trace())
print(hex(final.read_from_memory((0x00, 0x02))))
```

### Modules

- `greennes.state.State` holds the machine state:
  - the registers and the buses;
  - 64 KiB of memory (`memory`, a `bytearray`);
  - the queue of pending cycles.

  Its methods `read_from_memory(address)` and `write_to_memory(address, data)` take addresses as `(high, low)` byte pairs. It exposes the status flags as read/write properties: `carry`, `zero`, `interrupt_disable`, `decimal_mode`, `break_flag`, `overflow` and `negative`. It has two text views: `trace()` gives the short per-instruction line, and `detail()` (also `str(state)`) gives the full bus view.
- `greennes.emulator`:
  - `load_program(state, path)` raises `FileOpenFailed` or `MissingHeader`.
  - `run_emulator(state, debug_level)` runs until halted and returns the state.
  - `DebugLevel` has the members `NONE`, `LOW` and `HIGH`.
- `greennes.cycles.get_cycles(opcode)` returns the cycles that run an opcode once it has been fetched.
- `greennes.instructions` holds the cycle sequences for each instruction family and addressing mode: `Read`, `Store`, `ReadModifyWrite`, `SingleByte`, `Miscellaneous` and `Unofficial`.
- `greennes.operations` holds the operation performed by each instruction.
- `greennes.half_cycles` holds the individual bus steps.
- `greennes.errors` defines these exceptions:
  - `EmuError`, the base class;
  - `LoadError`, with the subclasses `FileOpenFailed`, `MissingHeader` and `ProgramTooLarge`;
  - `UnsupportedOpcodeError`.

  `ProgramTooLarge` is defined but not raised by the loader, which truncates oversized images instead.

## What it does not do

Only the CPU is emulated. The package provides none of the following:

- picture output, sound output or controller input;
- cartridge mappers; the header is not examined;
- NMI or IRQ interrupt handling;
- a stop condition other than a `JAM` opcode, so a program that never halts runs forever.

## Running the tests

```
pip install ".[test]"
pytest
```