"""Exceptions raised while loading and running programs."""


class EmuError(Exception):
    """Base class for every emulator failure."""


class LoadError(EmuError):
    """A program image could not be loaded into memory."""


class ProgramTooLarge(LoadError):
    """The program does not fit into the addressable memory."""

    def __init__(self, maximum_size: int) -> None:
        self.maximum_size = maximum_size
        super().__init__(
            f"program is too large (exceeds maximum size of {maximum_size} bytes)"
        )


class FileOpenFailed(LoadError):
    """The program file could not be read."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"failed to open program file: {message}")


class MissingHeader(LoadError):
    """The program file is shorter than its header."""

    def __init__(self) -> None:
        super().__init__("the program header is missing")


class UnsupportedOpcodeError(EmuError):
    """The CPU fetched an opcode that the emulator does not implement."""

    def __init__(self, opcode: int) -> None:
        self.opcode = opcode
        super().__init__(f"Opcode 0x{opcode:02X} not implemented")