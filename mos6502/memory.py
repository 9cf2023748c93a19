"""Flat 64 KiB address space of the 6502 and little-endian address helpers."""

START_SP = 0x01FF
START_PC = 0xFFFC
START_RESET = 0x01FF

CLOCK_SPEED = 1_000_000
NES_CLOCK_SPEED = 1_789_773

MAX_MEMORY = 1024 * 64

_ADDRESS_MASK = 0xFFFF
_BYTE_MASK = 0xFF


def low_byte(address: int) -> int:
    """Return the low byte of a 16-bit address."""
    return address & _BYTE_MASK


def high_byte(address: int) -> int:
    """Return the high byte of a 16-bit address."""
    return (address >> 8) & _BYTE_MASK


class Memory:
    """64 KiB of byte-addressable RAM; addresses wrap at 16 bits."""

    MAX_MEMORY = MAX_MEMORY

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = bytearray(MAX_MEMORY)
        self.init()

    def init(self) -> None:
        """Clear every byte and store the reset vector at START_PC."""
        self._data[:] = bytes(MAX_MEMORY)
        self._data[START_PC] = low_byte(START_RESET)
        self._data[START_PC + 1] = high_byte(START_RESET)

    def read(self, addr: int) -> int:
        """Return the byte stored at ``addr``."""
        return self._data[addr & _ADDRESS_MASK]

    def write(self, addr: int, value: int) -> None:
        """Store the low eight bits of ``value`` at ``addr``."""
        self._data[addr & _ADDRESS_MASK] = value & _BYTE_MASK

    def __getitem__(self, addr: int) -> int:
        return self.read(addr)

    def __setitem__(self, addr: int, value: int) -> None:
        self.write(addr, value)

    def __len__(self) -> int:
        return MAX_MEMORY


def put_address(memory: Memory, index: int, address: int) -> None:
    """Write ``address`` at ``index`` in little-endian order."""
    memory.write(index, low_byte(address))
    memory.write(index + 1, high_byte(address))


def put_instruction(memory: Memory, index: int, opcode: int) -> None:
    """Write a single opcode byte at ``index``."""
    memory.write(index, opcode)