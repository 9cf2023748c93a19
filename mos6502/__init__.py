"""A small cycle-paced MOS 6502 CPU emulator: memory, CPU, jump and subroutine instructions."""

__version__ = "0.1.0"
__all__ = ["cpu", "debug", "instructions", "main", "memory"]