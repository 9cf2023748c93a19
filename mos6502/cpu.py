"""6502 processor state, stack handling and clocked instruction dispatch."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .debug import print_hex_debug
from .instructions import INSTRUCTIONS, jmp
from .memory import CLOCK_SPEED, START_PC, START_SP, Memory

# Duration of one clock cycle in microseconds.
TIME_EXPECTED_US = 1_000_000 // CLOCK_SPEED

RESET_STATUS = 0x24
RESET_CYCLES = 7
STACK_LIMIT = 0xFF - 1


class StackError(RuntimeError):
    """Raised when the stack overflows or underflows."""


class CPU:
    """Registers of a 6502 together with the memory it is attached to."""

    def __init__(self, memory: Optional[Memory] = None) -> None:
        self.pc = START_PC
        self.sp = 0
        self.a = 0
        self.x = 0
        self.y = 0
        self.status = RESET_STATUS
        self.memory: Optional[Memory] = None
        self.reset(memory)

    def reset(self, memory: Optional[Memory] = None) -> None:
        """Clear the registers; with ``memory``, also run the reset sequence.

        The reset sequence clears ``memory``, attaches it, spends seven idle
        cycles and jumps through the reset vector at START_PC.
        """
        self.pc = START_PC
        self.sp = 0
        self.a = 0
        self.x = 0
        self.y = 0
        self.status = RESET_STATUS
        self.memory = None
        if memory is None:
            return
        memory.init()
        self.memory = memory
        for _ in range(RESET_CYCLES):
            self.clock(None)
        jmp(self)

    def _require_memory(self) -> Memory:
        if self.memory is None:
            raise RuntimeError("no memory attached to the CPU")
        return self.memory

    def fetch_byte(self) -> int:
        """Read the byte at PC and advance PC."""
        value = self._require_memory().read(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF
        return value

    def push_stack(self, value: int) -> int:
        """Push one byte on the stack."""
        if self.sp == STACK_LIMIT:
            raise StackError("Stack overflow")
        self.sp += 1
        self._require_memory().write(START_SP - self.sp, value)
        return 0

    def pull_stack(self) -> int:
        """Pull the most recently pushed byte from the stack."""
        if self.sp == 0:
            raise StackError("Stack underflow")
        value = self._require_memory().read(START_SP - self.sp)
        self.sp -= 1
        return value

    def set_pc(self, address: int) -> int:
        """Load PC with ``address``."""
        self.pc = address & 0xFFFF
        return 0

    def clock(self, func: Optional[Callable[..., int]], *args: int) -> int:
        """Run ``func`` as one clock cycle, waiting out the rest of the cycle.

        With ``func`` None the cycle is idle. Returns what ``func`` returned,
        or 0 for an idle cycle.
        """
        start = time.perf_counter_ns()
        value = func(*args) if func is not None else 0
        elapsed_us = (time.perf_counter_ns() - start) // 1000
        if elapsed_us < TIME_EXPECTED_US:
            time.sleep((TIME_EXPECTED_US - elapsed_us) / 1_000_000)
        return value if value is not None else 0

    def execute(self) -> None:
        """Fetch one opcode and run the matching instruction."""
        opcode = self.clock(self.fetch_byte)
        handler = INSTRUCTIONS.get(opcode)
        if handler is None:
            print_hex_debug(opcode, "Unknown instruction : ")
            return
        handler(self)