"""Demonstration program: a jump chain into a subroutine call and return."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .cpu import CPU
from .instructions import INS_JMP_IND, INS_JSR_ABS, INS_RTS_IMP
from .memory import START_RESET, Memory, put_address, put_instruction

INDIRECT_POINTER = 0xB213
CALLER = 0x2030
SUBROUTINE = 0xABCD
DEMO_STEPS = 3


def build_demo(memory: Memory) -> None:
    """Write the demonstration program into ``memory``."""
    put_instruction(memory, START_RESET, INS_JMP_IND)
    put_address(memory, START_RESET + 1, INDIRECT_POINTER)
    put_address(memory, INDIRECT_POINTER, CALLER)
    put_instruction(memory, CALLER, INS_JSR_ABS)
    put_address(memory, CALLER + 1, SUBROUTINE)
    put_instruction(memory, SUBROUTINE, INS_RTS_IMP)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Reset a CPU, load the demonstration program and run it."""
    parser = argparse.ArgumentParser(
        prog="mos6502", description="Run the 6502 demonstration program."
    )
    parser.parse_args(argv)

    memory = Memory()
    cpu = CPU()
    cpu.reset(memory)
    build_demo(memory)
    for _ in range(DEMO_STEPS):
        cpu.execute()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())