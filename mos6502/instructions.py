"""Implemented 6502 instructions, each driven through a CPU's clocked operations.

Every function receives a CPU exposing ``pc``, ``clock(func, *args)``,
``fetch_byte()``, ``push_stack(value)`` and ``set_pc(address)``.
"""

from .debug import print_hex
from .memory import high_byte, low_byte

INS_LDA_IM = 0xA9
INS_JMP_ABS = 0x4C
INS_JMP_IND = 0x6C
INS_JSR_ABS = 0x20
INS_RTS_IMP = 0x60

# Skips the seven reset cycles before jumping through the reset vector.
INS_PASS_TIME = 0x02


def fetch_address(cpu) -> int:
    """Read a little-endian address at PC over two clock cycles."""
    low = cpu.clock(cpu.fetch_byte)
    high = cpu.clock(cpu.fetch_byte)
    return (low | (high << 8)) & 0xFFFF


def jmp(cpu) -> None:
    """JMP absolute: load PC with the operand address."""
    print_hex(cpu.pc, "JMP : ")
    cpu.pc = fetch_address(cpu)


def jmp_indirect(cpu) -> None:
    """JMP indirect: load PC with the address stored at the operand address."""
    print_hex(cpu.pc, "JMP_IND : ")
    cpu.pc = fetch_address(cpu)
    cpu.pc = fetch_address(cpu)


def jsr(cpu) -> None:
    """JSR absolute: push the return address and jump to the subroutine."""
    print_hex(cpu.pc, "JSR : ")
    address = cpu.clock(cpu.fetch_byte)
    cpu.clock(cpu.push_stack, high_byte(cpu.pc + 1))
    cpu.clock(cpu.push_stack, low_byte(cpu.pc + 1))
    address = (address + (cpu.clock(cpu.fetch_byte) << 8)) & 0xFFFF
    cpu.clock(cpu.set_pc, address)


def rts(cpu) -> None:
    """RTS implied: spend an idle cycle, then advance PC by one."""
    print_hex(cpu.pc, "RTS : ")
    cpu.clock(None)
    cpu.clock(cpu.set_pc, (cpu.pc + 1) & 0xFFFF)


INSTRUCTIONS = {
    INS_JMP_ABS: jmp,
    INS_JMP_IND: jmp_indirect,
    INS_JSR_ABS: jsr,
    INS_RTS_IMP: rts,
}