import pytest

from mos6502.instructions import (
    INS_JMP_ABS,
    INS_JMP_IND,
    INS_JSR_ABS,
    INS_LDA_IM,
    INS_RTS_IMP,
    INSTRUCTIONS,
    fetch_address,
    jmp,
    jmp_indirect,
    jsr,
    rts,
)
from mos6502.memory import START_RESET, Memory, high_byte, low_byte, put_address


class FakeCPU:
    def __init__(self, memory, pc=0):
        self.memory = memory
        self.pc = pc
        self.stack = []
        self.cycles = 0

    def clock(self, func, *args):
        self.cycles += 1
        return func(*args) if func is not None else 0

    def fetch_byte(self):
        value = self.memory.read(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF
        return value

    def push_stack(self, value):
        self.stack.append(value)
        return 0

    def set_pc(self, address):
        self.pc = address & 0xFFFF
        return 0


@pytest.fixture
def memory():
    return Memory()


@pytest.mark.parametrize("address", [0x0000, 0x2030, 0xABCD, 0xFFFF])
def test_fetch_address_reads_little_endian(memory, address):
    put_address(memory, 0x0400, address)
    cpu = FakeCPU(memory, pc=0x0400)
    assert fetch_address(cpu) == address
    assert cpu.pc == 0x0402
    assert cpu.cycles == 2


def test_jmp_sets_pc_to_operand(memory, capsys):
    put_address(memory, 0x0200, 0x1234)
    cpu = FakeCPU(memory, pc=0x0200)
    jmp(cpu)
    assert cpu.pc == 0x1234
    assert capsys.readouterr().out == "JMP : 0x200\n"


def test_jmp_indirect_follows_pointer(memory):
    put_address(memory, START_RESET + 1, 0xB213)
    put_address(memory, 0xB213, 0x2030)
    cpu = FakeCPU(memory, pc=START_RESET + 1)
    jmp_indirect(cpu)
    assert cpu.pc == 0x2030
    assert cpu.stack == []


def test_jsr_jumps_and_pushes_return_address(memory):
    put_address(memory, 0x2031, 0xABCD)
    cpu = FakeCPU(memory, pc=0x2031)
    jsr(cpu)
    assert cpu.pc == 0xABCD
    assert cpu.stack == [0x20, 0x33]
    assert cpu.cycles == 5


def test_jsr_pushes_high_byte_first(memory):
    put_address(memory, 0x0500, 0x0600)
    cpu = FakeCPU(memory, pc=0x0500)
    jsr(cpu)
    pushed = (cpu.stack[0] << 8) | cpu.stack[1]
    assert high_byte(pushed) == cpu.stack[0]
    assert low_byte(pushed) == cpu.stack[1]
    assert cpu.pc == 0x0600


def test_rts_advances_pc(memory):
    cpu = FakeCPU(memory, pc=0xABCE)
    rts(cpu)
    assert cpu.pc == 0xABCF
    assert cpu.stack == []


def test_rts_wraps_at_top_of_memory(memory):
    cpu = FakeCPU(memory, pc=0xFFFF)
    rts(cpu)
    assert cpu.pc == 0x0000


def test_dispatch_table_runs_jmp_absolute(memory):
    put_address(memory, 0x0300, 0x4567)
    cpu = FakeCPU(memory, pc=0x0300)
    INSTRUCTIONS[INS_JMP_ABS](cpu)
    assert cpu.pc == 0x4567
    assert cpu.stack == []


def test_dispatch_table_runs_jmp_indirect(memory):
    put_address(memory, 0x0300, 0x0700)
    put_address(memory, 0x0700, 0x89AB)
    cpu = FakeCPU(memory, pc=0x0300)
    INSTRUCTIONS[INS_JMP_IND](cpu)
    assert cpu.pc == 0x89AB


def test_dispatch_table_runs_jsr(memory):
    put_address(memory, 0x2031, 0xABCD)
    cpu = FakeCPU(memory, pc=0x2031)
    INSTRUCTIONS[INS_JSR_ABS](cpu)
    assert cpu.pc == 0xABCD
    assert cpu.stack == [0x20, 0x33]


def test_dispatch_table_runs_rts(memory):
    cpu = FakeCPU(memory, pc=0x1000)
    INSTRUCTIONS[INS_RTS_IMP](cpu)
    assert cpu.pc == 0x1001


def test_dispatch_table_has_no_lda(memory):
    with pytest.raises(KeyError):
        INSTRUCTIONS[INS_LDA_IM](FakeCPU(memory))