# mos6502

A small emulator of the MOS 6502 processor. It has a 64 KiB memory and a CPU
with registers, a stack that grows downward from `0x01FE`, and a clock that
paces each cycle at 1 MHz.

The CPU runs these instructions:

| Opcode | Instruction    |
|--------|----------------|
| `0x4C` | `JMP` absolute |
| `0x6C` | `JMP` indirect |
| `0x20` | `JSR` absolute |
| `0x60` | `RTS` implied  |

When the CPU fetches an opcode it does not know, it prints
`Unknown instruction : ` with the opcode in hex and in decimal. It then
continues, and the next `execute()` reads the byte that follows.

## Installation

```
pip install .
```

## Running the demo

```
mos6502
```

This command resets a CPU, builds a short program in memory and executes
three instructions. The program does an indirect jump through `0xB213` to
`0x2030`, then a subroutine call to `0xABCD`, then an `RTS`. Each instruction
prints the program counter it started from, for example `JMP_IND : 0x1FF`.
The command accepts only `-h`/`--help`.

## Using the library

```python
from mos6502.memory import Memory, put_address, put_instruction
from mos6502.cpu import CPU

memory = Memory()
cpu = CPU(memory)            # clears memory, then jumps through the reset vector
assert cpu.pc == 0x01FF

put_instruction(memory, cpu.pc, 0x4C)   # JMP absolute
put_address(memory, cpu.pc + 1, 0x1234)
cpu.execute()
assert cpu.pc == 0x1234
```

### `mos6502.memory`

- `Memory` holds 65,536 bytes. You can use `read(addr)` and `write(addr, value)`
  or index it like a byte sequence (`memory[0xFFFC]`). Addresses wrap at
  16 bits. Values are cut to 8 bits.
- `Memory.init()` clears every byte. It then stores the reset vector
  `0x01FF` at `0xFFFC`/`0xFFFD`.
- `put_address(memory, index, address)` writes a 16-bit address
  little-endian, low byte first.
- `put_instruction(memory, index, opcode)` writes one opcode byte.
- `low_byte(address)` and `high_byte(address)` split a 16-bit address into
  its two bytes.

### `mos6502.cpu`

- `CPU(memory=None)` has the registers `pc`, `sp`, `a`, `x`, `y` and `status`.
  `status` starts at `0x24`. The CPU also has the attached `memory`.
- `reset(memory=None)` clears the registers. When you give it a memory, it
  also clears and attaches that memory. It then spends seven idle cycles and
  jumps through the vector at `0xFFFC`.
- `execute()` fetches one opcode and runs it.
- `fetch_byte()` reads the byte at `pc` and advances `pc`.
- `push_stack(value)` and `pull_stack()` move bytes on and off the stack.
  Stack overflow and underflow raise `mos6502.cpu.StackError`.
- `set_pc(address)` loads `pc`.
- `clock(func, *args)` runs one paced cycle.
- If no memory is attached, memory operations raise `RuntimeError`.

### `mos6502.instructions`

This module has the functions `jmp`, `jmp_indirect`, `jsr` and `rts`. It also
has `fetch_address(cpu)` and the `INSTRUCTIONS` table that maps opcodes to
those functions.

### `mos6502.debug`

`format_hex(value, msg)` and `format_hex_debug(value, msg)` build the trace
strings. `print_hex` and `print_hex_debug` print them.

## What it does not do

- Only the four instructions above are executed. `INS_LDA_IM` (`0xA9`) and
  `INS_PASS_TIME` (`0x02`) are defined as constants, but any other opcode is
  reported as unknown.
- `RTS` does not pull a return address from the stack. It spends one idle
  cycle and then advances `pc` by one.
- The status flags are stored as one byte. No instruction reads or changes
  them.
- There is no interrupt handling, and there is no loading of program images
  from files.

## Running the tests

```
pip install .[test]
pytest
```