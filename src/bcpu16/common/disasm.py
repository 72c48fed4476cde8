import bcpu16.common.ops as ops
from bcpu16.common.codec import Instruction, AddressInstruction, RegisterInstruction, decode

inst_formats = {
    ops.HLT: '{op}',
    ops.NOP: '{op}',
    ops.JMP: '{op} {m}',
    ops.JEQ: '{op} {m}',
    ops.JGT: '{op} {m}',
    ops.JLT: '{op} {m}',
    ops.SET: '{op} r{t}',
    ops.LDR: '{op} r{t}',
    ops.STR: '{op} r{s}',
    ops.ADD: '{op} r{s}, r{t}',
    ops.SUB: '{op} r{s}, r{t}',
    ops.MUL: '{op} r{s}, r{t}',
    ops.DIV: '{op} r{s}, r{t}',
    ops.CMP: '{op} r{s}, r{t}',
    ops.AND: '{op} r{s}, r{t}',
    ops.OR: '{op} r{s}, r{t}',
    ops.XOR: '{op} r{s}, r{t}',
    ops.SHL: '{op} {s}, r{t}',
    ops.SHR: '{op} {s}, r{t}',
    ops.NOT: '{op} r{t}'
}


def format_instruction(inst: Instruction) -> str:
    fmt = inst_formats.get(inst.opcode)

    if fmt is None:
        return f'??? {inst.opcode}'

    s = t = m = 0

    if isinstance(inst, AddressInstruction):
        m = inst.memloc

    if isinstance(inst, RegisterInstruction):
        s, t = inst.regsrc, inst.regtgt

    return fmt.format(op=ops.MNEMONICS[inst.opcode], s=s, t=t, m=m)


def disassemble(word: int) -> str:
    return format_instruction(decode(word))
