# Family 0: 0ooommmmmmmmmmmm
HLT = 0x00  # stop
NOP = 0x01  # nothing
JMP = 0x02  # M -> PC
JEQ = 0x03  # if EQ M -> PC
JGT = 0x04  # if GT M -> PC
JLT = 0x05  # if LT M -> PC

# Family 1: 1oooooo0sssstttt
SET = 0x08  # [PC++] -> T
LDR = 0x09  # M[[PC++]] -> T
STR = 0x0A  # S -> M[[PC++]]
ADD = 0x0B  # S + T -> T
SUB = 0x0C  # S - T -> T
MUL = 0x0D  # S * T -> T
DIV = 0x0E  # S // T -> T
CMP = 0x0F  # S .cmp T -> flags
AND = 0x10  # S & T -> T
OR = 0x11   # S | T -> T
XOR = 0x12  # S ^ T -> T
SHL = 0x13  # T << s -> T
SHR = 0x14  # T >> s -> T
NOT = 0x15  # ~T -> T

FAMILY_1_BASE = SET

MNEMONICS = {
    HLT: 'HLT',
    NOP: 'NOP',
    JMP: 'JMP',
    JEQ: 'JEQ',
    JGT: 'JGT',
    JLT: 'JLT',
    SET: 'SET',
    LDR: 'LDR',
    STR: 'STR',
    ADD: 'ADD',
    SUB: 'SUB',
    MUL: 'MUL',
    DIV: 'DIV',
    CMP: 'CMP',
    AND: 'AND',
    OR: 'OR',
    XOR: 'XOR',
    SHL: 'SHL',
    SHR: 'SHR',
    NOT: 'NOT'
}


def is_family_0(op: int) -> bool:
    return op < FAMILY_1_BASE
