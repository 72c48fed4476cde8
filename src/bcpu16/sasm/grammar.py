# type: ignore
''' Basic grammar '''

import pyparsing as pp

import bcpu16.common.ops as ops
from bcpu16.sasm.fpp import FPP


def to_int(literal: str) -> int:
    if literal[:2] in ('0x', '0X'):
        return int(literal[2:], 16)

    if literal[:2] in ('0b', '0B'):
        return int(literal[2:], 2)

    return int(literal, 10)


def g_kw(literal, op):
    return pp.CaselessKeyword(literal).set_parse_action(lambda _: op)


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.Regex('(//|;).*'))
sep = pp.Suppress(pp.Optional(','))

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r[0]))

number = pp.Regex('0[xX][0-9a-fA-F]+|0[bB][01]+|[0-9]+').set_parse_action(lambda r: to_int(r[0]))
reg = pp.Regex('[rR](1[0-5]|[0-9])(?![0-9A-Za-z_])').set_parse_action(lambda r: int(r[0][1:]))

# Number or label
operand = number | id


def g_cmd_0(literal, op):
    return g_kw(literal, op).set_parse_action(lambda _: (FPP.on_address, [op, 0]))


def g_cmd_addr(literal, op):
    return (g_kw(literal, op) + operand).set_parse_action(lambda r: (FPP.on_address, [r[0], r[1]]))


def g_cmd_in_reg(literal, op):
    ''' Target register, operand word follows '''
    return (g_kw(literal, op) + reg + sep + operand).set_parse_action(
        lambda r: (FPP.on_inline, [r[0], 0, r[1], r[2]]))


def g_cmd_out_reg(literal, op):
    ''' Source register, operand word follows '''
    return (g_kw(literal, op) + reg + sep + operand).set_parse_action(
        lambda r: (FPP.on_inline, [r[0], r[1], 0, r[2]]))


def g_cmd_2(literal, op):
    return (g_kw(literal, op) + reg + sep + reg).set_parse_action(
        lambda r: (FPP.on_regs, [r[0], r[1], r[2]]))


def g_cmd_shift(literal, op):
    return (g_kw(literal, op) + number + sep + reg).set_parse_action(
        lambda r: (FPP.on_regs, [r[0], r[1], r[2]]))


def g_cmd_1(literal, op):
    return (g_kw(literal, op) + reg).set_parse_action(lambda r: (FPP.on_regs, [r[0], 0, r[1]]))


# Control
hlt_cmd = g_cmd_0('hlt', ops.HLT)
nop_cmd = g_cmd_0('nop', ops.NOP)
jmp_cmd = g_cmd_addr('jmp', ops.JMP)
jeq_cmd = g_cmd_addr('jeq', ops.JEQ)
jgt_cmd = g_cmd_addr('jgt', ops.JGT)
jlt_cmd = g_cmd_addr('jlt', ops.JLT)

# Transfer
set_cmd = g_cmd_in_reg('set', ops.SET)
ldr_cmd = g_cmd_in_reg('ldr', ops.LDR)
str_cmd = g_cmd_out_reg('str', ops.STR)

# Arithmetic
add_cmd = g_cmd_2('add', ops.ADD)
sub_cmd = g_cmd_2('sub', ops.SUB)
mul_cmd = g_cmd_2('mul', ops.MUL)
div_cmd = g_cmd_2('div', ops.DIV)
cmp_cmd = g_cmd_2('cmp', ops.CMP)

# Bitwise
and_cmd = g_cmd_2('and', ops.AND)
or_cmd = g_cmd_2('or', ops.OR)
xor_cmd = g_cmd_2('xor', ops.XOR)
shl_cmd = g_cmd_shift('shl', ops.SHL)
shr_cmd = g_cmd_shift('shr', ops.SHR)
not_cmd = g_cmd_1('not', ops.NOT)

# Data
dw_cmd = (pp.Suppress(pp.CaselessKeyword('dw')) + operand).set_parse_action(lambda r: (FPP.on_data, r[0]))

asm_cmd = hlt_cmd \
    | nop_cmd \
    | jmp_cmd \
    | jeq_cmd \
    | jgt_cmd \
    | jlt_cmd \
    | set_cmd \
    | ldr_cmd \
    | str_cmd \
    | add_cmd \
    | sub_cmd \
    | mul_cmd \
    | div_cmd \
    | cmp_cmd \
    | and_cmd \
    | or_cmd \
    | xor_cmd \
    | shl_cmd \
    | shr_cmd \
    | not_cmd \
    | dw_cmd

statement = pp.Optional(label) + pp.Optional(asm_cmd) + pp.Optional(comment)
