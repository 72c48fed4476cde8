import logging as lg
from typing import List, Tuple, Dict, Any

import bcpu16.common.ops as ops
from bcpu16.common.codec import encode
from bcpu16.common.hwconf import PROGRAM_START, ADDRESS_MASK, REGISTER_MASK, WORD_MASK
from bcpu16.common.errors import AssemblerError

Tokens = List[Any]
Operand = int | str     # Number or label name


class FPP:
    ''' First pass processor '''
    cmd_list: List[Tuple[str, Any]]
    label_dict: Dict[str, int]

    def __init__(self, base: int = PROGRAM_START):
        self.cmd_list = list()
        self.base = base
        self.offset = 0
        self.label_dict = dict()

    def address(self) -> int:
        return self.base + self.offset

    # Handlers
    def issue_word(self, word: int):
        self.cmd_list.append(('word', word))
        self.offset += 1

    def issue_ref(self, labelname: str, op: int | None):
        lg.debug(f'Ref {labelname}')
        self.cmd_list.append(('ref', (labelname, op)))
        self.offset += 1    # placeholder-word

    def issue_op(self, op: int, regsrc: int = 0, regtgt: int = 0, memloc: int = 0):
        lg.debug(f'Issuing command {ops.MNEMONICS[op]} @ 0x{self.address():X}')
        self.issue_word(encode(op, regsrc, regtgt, memloc))

    def issue_operand(self, operand: Operand):
        if isinstance(operand, str):
            self.issue_ref(operand, None)
            return

        if operand > WORD_MASK:
            raise AssemblerError(f'Value {operand} does not fit in a word')

        self.issue_word(operand)

    def on_address(self, tokens: Tokens):
        (op, target) = tokens

        if isinstance(target, str):
            self.issue_ref(target, op)
            return

        if target > ADDRESS_MASK:
            raise AssemblerError(f'Address {target} does not fit in 12 bits')

        self.issue_op(op, memloc=target)

    def on_inline(self, tokens: Tokens):
        (op, regsrc, regtgt, operand) = tokens
        self.issue_op(op, regsrc, regtgt)
        self.issue_operand(operand)

    def on_regs(self, tokens: Tokens):
        (op, regsrc, regtgt) = tokens

        if regsrc > REGISTER_MASK:
            raise AssemblerError(f'Shift amount {regsrc} does not fit in 4 bits')

        self.issue_op(op, regsrc, regtgt)

    def on_data(self, operand: Operand):
        self.issue_operand(operand)

    def on_label(self, labelname: str):
        if labelname in self.label_dict:
            raise AssemblerError(f'Duplicate label {labelname}')

        self.label_dict[labelname] = self.address()
        lg.debug(f'Label {labelname} @ 0x{self.address():X}')
