''' Instruction codec

Family 0 (address or literal):
    0ooommmmmmmmmmmm

Family 1 (registers):
    1oooooo0sssstttt

o = opcode (family 1 stores opcode - OPCODE_REBASE)
m = memory address or literal (12 bit)
s = source register
t = target register
'''

from dataclasses import dataclass
from typing import Tuple

import bcpu16.common.ops as ops
from bcpu16.common.hwconf import ADDRESS_MASK, REGISTER_MASK, OPCODE_REBASE

Fields = Tuple[int, int, int, int]  # opcode, regsrc, regtgt, memloc


@dataclass(frozen=True)
class Instruction:
    opcode: int

    def fields(self) -> Fields:
        raise NotImplementedError()

    def encode(self) -> int:
        return encode(*self.fields())


@dataclass(frozen=True)
class AddressInstruction(Instruction):
    memloc: int = 0

    def fields(self) -> Fields:
        return (self.opcode, 0, 0, self.memloc)


@dataclass(frozen=True)
class RegisterInstruction(Instruction):
    regsrc: int = 0
    regtgt: int = 0

    def fields(self) -> Fields:
        return (self.opcode, self.regsrc, self.regtgt, 0)


def make(opcode: int, regsrc: int = 0, regtgt: int = 0, memloc: int = 0) -> Instruction:
    ''' Builds the variant for the opcode's family, masking operands to width '''
    return decode(encode(opcode, regsrc, regtgt, memloc))


def encode(opcode: int, regsrc: int = 0, regtgt: int = 0, memloc: int = 0) -> int:
    if ops.is_family_0(opcode):
        return ((opcode & 0x7) << 12) | (memloc & ADDRESS_MASK)

    return 0x8000 \
        | (((opcode - OPCODE_REBASE) & 0x3F) << 9) \
        | ((regsrc & REGISTER_MASK) << 4) \
        | (regtgt & REGISTER_MASK)


def decode(word: int) -> Instruction:
    if word & 0x8000 == 0:
        return AddressInstruction(
            opcode=(word & 0x7000) >> 12,
            memloc=word & ADDRESS_MASK
        )

    return RegisterInstruction(
        opcode=((word & 0x7E00) >> 9) + OPCODE_REBASE,
        regsrc=(word & 0x00F0) >> 4,
        regtgt=word & REGISTER_MASK
    )
