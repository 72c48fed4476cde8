import logging as lg
from typing import Callable, Iterable

import bcpu16.common.ops as ops
from bcpu16.common.hwconf import PROGRAM_START, WORD_MASK
from bcpu16.common.errors import InvalidOpcode, DivisionByZero, StepLimitExceeded
from bcpu16.common.codec import Instruction, AddressInstruction, RegisterInstruction, decode
from bcpu16.common.disasm import format_instruction
from bcpu16.runtime.memory import Memory
from bcpu16.runtime.registers import Registers


class Halt(Exception):
    pass


class CPU():
    pc: int             # Program counter
    memory: Memory
    regs: Registers

    def __init__(self):
        self.pc = PROGRAM_START
        self.memory = Memory()
        self.regs = Registers()

    # - Introspection - #

    @property
    def program_counter(self) -> int:
        return self.pc

    @property
    def memory_size(self) -> int:
        return len(self.memory)

    def get_memory(self, address: int) -> int:
        return self.memory.get(address)

    def set_memory(self, address: int, value: int):
        self.memory.set(address, value)

    def load(self, base: int, words: Iterable[int]):
        self.memory.load(base, words)

    def get_register(self, index: int) -> int:
        return self.regs.get(index)

    def set_register(self, index: int, value: int):
        self.regs.set(index, value)

    def get_flags(self) -> int:
        return self.regs.flags

    def get_overflow(self) -> bool:
        return self.regs.get_overflow()

    def get_equal(self) -> bool:
        return self.regs.get_equal()

    def get_greater(self) -> bool:
        return self.regs.get_greater()

    def get_lesser(self) -> bool:
        return self.regs.get_lesser()

    # - Helpers - #

    def debug_dump(self):
        state = [f'PC:{self.pc:X}', f'FL:{self.regs.flags:03b}']
        state.extend([f'{i}:{v:X}' for i, v in enumerate(self.regs.gp)])
        lg.debug(' '.join(state))

    def next(self) -> int:
        word = self.memory.get(self.pc)
        self.pc += 1
        return word

    def arithm_pair(self, inst: RegisterInstruction, op: Callable[[int, int], int]):
        a = self.regs.get(inst.regsrc)
        b = self.regs.get(inst.regtgt)
        wide = op(a, b)
        self.regs.set(inst.regtgt, wide)

        if wide < 0 or wide > WORD_MASK:
            self.regs.set_overflow()
        else:
            self.regs.clear_overflow()

    def logic_pair(self, inst: RegisterInstruction, op: Callable[[int, int], int]):
        a = self.regs.get(inst.regsrc)
        b = self.regs.get(inst.regtgt)
        self.regs.set(inst.regtgt, op(a, b))

    def shift(self, inst: RegisterInstruction, op: Callable[[int, int], int]):
        # Source field is the shift amount, not a register
        val = self.regs.get(inst.regtgt)
        self.regs.set(inst.regtgt, op(val, inst.regsrc))

    def branch_if(self, inst: AddressInstruction, condition: bool):
        if condition:
            self.pc = inst.memloc

    # - Operations - #

    def hlt(self, inst: AddressInstruction):
        raise Halt()

    def nop(self, inst: AddressInstruction):
        pass

    def jmp(self, inst: AddressInstruction):
        self.pc = inst.memloc

    def jeq(self, inst: AddressInstruction):
        self.branch_if(inst, self.regs.get_equal())

    def jgt(self, inst: AddressInstruction):
        self.branch_if(inst, self.regs.get_greater())

    def jlt(self, inst: AddressInstruction):
        self.branch_if(inst, self.regs.get_lesser())

    def setreg(self, inst: RegisterInstruction):
        literal = self.next()
        self.regs.set(inst.regtgt, literal)

    def ldr(self, inst: RegisterInstruction):
        address = self.next()
        self.regs.set(inst.regtgt, self.memory.get(address))

    def store(self, inst: RegisterInstruction):
        address = self.next()
        self.memory.set(address, self.regs.get(inst.regsrc))

    # - Arithmetic - #

    def add(self, inst: RegisterInstruction):
        self.arithm_pair(inst, lambda a, b: a + b)

    def sub(self, inst: RegisterInstruction):
        self.arithm_pair(inst, lambda a, b: a - b)

    def mul(self, inst: RegisterInstruction):
        self.arithm_pair(inst, lambda a, b: a * b)

    def div(self, inst: RegisterInstruction):
        if self.regs.get(inst.regtgt) == 0:
            raise DivisionByZero(inst.regsrc, inst.regtgt)

        self.arithm_pair(inst, lambda a, b: a // b)

    def cmp(self, inst: RegisterInstruction):
        a = self.regs.get(inst.regsrc)
        b = self.regs.get(inst.regtgt)

        if a == b:
            self.regs.set_equal()
        elif a > b:
            self.regs.set_greater()
        else:
            self.regs.set_lesser()

    # - Bitwise - #

    def band(self, inst: RegisterInstruction):
        self.logic_pair(inst, lambda a, b: a & b)

    def bor(self, inst: RegisterInstruction):
        self.logic_pair(inst, lambda a, b: a | b)

    def xor(self, inst: RegisterInstruction):
        self.logic_pair(inst, lambda a, b: a ^ b)

    def shl(self, inst: RegisterInstruction):
        self.shift(inst, lambda v, n: v << n)

    def shr(self, inst: RegisterInstruction):
        self.shift(inst, lambda v, n: v >> n)

    def inv(self, inst: RegisterInstruction):
        val = self.regs.get(inst.regtgt)
        self.regs.set(inst.regtgt, ~val)

    HANDLERS = {
        ops.HLT: hlt,
        ops.NOP: nop,
        ops.JMP: jmp,
        ops.JEQ: jeq,
        ops.JGT: jgt,
        ops.JLT: jlt,
        ops.SET: setreg,
        ops.LDR: ldr,
        ops.STR: store,

        ops.ADD: add,
        ops.SUB: sub,
        ops.MUL: mul,
        ops.DIV: div,
        ops.CMP: cmp,

        ops.AND: band,
        ops.OR: bor,
        ops.XOR: xor,
        ops.SHL: shl,
        ops.SHR: shr,
        ops.NOT: inv
    }

    # -- Implementation -- #

    def step(self) -> Instruction:
        addr = self.pc
        word = self.next()
        inst = decode(word)
        handler = self.HANDLERS.get(inst.opcode)

        if handler is None:
            raise InvalidOpcode(inst.opcode, word)

        lg.debug(f'{addr:03X}: {format_instruction(inst)}')
        handler(self, inst)
        return inst

    def run(self, max_steps: int | None = None):
        ''' Always restarts from PROGRAM_START; returns on HLT '''
        self.pc = PROGRAM_START
        steps = 0

        try:
            while True:
                if max_steps is not None and steps >= max_steps:
                    raise StepLimitExceeded(steps)

                self.step()
                steps += 1

        except Halt:
            lg.info(f'Execution halted at 0x{self.pc - 1:X} after {steps + 1} steps')
