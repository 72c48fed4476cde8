from bcpu16.common.hwconf import REGISTER_COUNT, WORD_MASK
from bcpu16.common.errors import InvalidRegister

# Flags byte
OVERFLOW = 0b00000001
LESSER = 0b00000010
GREATER = 0b00000100
COMPARISON = LESSER | GREATER   # 00 = equal


class Registers():
    gp: list[int]   # General purpose registers
    flags: int      # Overflow and last comparison

    def __init__(self):
        self.gp = [0] * REGISTER_COUNT
        self.flags = 0

    def check(self, index: int):
        if index < 0 or index >= REGISTER_COUNT:
            raise InvalidRegister(index)

    def get(self, index: int) -> int:
        self.check(index)
        return self.gp[index]

    def set(self, index: int, value: int):
        self.check(index)
        self.gp[index] = value & WORD_MASK

    # - Overflow - #

    def set_overflow(self):
        self.flags |= OVERFLOW

    def clear_overflow(self):
        self.flags &= ~OVERFLOW

    def get_overflow(self) -> bool:
        return self.flags & OVERFLOW != 0

    # - Comparison - #

    def set_equal(self):
        self.flags &= ~COMPARISON

    def set_greater(self):
        self.set_equal()
        self.flags |= GREATER

    def set_lesser(self):
        self.set_equal()
        self.flags |= LESSER

    def get_equal(self) -> bool:
        return self.flags & COMPARISON == 0

    def get_greater(self) -> bool:
        return self.flags & GREATER != 0

    def get_lesser(self) -> bool:
        return self.flags & LESSER != 0
