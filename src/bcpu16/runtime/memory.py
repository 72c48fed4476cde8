import logging as lg
from typing import Iterable

from bcpu16.common.hwconf import MEMORY_SIZE, WORD_MASK
from bcpu16.common.errors import InvalidMemoryLocation


class Memory():
    cells: list[int]

    def __init__(self, size: int = MEMORY_SIZE):
        self.cells = [0] * size

    def __len__(self) -> int:
        return len(self.cells)

    def check(self, address: int):
        if address < 0 or address >= len(self.cells):
            raise InvalidMemoryLocation(address)

    def get(self, address: int) -> int:
        self.check(address)
        return self.cells[address]

    def set(self, address: int, value: int):
        self.check(address)
        self.cells[address] = value & WORD_MASK

    def load(self, base: int, words: Iterable[int]):
        # Embedded addresses are not relocated
        count = 0

        for offset, word in enumerate(words):
            self.set(base + offset, word)
            count += 1

        lg.debug(f'Loaded {count} words @ 0x{base:X}')
