''' ROM images: big-endian 16-bit words '''

import struct

from bcpu16.common.hwconf import WORD_SIZE


def unpack_rom(rom: bytes) -> list[int]:
    if len(rom) % WORD_SIZE != 0:
        raise ValueError(f'ROM size {len(rom)} is not a multiple of {WORD_SIZE}')

    count = len(rom) // WORD_SIZE
    return list(struct.unpack(f'>{count}H', rom))


def pack_rom(words: list[int]) -> bytes:
    return struct.pack(f'>{len(words)}H', *words)
