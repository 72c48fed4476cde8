import pytest

from bcpu16.common.hwconf import MEMORY_SIZE
from bcpu16.common.errors import InvalidMemoryLocation
from bcpu16.runtime.memory import Memory


def test_size():
    assert len(Memory()) == MEMORY_SIZE == 4096


def test_bounds():
    memory = Memory()
    memory.set(4095, 256)
    assert memory.get(4095) == 256

    with pytest.raises(InvalidMemoryLocation) as e:
        memory.set(4096, 256)

    assert e.value.address == 4096

    with pytest.raises(InvalidMemoryLocation):
        memory.get(4096)

    with pytest.raises(InvalidMemoryLocation):
        memory.get(-1)


def test_values_are_words():
    memory = Memory()
    memory.set(0, 0x1ABCD)
    assert memory.get(0) == 0xABCD


def test_load():
    memory = Memory()
    memory.load(1000, [1, 2, 3])
    assert [memory.get(a) for a in range(999, 1004)] == [0, 1, 2, 3, 0]


def test_load_past_end():
    memory = Memory()

    with pytest.raises(InvalidMemoryLocation) as e:
        memory.load(4094, [7, 8, 9])

    assert e.value.address == 4096
    assert memory.get(4094) == 7
    assert memory.get(4095) == 8
