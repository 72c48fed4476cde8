# type: ignore
import pytest

import bcpu16.runtime.cpu as cpu


@pytest.fixture
def with_cpu():
    yield cpu.CPU()
