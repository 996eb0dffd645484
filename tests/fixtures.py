# type: ignore
import pytest

from intcode.runtime.cpu import IntCodeMachine

import unit_utils


@pytest.fixture
def doubler():
    yield IntCodeMachine(unit_utils.load_program('double'))


@pytest.fixture
def incrementer():
    yield IntCodeMachine(unit_utils.load_program('increment'))
