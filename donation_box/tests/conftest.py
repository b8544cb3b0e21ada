import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


OWNER = "0x" + "a" * 40
ALICE = "0x" + "1" * 40
BOB = "0x" + "2" * 40
CAROL = "0x" + "3" * 40
DAVE = "0x" + "4" * 40
ERIN = "0x" + "5" * 40

ETHER = 10**18


class FakeClock:
    def __init__(self, now=1_000):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()
