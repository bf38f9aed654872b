import pytest

from vibrant.receiver import RecvTag, recv_init


def u8(receiver):
    """Channels of a byte receiver as plain ints."""
    return tuple(int(c) for c in receiver.value)


@pytest.fixture
def recv():
    return recv_init(RecvTag.VAL_U8)


@pytest.fixture
def read_u8():
    return u8
