import pytest

from pctoolkit.ringbuffer import RingBuffer


def test_fifo_order():
    rb = RingBuffer(8)
    for value in (1, 2, 3):
        assert rb.put(value) is True
    assert [rb.get() for _ in range(3)] == [1, 2, 3]
    assert rb.is_empty()


@pytest.mark.parametrize("size", [2, 8, 256, 10])
def test_capacity_is_size_minus_one(size):
    rb = RingBuffer(size)
    accepted = sum(rb.put(i) for i in range(size + 5))
    assert accepted == size - 1
    assert rb.is_full()
    assert len(rb) == size - 1


def test_full_buffer_drops_new_data():
    rb = RingBuffer(4)
    for value in (10, 20, 30):
        rb.put(value)
    assert rb.put(40) is False
    assert [rb.get() for _ in range(3)] == [10, 20, 30]


def test_get_on_empty_returns_zero():
    rb = RingBuffer(8)
    assert rb.get() == 0
    assert len(rb) == 0


def test_wraparound_preserves_order():
    rb = RingBuffer(5)
    out = []
    for value in range(100):
        rb.put(value)
        if len(rb) == 3:
            out.append(rb.get())
    while not rb.is_empty():
        out.append(rb.get())
    assert out == list(range(100))


def test_len_tracks_contents():
    rb = RingBuffer(8)
    rb.put(1)
    rb.put(2)
    assert len(rb) == 2
    rb.get()
    assert len(rb) == 1


def test_values_stored_as_bytes():
    rb = RingBuffer(4)
    rb.put(0x100 | 0x2A)
    assert rb.get() == 0x2A


def test_size_too_small():
    with pytest.raises(ValueError):
        RingBuffer(1)