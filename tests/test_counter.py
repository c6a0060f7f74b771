import pytest

from holdem.counter import FrequencyTable


def test_first_insert_creates_entry():
    table = FrequencyTable(7)
    table.insert(3)
    entry = table.find(3)
    assert entry.key == 3
    assert entry.frequency == 1


def test_repeated_inserts_count_up():
    table = FrequencyTable(7)
    for _ in range(4):
        table.insert(5)
    assert table.find(5).frequency == 4


def test_keys_counted_independently():
    table = FrequencyTable(7)
    table.insert(1)
    table.insert(2)
    table.insert(2)
    assert table.find(1).frequency == 1
    assert table.find(2).frequency == 2


def test_find_missing_returns_none():
    table = FrequencyTable(7)
    table.insert(0)
    assert table.find(6) is None


def test_default_size():
    table = FrequencyTable()
    assert table.size == 7
    with pytest.raises(IndexError):
        table.insert(7)


@pytest.mark.parametrize("key", [-1, 7, 100])
def test_out_of_range_keys_raise(key):
    table = FrequencyTable(7)
    with pytest.raises(IndexError):
        table.insert(key)
    with pytest.raises(IndexError):
        table.find(key)