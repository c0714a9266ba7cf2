import pytest

from drillkit.table import (
    delete_at,
    edit_at,
    fill_table,
    insert_at,
    search_table,
    table_average,
)


@pytest.fixture
def table():
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_insert_at_shifts_right_and_keeps_length(table):
    result = insert_at(table, 99, 3)
    assert len(result) == len(table)
    assert result[3] == 99
    assert result[:3] == table[:3]
    assert result[4:] == table[3:-1]


def test_insert_at_last_index_overwrites(table):
    result = insert_at(table, 99, 9)
    assert result[-1] == 99
    assert result[:-1] == table[:-1]


@pytest.mark.parametrize("index", [-1, 10])
def test_insert_at_bad_index(table, index):
    with pytest.raises(IndexError):
        insert_at(table, 0, index)


def test_delete_at_removes_element():
    table = [0, 1, 2, 3, 4]
    result = delete_at(table, 2)
    assert len(result) == 4
    assert 2 not in result
    assert result == sorted(result)


def test_delete_then_insert_round_trip(table):
    removed = delete_at(table, 4)
    restored = insert_at(removed + [0], table[4], 4)
    assert restored == table


@pytest.mark.parametrize("index", [-1, 5])
def test_delete_at_bad_index(index):
    with pytest.raises(IndexError):
        delete_at([0, 1, 2, 3, 4], index)


def test_edit_at_replaces_one_element(table):
    result = edit_at(table, 5, -7)
    assert result[5] == -7
    assert result[:5] == table[:5]
    assert result[6:] == table[6:]
    assert table[5] == 6


@pytest.mark.parametrize("index", [-1, 10])
def test_edit_at_bad_index(table, index):
    with pytest.raises(IndexError):
        edit_at(table, index, 0)


def test_search_table_finds_each_value(table):
    for value in table:
        assert table[search_table(table, value)] == value


def test_search_table_source_example(table):
    assert search_table(table, 5) == 4


def test_search_table_missing(table):
    assert search_table(table, 11) is None


def test_search_table_first_occurrence():
    assert search_table([3, 7, 7], 7) == 1


def test_table_average_single():
    assert table_average([5]) == 5


def test_table_average_uniform():
    assert table_average([3, 3, 3]) == 3


def test_table_average_truncates():
    assert table_average([1, 2]) == 1


def test_table_average_truncates_toward_zero():
    assert table_average([-1, -2]) == -1


def test_table_average_within_bounds(table):
    average = table_average(table)
    assert min(table) <= average <= max(table)


def test_table_average_empty():
    with pytest.raises(ValueError):
        table_average([])


def test_fill_table_takes_first_values():
    source = iter([4, 5, 6, 7])
    assert fill_table(3, source) == [4, 5, 6]
    assert next(source) == 7


def test_fill_table_too_few():
    with pytest.raises(ValueError):
        fill_table(4, [1, 2])


def test_fill_table_negative():
    with pytest.raises(ValueError):
        fill_table(-2, [1, 2])