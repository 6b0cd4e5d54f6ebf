import pytest

from oslab.dining import DiningTable, compatible_pairs


def test_adjacent_pair_is_not_compatible():
    assert compatible_pairs(5, [0, 1]) == []


def test_wraparound_neighbours_are_excluded():
    assert compatible_pairs(5, [0, 2, 4]) == [(0, 2), (2, 4)]


@pytest.mark.parametrize("total,positions", [(5, [0, 2, 3]), (7, [1, 3, 5, 6]), (4, [0, 2])])
def test_compatible_pairs_never_adjacent(total, positions):
    for a, b in compatible_pairs(total, positions):
        assert (a + 1) % total != b
        assert (b + 1) % total != a
        assert a in positions and b in positions


def test_one_at_a_time_rounds():
    table = DiningTable(5, [1, 3, 4], eat_seconds=0)
    rounds = table.one_at_a_time()
    assert [eaters for eaters, _ in rounds] == [(1,), (3,), (4,)]
    for eaters, waiting in rounds:
        assert sorted(eaters + waiting) == [1, 3, 4]


def test_two_at_a_time_matches_compatible_pairs():
    table = DiningTable(6, [0, 2, 3, 5], eat_seconds=0)
    rounds = table.two_at_a_time()
    assert [eaters for eaters, _ in rounds] == compatible_pairs(6, [0, 2, 3, 5])
    for eaters, waiting in rounds:
        assert sorted(eaters + waiting) == [0, 2, 3, 5]


def test_two_at_a_time_with_only_neighbours_is_empty():
    table = DiningTable(5, [2, 3], eat_seconds=0)
    assert table.two_at_a_time() == []


def test_single_philosopher_can_eat():
    table = DiningTable(1, [0], eat_seconds=0)
    assert table.one_at_a_time() == [((0,), ())]


def test_repeated_rounds_release_chopsticks():
    table = DiningTable(3, [0, 1, 2], eat_seconds=0)
    expected = [((0,), (1, 2)), ((1,), (0, 2)), ((2,), (0, 1))]
    assert table.one_at_a_time() == expected
    assert table.one_at_a_time() == expected


@pytest.mark.parametrize("total,positions", [(5, [5]), (5, [-1]), (0, [])])
def test_invalid_table_raises(total, positions):
    with pytest.raises(ValueError):
        DiningTable(total, positions)


def test_compatible_pairs_rejects_out_of_range():
    with pytest.raises(ValueError):
        compatible_pairs(3, [0, 3])