import pytest

from perlin2d.permutation import build_permutation_table, is_valid_permutation_table


@pytest.mark.parametrize("seed", [0, 1, 42, -1, -42, 2**40, -(2**63)])
def test_table_is_doubled_permutation(seed):
    table = build_permutation_table(seed)
    assert len(table) == 512
    assert sorted(table[:256]) == list(range(256))
    assert table[:256] == table[256:]
    assert is_valid_permutation_table(table)


def test_same_seed_same_table():
    assert build_permutation_table(1234) == build_permutation_table(1234)


def test_negative_seed_differs_from_positive():
    assert build_permutation_table(5) != build_permutation_table(-5)


def test_distinct_seeds_give_distinct_tables():
    tables = {tuple(build_permutation_table(seed)) for seed in range(-20, 20)}
    assert len(tables) == 40


def test_custom_power_of_two_size():
    table = build_permutation_table(9, size=16)
    assert len(table) == 32
    assert sorted(table[:16]) == list(range(16))


@pytest.mark.parametrize("size", [0, -8, 3, 100])
def test_rejects_non_power_of_two_size(size):
    with pytest.raises(ValueError):
        build_permutation_table(1, size=size)


def test_validity_check_rejects_broken_tables():
    table = build_permutation_table(3)
    assert not is_valid_permutation_table(table[:-1])

    broken = list(table)
    broken[0], broken[1] = broken[1], broken[0]
    assert not is_valid_permutation_table(broken)

    assert not is_valid_permutation_table([0, 0, 0, 0])
