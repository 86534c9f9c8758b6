import pytest

from tetris_rng import LCG_M, clock_seed, hash_seed, random_int


def test_hash_seed_formula():
    assert hash_seed(0) == 12345
    assert hash_seed(1) == (1103515245 + 12345) % 2**31


def test_random_int_in_range_and_deterministic():
    seed = 7
    seen = set()
    for _ in range(500):
        value, nxt = random_int(seed, 0, 6)
        assert 0 <= value <= 6
        assert nxt == hash_seed(seed)
        assert random_int(seed, 0, 6) == (value, nxt)
        seen.add(value)
        seed = nxt
    assert seen == set(range(7))


def test_random_int_single_value_range():
    assert random_int(99, 3, 3)[0] == 3


def test_random_int_rejects_empty_range():
    with pytest.raises(ValueError):
        random_int(1, 5, 4)


def test_clock_seed_within_modulus():
    assert 0 <= clock_seed() < LCG_M
