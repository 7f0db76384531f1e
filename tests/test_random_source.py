from random_source import RandomSource


def test_same_seed_same_draws():
    a = RandomSource(42)
    b = RandomSource(42)
    assert [a.randint(10) for _ in range(20)] == [b.randint(10) for _ in range(20)]
    assert [a.uniform() for _ in range(20)] == [b.uniform() for _ in range(20)]
    assert a.permutation(15) == b.permutation(15)


def test_draw_ranges():
    rng = RandomSource(0)
    ints = [rng.randint(5) for _ in range(2000)]
    assert set(ints) == {0, 1, 2, 3, 4}
    reals = [rng.uniform() for _ in range(2000)]
    assert all(0.0 <= u < 1.0 for u in reals)


def test_permutation_returns_python_ints():
    order = RandomSource(1).permutation(8)
    assert sorted(order) == list(range(8))
    assert all(type(i) is int for i in order)


def test_spawn_is_reproducible():
    first = [s.seed for s in RandomSource(7).spawn(4)]
    second = [s.seed for s in RandomSource(7).spawn(4)]
    assert first == second
    assert len(set(first)) == 4
