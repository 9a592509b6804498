import random

import pytest

from algocollect.sorting import (
    bucket_sort,
    cocktail_selection_sort,
    comb_sort,
    next_gap,
    numeric_key,
    numeric_sort,
)


def _random_lists():
    rng = random.Random(1234)
    lists = [[], [5], [2, 1], [3, 1, 2], [1, 1, 1], [5, 4, 3, 2, 1]]
    for size in range(2, 40):
        lists.append([rng.randint(-50, 50) for _ in range(size)])
    return lists


def test_next_gap_never_below_one():
    assert next_gap(0) == 1
    assert next_gap(1) == 1
    assert next_gap(2) == 1


def test_next_gap_shrinks_by_factor():
    assert next_gap(13) == 10
    assert next_gap(26) == 20


@pytest.mark.parametrize("values", _random_lists())
def test_comb_sort_matches_sorted(values):
    original = list(values)
    assert comb_sort(values) == sorted(original)
    assert values == original


def test_numeric_sort_source_example():
    data = ["1", "10", "100", "2", "20", "200", "3", "30", "300"]
    assert numeric_sort(data) == ["1", "2", "3", "10", "20", "30", "100", "200", "300"]


def test_numeric_key_ignores_leading_zeros():
    assert numeric_key("007") == numeric_key("7")
    assert numeric_key("0") == numeric_key("000")
    assert numeric_key("9") < numeric_key("10")


def test_numeric_sort_orders_by_value():
    rng = random.Random(99)
    numbers = [rng.randint(0, 10**6) for _ in range(50)]
    result = numeric_sort(str(n) for n in numbers)
    assert [int(s) for s in result] == sorted(numbers)


@pytest.mark.parametrize("values", _random_lists())
def test_cocktail_selection_sort_matches_sorted(values):
    original = list(values)
    assert cocktail_selection_sort(values) == sorted(original)
    assert values == original


def test_bucket_sort_source_sample():
    sample = [0.897, 0.565, 0.656, 0.1234, 0.665, 0.3434]
    assert bucket_sort(sample) == sorted(sample)


def test_bucket_sort_random_values():
    rng = random.Random(7)
    values = [rng.random() for _ in range(200)]
    assert bucket_sort(values) == sorted(values)


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [1.0, -0.1, 2.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.2, bad, 0.4])