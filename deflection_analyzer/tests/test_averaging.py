from __future__ import annotations

import numpy as np
import pytest

from deflection_analyzer.analysis.averaging import group_centers, time_average
from deflection_analyzer.models.series import RawSeries


def test_block_means() -> None:
    avg = time_average(RawSeries.from_values([1, 2, 3, 4, 5, 6]), 3)
    assert avg.y.tolist() == [2.0, 5.0]
    assert avg.n == 3
    assert avg.n_dropped == 0


@pytest.mark.parametrize("length, n", [(0, 1), (1, 1), (7, 3), (10, 10), (9, 10), (101, 7)])
def test_length_is_floor(length: int, n: int) -> None:
    rng = np.random.default_rng(length + n)
    avg = time_average(RawSeries.from_values(rng.normal(size=length)), n)
    assert avg.n_groups == length // n
    assert avg.n_dropped == length % n


def test_trailing_remainder_is_dropped_not_averaged() -> None:
    avg = time_average(RawSeries.from_values([1, 1, 3, 3, 100]), 2)
    assert avg.y.tolist() == [1.0, 3.0]


def test_each_value_is_mean_of_its_block() -> None:
    rng = np.random.default_rng(3)
    y = rng.normal(10.0, 2.0, size=53)
    avg = time_average(RawSeries.from_values(y), 5)
    expected = y[:50].reshape(10, 5).mean(axis=1)
    assert np.allclose(avg.y, expected)


def test_center_index_formula() -> None:
    # group k covers [k*n, k*n+n-1]; center = (k+1)*n - n/2 - 1
    assert group_centers(3, 4).tolist() == [1.0, 5.0, 9.0]
    avg = time_average(RawSeries.from_values(np.arange(15.0)), 5)
    assert avg.x.tolist() == [1.5, 6.5, 11.5]


def test_n_one_is_identity() -> None:
    y = [4.0, -1.0, 2.5]
    avg = time_average(RawSeries.from_values(y), 1)
    assert avg.y.tolist() == y
    assert avg.x.tolist() == [-0.5, 0.5, 1.5]


@pytest.mark.parametrize("n", [0, -3])
def test_n_below_one_rejected(n: int) -> None:
    with pytest.raises(ValueError):
        time_average(RawSeries.from_values([1.0, 2.0]), n)


def test_non_integer_n_rejected() -> None:
    with pytest.raises(ValueError):
        time_average(RawSeries.from_values([1.0, 2.0]), 1.5)
