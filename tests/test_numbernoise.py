from datetime import timedelta

import pytest

from drills.numbernoise import even_odds, random_n_seconds

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def test_stream_of_nonzero_numbers():
    numbers = list(random_n_seconds(0.001, 0.05))
    assert numbers
    assert all(n != 0 for n in numbers)


def test_numbers_fit_in_signed_64_bits():
    numbers = list(random_n_seconds(0.001, 0.03))
    assert all(INT64_MIN <= n <= INT64_MAX for n in numbers)


def test_tick_count_bounded_by_lifetime():
    numbers = list(random_n_seconds(0.005, 0.05))
    assert 0 < len(numbers) <= 10


def test_accepts_timedelta():
    numbers = list(
        random_n_seconds(timedelta(milliseconds=1), timedelta(milliseconds=20))
    )
    assert len(numbers) >= 1


def test_zero_lifetime_yields_nothing():
    assert list(random_n_seconds(0.01, 0)) == []


@pytest.mark.parametrize("precision", [0, -1, timedelta(0)])
def test_non_positive_precision_rejected(precision):
    with pytest.raises(ValueError):
        random_n_seconds(precision, 1)


def test_even_odds_rejects_bad_precision():
    with pytest.raises(ValueError):
        even_odds(0, 1)


def test_even_odds_split():
    evens, odds = even_odds(0.001, 0.1)
    even_list = list(evens)
    odd_list = list(odds)
    assert even_list or odd_list
    assert all(n % 2 == 0 for n in even_list)
    assert all(n % 2 == 1 for n in odd_list)