from __future__ import annotations

from datetime import timedelta

import pytest

from conftest import make_time
from kubia_timer.core.models import Penalty, SolveTime, compare
from kubia_timer.core.statistics import average_of, mean_of


def test_recorded_time_applies_penalty():
    assert make_time(10).recorded_time() == timedelta(seconds=10)
    assert make_time(10, Penalty.PLUS_TWO).recorded_time() == timedelta(seconds=12)
    assert make_time(10, Penalty.DNF).recorded_time() is None


def test_negative_elapsed_is_rejected():
    with pytest.raises(ValueError):
        SolveTime(timedelta(seconds=-1))


def test_finished_times_order_by_recorded_time():
    fast = make_time(9.5)
    slow = make_time(10.5)
    plus_two = make_time(9.0, Penalty.PLUS_TWO)  # 11.00 recorded

    assert fast < slow
    assert slow < plus_two
    assert sorted([plus_two, slow, fast]) == [fast, slow, plus_two]
    assert compare(fast, slow) == -1
    assert compare(slow, fast) == 1


def test_dnf_is_worse_than_any_finished_time():
    dnf = make_time(1.0, Penalty.DNF)
    very_slow = make_time(3600)

    assert very_slow < dnf
    assert dnf > very_slow
    assert max([dnf, very_slow]) is dnf


def test_dnfs_tie_under_ranking_but_keep_value_equality():
    first = make_time(5, Penalty.DNF)
    second = make_time(50, Penalty.DNF)

    assert compare(first, second) == 0
    assert not first < second and not second < first
    assert first <= second and first >= second
    assert first != second


def test_equal_recorded_times_compare_equal():
    assert compare(make_time(12), make_time(10, Penalty.PLUS_TWO)) == 0


@pytest.mark.parametrize(
    ("seconds", "penalty", "expected"),
    [
        (124.01, Penalty.PLUS_TWO, "2:06.01+"),
        (1.239, Penalty.NONE, "1.23"),
        (0, Penalty.NONE, "0.00"),
        (59.999, Penalty.NONE, "59.99"),
        (60, Penalty.NONE, "1:00.00"),
        (605.5, Penalty.NONE, "10:05.50"),
        (9.87, Penalty.PLUS_TWO, "11.87+"),
        (12.34, Penalty.DNF, "DNF"),
    ],
)
def test_display(seconds, penalty, expected):
    solve_time = make_time(seconds, penalty)
    assert solve_time.display() == expected
    assert str(solve_time) == expected


def test_with_penalty_returns_new_value():
    original = make_time(10)
    edited = original.with_penalty(Penalty.PLUS_TWO)

    assert original.penalty is Penalty.NONE
    assert edited.penalty is Penalty.PLUS_TWO
    assert edited.elapsed == original.elapsed


def test_mean_of_is_untrimmed():
    mean = mean_of([make_time(10), make_time(11), make_time(15)])
    assert mean == make_time(12)


def test_mean_of_counts_plus_two():
    mean = mean_of([make_time(10, Penalty.PLUS_TWO), make_time(10), make_time(10)])
    assert mean.recorded_time() == timedelta(seconds=32) / 3


def test_mean_of_with_dnf_is_dnf():
    assert mean_of([make_time(10), make_time(10, Penalty.DNF), make_time(10)]).is_dnf()


def test_mean_of_empty_window_is_an_error():
    with pytest.raises(ValueError):
        mean_of([])


def test_average_of_drops_best_and_worst():
    times = [make_time(s) for s in (10, 12, 9, 100, 11)]
    assert average_of(times) == make_time(11)


def test_average_of_tolerates_one_dnf():
    times = [make_time(10), make_time(12), make_time(8, Penalty.DNF), make_time(9), make_time(11)]
    average = average_of(times)

    assert not average.is_dnf()
    assert average == make_time(11)


def test_average_of_with_two_dnfs_is_dnf():
    times = [make_time(10), make_time(1, Penalty.DNF), make_time(9), make_time(2, Penalty.DNF), make_time(11)]
    assert average_of(times).is_dnf()


def test_average_of_excludes_one_occurrence_of_each_tie():
    # Two 9s tie for best and two 20s tie for worst; one of each is dropped.
    times = [make_time(s) for s in (9, 20, 9, 20, 13)]
    assert average_of(times) == make_time(14)


def test_average_of_all_equal_values():
    times = [make_time(10)] * 5
    assert average_of(times) == make_time(10)


def test_average_of_needs_three_values():
    with pytest.raises(ValueError):
        average_of([make_time(1), make_time(2)])
