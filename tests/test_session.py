from __future__ import annotations

from conftest import make_session, make_time
from kubia_timer.core.models import Penalty, Solve
from kubia_timer.core.services.session import Session


def test_empty_session_has_no_statistics():
    session = Session()

    assert session.get_n_solves() == 0
    assert len(session) == 0
    assert session.last_solve() is None
    assert session.last_mo3() is None
    assert session.last_ao5() is None
    assert session.last_ao12() is None
    assert session.best_mo3() is None
    assert session.get_solve(0) is None
    assert list(session.iter()) == []


def test_mo3_appears_with_third_solve():
    session = make_session(10, 11)
    assert session.get_mo3(0) is None
    assert session.get_mo3(1) is None

    session.add_solve(Solve(time=make_time(15)))

    assert session.get_mo3(2) == make_time(12)
    assert session.last_mo3() == make_time(12)


def test_statistics_presence_follows_index():
    session = make_session(*range(10, 24))

    for i, entry in enumerate(session):
        assert (entry.mo3 is not None) == (i >= 2)
        assert (entry.ao5 is not None) == (i >= 4)
        assert (entry.ao12 is not None) == (i >= 11)


def test_queries_return_none_until_session_is_long_enough():
    session = make_session(10, 11, 12, 13)

    assert session.get_mo3(3) is not None
    assert session.get_ao5(3) is None
    assert session.get_ao12(3) is None


def test_queries_out_of_range_return_none():
    session = make_session(*range(10, 22))

    assert session.get_mo3(-1) is None
    assert session.get_ao5(12) is None
    assert session.get_ao12(100) is None
    assert session.get_solve(12) is None


def test_ao5_trims_best_and_worst():
    session = make_session(10, 12, 9, 100, 11)
    assert session.get_ao5(4) == make_time(11)


def test_ao5_with_single_dnf_is_finite():
    session = make_session(10, 12, make_time(8, Penalty.DNF), 9, 11)

    ao5 = session.get_ao5(4)
    assert ao5 is not None and not ao5.is_dnf()
    assert ao5 == make_time(11)


def test_ao5_with_two_dnfs_is_dnf():
    session = make_session(10, make_time(8, Penalty.DNF), 9, make_time(8, Penalty.DNF), 11)
    assert session.get_ao5(4).is_dnf()


def test_windows_are_trailing():
    session = make_session(10, 10, 10, 30, 30, 30)

    assert session.get_mo3(2) == make_time(10)
    assert session.get_mo3(5) == make_time(30)
    assert session.get_ao5(4) == make_time(50 / 3)
    # 10, 10, 30, 30, 30 -> drop 10 and 30 -> (10 + 30 + 30) / 3
    assert session.get_ao5(5) == make_time(70 / 3)


def test_ao12_drops_single_best_and_worst():
    times = [20.0] * 10 + [5.0, 60.0]
    session = make_session(*times)

    assert session.get_ao12(11) == make_time(20)
    assert session.last_ao12() == make_time(20)


def test_best_statistics_ignore_missing_values():
    session = make_session(12, 10, 11, 20, 30)

    # mo3 values: 11.00, 13.67, 20.33
    assert session.best_mo3() == make_time(11)
    assert session.best_ao5() == session.get_ao5(4)
    assert session.best_ao12() is None


def test_best_statistic_prefers_finished_over_dnf():
    session = make_session(10, make_time(10, Penalty.DNF), 10, 10)

    assert session.get_mo3(2).is_dnf()
    assert session.get_mo3(3).is_dnf()
    session.add_solve(Solve(time=make_time(12)))
    assert session.best_mo3() == make_time(32 / 3)


def test_set_last_penalty_updates_only_last_entry():
    session = make_session(*range(10, 22))
    before = [(e.mo3, e.ao5, e.ao12) for e in session][:-1]

    assert session.set_last_penalty(Penalty.DNF)

    last = session.last_solve()
    assert last.time.is_dnf()
    assert session.last_mo3().is_dnf()
    # 21 was the worst time, so a DNF replaces it as the dropped worst.
    assert session.last_ao5() == make_time(19)
    assert not session.last_ao12().is_dnf()
    assert [(e.mo3, e.ao5, e.ao12) for e in session][:-1] == before


def test_penalty_edit_through_last_solve_then_update():
    session = make_session(10, 10, 10)

    solve = session.last_solve()
    solve.time = solve.time.with_penalty(Penalty.PLUS_TWO)
    session.update_statistics_last()

    assert session.get_mo3(2) == make_time(32 / 3)
    session.update_statistics_last()
    assert session.get_mo3(2) == make_time(32 / 3)


def test_penalty_edit_can_be_reverted():
    session = make_session(10, 14, 12, 13, 11)
    original = session.last_ao5()

    session.set_last_penalty(Penalty.PLUS_TWO)
    assert session.last_ao5() != original
    session.set_last_penalty(Penalty.NONE)

    assert session.last_ao5() == original


def test_set_last_penalty_on_empty_session():
    assert Session().set_last_penalty(Penalty.DNF) is False


def test_update_statistics_recomputes_following_windows():
    session = make_session(10, 10, 10, 10, 10, 10)

    first = session.get_solve(0)
    first.time = first.time.with_penalty(Penalty.DNF)
    session.update_statistics(0)

    assert session.get_mo3(2).is_dnf()
    assert session.get_mo3(3) == make_time(10)
    assert session.get_ao5(4) == make_time(10)
    assert session.get_ao5(5) == make_time(10)


def test_iteration_is_restartable_and_ordered():
    session = make_session(3, 1, 2)

    first = [e.solve.time for e in session.iter()]
    second = [e.solve.time for e in session]

    assert first == second == [make_time(3), make_time(1), make_time(2)]


def test_get_entry_and_scramble_metadata():
    session = Session()
    session.add_solve(Solve(time=make_time(10), scramble="R U R' U'"))

    entry = session.get_entry(0)
    assert entry is not None
    assert entry.solve.scramble == "R U R' U'"
    assert session.get_entry(1) is None
