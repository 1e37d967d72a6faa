import pytest
from palmon.core.scheduler import DeferredQueue


def test_steps_run_in_due_order_then_schedule_order():
    q = DeferredQueue()
    seen = []
    q.schedule(1500, lambda: seen.append("late"), "late")
    q.schedule(1000, lambda: seen.append("a"), "a")
    q.schedule(1000, lambda: seen.append("b"), "b")
    assert q.labels() == ["a", "b", "late"]
    assert q.drain() == 3
    assert seen == ["a", "b", "late"]
    assert q.now == 1500
    assert not q.pending


def test_advance_only_runs_due_steps():
    q = DeferredQueue()
    seen = []
    q.schedule(1000, lambda: seen.append(1))
    assert q.advance(999) == 0
    assert q.time_until_next() == 1
    assert q.advance(1) == 1
    assert seen == [1]
    assert q.time_until_next() is None


def test_chained_steps_are_relative_to_when_they_were_scheduled():
    q = DeferredQueue()
    seen = []

    def first():
        seen.append(("first", q.now))
        q.schedule(1500, lambda: seen.append(("second", q.now)))

    q.schedule(1000, first)
    q.advance(1000)
    assert seen == [("first", 1000)]
    assert len(q) == 1
    q.advance(1499)
    assert len(seen) == 1
    q.advance(1)
    assert seen[-1] == ("second", 2500)


def test_advance_runs_a_chain_that_fits_in_the_window():
    q = DeferredQueue()
    seen = []
    q.schedule(100, lambda: q.schedule(100, lambda: seen.append("done")))
    assert q.advance(500) == 2
    assert seen == ["done"]
    assert q.now == 500


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        DeferredQueue().schedule(-1, lambda: None)


def test_run_next_on_empty_queue():
    assert DeferredQueue().run_next() is False
