import pytest

from mikekit.timers import TimerHandle, TimerManager, TimerState


def test_timer_fires_after_delay():
    manager = TimerManager()
    calls = []
    manager.set_timer(lambda: calls.append(manager.now), 5.0)
    manager.advance(4.0)
    assert calls == []
    manager.advance(1.0)
    assert calls == [pytest.approx(5.0)]


def test_timer_fires_only_once():
    manager = TimerManager()
    calls = []
    handle = manager.set_timer(lambda: calls.append(1), 1.0)
    manager.advance(10.0)
    assert calls == [1]
    assert not manager.exists(handle)
    assert len(manager) == 0


def test_elapsed_plus_remaining_equals_delay():
    manager = TimerManager()
    handle = manager.set_timer(lambda: None, 8.0)
    manager.advance(2.5)
    assert manager.elapsed(handle) + manager.remaining(handle) == pytest.approx(8.0)
    assert manager.elapsed(handle) == pytest.approx(2.5)


def test_state_snapshot_matches_queries():
    manager = TimerManager()
    handle = manager.set_timer(lambda: None, 3.0)
    manager.advance(1.0)
    state = manager.state(handle)
    assert state == TimerState(True, manager.elapsed(handle), manager.remaining(handle))


def test_unknown_handle_reports_minus_one():
    manager = TimerManager()
    state = manager.state(TimerHandle(999))
    assert state == TimerState(False, -1.0, -1.0)
    assert manager.state(None) == TimerState(False, -1.0, -1.0)


def test_cleared_timer_does_not_fire():
    manager = TimerManager()
    calls = []
    handle = manager.set_timer(lambda: calls.append(1), 2.0)
    manager.clear_timer(handle)
    manager.advance(5.0)
    assert calls == []
    assert not manager.exists(handle)


def test_clear_none_is_harmless():
    manager = TimerManager()
    handle = manager.set_timer(lambda: None, 2.0)
    manager.clear_timer(None)
    assert manager.exists(handle)


def test_timers_fire_in_expiry_order():
    manager = TimerManager()
    order = []
    manager.set_timer(lambda: order.append("late"), 3.0)
    manager.set_timer(lambda: order.append("early"), 1.0)
    manager.set_timer(lambda: order.append("middle"), 2.0)
    manager.advance(5.0)
    assert order == ["early", "middle", "late"]


def test_executing_timer_reports_zero_remaining():
    manager = TimerManager()
    seen = []
    holder = {}

    def callback():
        seen.append(manager.state(holder["handle"]))

    holder["handle"] = manager.set_timer(callback, 4.0)
    manager.advance(4.0)
    assert seen == [TimerState(True, 4.0, 0.0)]


def test_timer_set_from_callback_fires_within_same_advance():
    manager = TimerManager()
    calls = []
    inner = []

    def first():
        calls.append("first")
        inner.append(manager.set_timer(lambda: calls.append("second"), 1.0))

    handle = manager.set_timer(first, 1.0)
    manager.advance(2.0)
    assert calls == ["first", "second"]
    assert not manager.exists(handle)
    assert not manager.exists(inner[0])
    assert len(manager) == 0
    assert manager.now == pytest.approx(2.0)


def test_now_moves_by_delta():
    manager = TimerManager()
    manager.advance(1.5)
    manager.advance(2.5)
    assert manager.now == pytest.approx(4.0)


@pytest.mark.parametrize("delay", [0.0, -1.0])
def test_non_positive_delay_rejected(delay):
    manager = TimerManager()
    with pytest.raises(ValueError):
        manager.set_timer(lambda: None, delay)


def test_negative_advance_rejected():
    manager = TimerManager()
    with pytest.raises(ValueError):
        manager.advance(-0.5)