import pytest

from wearface.core.tick_scheduler import SchedulerState, TickScheduler, delay_to_next_boundary


def make_scheduler(host, now_ms=lambda: 1_700_000_000_250):
    ticks = []
    scheduler = TickScheduler(host, on_tick=lambda: ticks.append(1), now_ms=now_ms)
    return scheduler, ticks


@pytest.mark.parametrize("visible,ambient,expected", [
    (True, False, True),
    (True, True, False),
    (False, False, False),
    (False, True, False),
])
def test_should_run_truth_table(host, visible, ambient, expected):
    scheduler, _ = make_scheduler(host)
    scheduler.set_visible(visible)
    scheduler.set_ambient(ambient)

    assert scheduler.should_run() is expected
    assert (scheduler.state is SchedulerState.RUNNING) is expected
    assert (len(host.pending) == 1) is expected


@pytest.mark.parametrize("now_ms,expected", [
    (0, 1000),
    (1, 999),
    (999, 1),
    (1000, 1000),
    (1_700_000_000_250, 750),
])
def test_delay_to_next_boundary(now_ms, expected):
    assert delay_to_next_boundary(now_ms) == expected


def test_delay_always_within_one_period():
    for now_ms in range(0, 5000, 7):
        assert 0 < delay_to_next_boundary(now_ms) <= 1000


def test_starting_twice_leaves_one_pending_wake(host):
    scheduler, _ = make_scheduler(host)
    scheduler.set_visible(True)
    scheduler.update()
    scheduler.update()

    assert len(host.pending) == 1
    assert len(host.removed) == 2


def test_wake_emits_tick_and_reschedules_aligned(host):
    now = [1_700_000_000_250]
    scheduler, ticks = make_scheduler(host, now_ms=lambda: now[0])
    scheduler.set_visible(True)
    assert host.posted == [750]

    now[0] = 1_700_000_001_003
    host.fire_next()

    assert ticks == [1]
    assert host.posted == [750, 997]
    assert len(host.pending) == 1


def test_stop_cancels_pending_wake(host):
    scheduler, ticks = make_scheduler(host)
    scheduler.set_visible(True)
    scheduler.set_ambient(True)

    assert scheduler.state is SchedulerState.STOPPED
    assert host.pending == {}
    assert ticks == []


def test_stop_while_stopped_is_noop(host):
    scheduler, _ = make_scheduler(host)
    scheduler.set_ambient(True)
    scheduler.set_visible(False)

    assert host.posted == []
    assert host.removed == []


def test_wake_does_not_reschedule_when_tick_stops_timer(host):
    scheduler = None

    def tick():
        scheduler.set_ambient(True)

    scheduler = TickScheduler(host, on_tick=tick, now_ms=lambda: 0)
    scheduler.set_visible(True)
    host.fire_next()

    assert host.pending == {}


def test_shutdown_cancels_and_stops(host):
    scheduler, _ = make_scheduler(host)
    scheduler.set_visible(True)
    scheduler.shutdown()

    assert host.pending == {}
    assert scheduler.state is SchedulerState.STOPPED


def test_custom_rate(host):
    scheduler = TickScheduler(host, on_tick=lambda: None, now_ms=lambda: 12_345, rate_ms=500)
    scheduler.set_visible(True)

    assert host.posted == [155]


def test_rejects_non_positive_rate(host):
    with pytest.raises(ValueError):
        TickScheduler(host, on_tick=lambda: None, now_ms=lambda: 0, rate_ms=0)
