"""
Tick Scheduler - Second-aligned redraw timer for interactive mode
"""
from enum import Enum
from typing import Any, Callable, Optional, Protocol


class TimerHost(Protocol):
    """Host event loop able to run one-shot delayed callbacks"""

    def post_delayed(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def remove(self, handle: Any) -> None:
        ...


class SchedulerState(Enum):
    STOPPED = 'stopped'
    RUNNING = 'running'


def delay_to_next_boundary(now_ms: int, rate_ms: int = 1000) -> int:
    """
    Milliseconds until the next multiple of rate_ms.

    Always in (0, rate_ms]; a call exactly on a boundary waits a full period.
    """
    return rate_ms - (now_ms % rate_ms)


class TickScheduler:
    """
    Emits redraw requests aligned to wall-clock boundaries while the face is
    visible and interactive.

    At most one wake is pending at any time. Every change of the visible or
    ambient flag cancels the pending wake before deciding whether to schedule
    a new one.
    """

    def __init__(
        self,
        host: TimerHost,
        on_tick: Callable[[], None],
        now_ms: Callable[[], int],
        rate_ms: int = 1000
    ):
        """
        Initialize tick scheduler.

        Args:
            host: Event loop used to post and remove delayed wakes
            on_tick: Redraw request emitted on every wake
            now_ms: Callable returning epoch milliseconds
            rate_ms: Update period in milliseconds
        """
        if rate_ms <= 0:
            raise ValueError(f"rate_ms must be positive, got {rate_ms}")

        self._host = host
        self._on_tick = on_tick
        self._now_ms = now_ms
        self._rate_ms = rate_ms

        self._visible = False
        self._ambient = False
        self._pending: Optional[Any] = None

    def should_run(self) -> bool:
        """The timer only runs when visible and in interactive mode"""
        return self._visible and not self._ambient

    def set_visible(self, visible: bool) -> None:
        self._visible = visible
        self.update()

    def set_ambient(self, ambient: bool) -> None:
        self._ambient = ambient
        self.update()

    def update(self) -> None:
        """Start the timer if it should be running, stop it otherwise"""
        self._cancel_pending()
        if self.should_run():
            self._schedule_next()

    def shutdown(self) -> None:
        """Cancel any pending wake; used on engine teardown"""
        self._cancel_pending()
        self._visible = False

    def next_delay(self) -> int:
        return delay_to_next_boundary(self._now_ms(), self._rate_ms)

    def _schedule_next(self) -> None:
        self._pending = self._host.post_delayed(self.next_delay(), self._handle_wake)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._host.remove(self._pending)
            self._pending = None

    def _handle_wake(self) -> None:
        self._pending = None
        self._on_tick()
        # on_tick may have changed the flags and rescheduled already
        if self.should_run() and self._pending is None:
            self._schedule_next()

    @property
    def state(self) -> SchedulerState:
        return SchedulerState.RUNNING if self.should_run() else SchedulerState.STOPPED
