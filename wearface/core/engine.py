"""
Watch Face Engine - Lifecycle callbacks and redraw orchestration
"""
from datetime import datetime
from typing import Any, Callable, NamedTuple, Optional, Protocol

from .clock_service import ClockService
from .icons import resolve_icon
from .logging_service import LoggingService
from .tick_scheduler import SchedulerState, TickScheduler
from .weather_state import WeatherSnapshot


class Frame(NamedTuple):
    """Everything the renderer needs for one frame"""
    now: datetime
    time_text: str
    date_text: Optional[str]
    ambient: bool
    weather: Optional[WeatherSnapshot]
    icon: Optional[str]


class FaceHost(Protocol):
    """Host window driving the engine"""

    def post_delayed(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def remove(self, handle: Any) -> None:
        ...

    def invalidate(self) -> None:
        ...


class FaceRendererLike(Protocol):
    def apply_shape(self, is_round: bool) -> None:
        ...

    def set_antialias(self, enabled: bool) -> None:
        ...

    def load_icon(self, icon: Optional[str]) -> None:
        ...

    def render(self, frame: Frame) -> Any:
        ...


class WatchFaceEngine:
    """
    Digital watch face with optional seconds.

    In ambient mode only the time is drawn. On screens with low-bit ambient
    mode the text is drawn without anti-aliasing while ambient.
    """

    def __init__(
        self,
        host: FaceHost,
        renderer: FaceRendererLike,
        clock: ClockService,
        logger: Optional[LoggingService] = None,
        update_rate_ms: int = 1000,
        show_seconds: bool = False
    ):
        """
        Initialize engine.

        Args:
            host: Host window providing timers and invalidation
            renderer: Frame renderer
            clock: Clock service for wall time and formatting
            logger: Logging service
            update_rate_ms: Interactive redraw period in milliseconds
            show_seconds: Show seconds in interactive mode
        """
        self._host = host
        self._renderer = renderer
        self._clock = clock
        self._logger = logger
        self._show_seconds = show_seconds

        self._weather = WeatherSnapshot()
        self._scheduler = TickScheduler(
            host,
            on_tick=self.invalidate,
            now_ms=clock.current_millis,
            rate_ms=update_rate_ms
        )

        self._ambient = False
        self._low_bit_ambient = False
        self._last_icon: Optional[str] = None
        self._destroyed = False

    # Host lifecycle callbacks

    def on_visibility_changed(self, visible: bool) -> None:
        self._debug(f"Visibility changed: visible={visible}")
        if visible:
            # The zone may have changed while hidden
            self._clock.refresh_timezone()
        self._scheduler.set_visible(visible)

    def on_ambient_mode_changed(self, in_ambient_mode: bool) -> None:
        self._debug(f"Ambient mode changed: ambient={in_ambient_mode}")
        if self._ambient != in_ambient_mode:
            self._ambient = in_ambient_mode
            if self._low_bit_ambient:
                self._renderer.set_antialias(not in_ambient_mode)
            self.invalidate()
        self._scheduler.set_ambient(in_ambient_mode)

    def on_time_tick(self) -> None:
        """Coarse host tick, delivered about once a minute"""
        self.invalidate()

    def on_properties_changed(self, low_bit_ambient: bool) -> None:
        self._low_bit_ambient = low_bit_ambient
        if not low_bit_ambient:
            self._renderer.set_antialias(True)
        elif self._ambient:
            self._renderer.set_antialias(False)

    def on_apply_window_insets(self, is_round: bool) -> None:
        self._debug(f"Applying {'round' if is_round else 'square'} layout")
        self._renderer.apply_shape(is_round)

    def on_timezone_changed(self, timezone: str) -> bool:
        """Delivered by the application on SIGHUP after reloading its config"""
        changed = self._clock.set_timezone(timezone)
        if changed:
            self._debug(f"Timezone changed: {timezone or 'system'}")
            self.invalidate()
        return changed

    def on_weather_update(self, low: int, high: int, condition_code: int) -> None:
        self._weather.apply_update(low, high, condition_code)
        if self._scheduler.should_run():
            self.invalidate()

    def on_destroy(self) -> None:
        self._scheduler.shutdown()
        self._destroyed = True
        self._debug("Engine destroyed")

    # Redraw

    def invalidate(self) -> None:
        """Ask the host for a redraw"""
        if not self._destroyed:
            self._host.invalidate()

    def on_draw(self) -> Any:
        """
        Build the current frame and hand it to the renderer.

        Returns:
            Whatever the renderer produced
        """
        return self._renderer.render(self.build_frame())

    def build_frame(self) -> Frame:
        now = self._clock.get_current_time()

        if self._ambient:
            return Frame(
                now=now,
                time_text=self._clock.format_time(now),
                date_text=None,
                ambient=True,
                weather=None,
                icon=None
            )

        icon = resolve_icon(self._weather.condition_code) if self._weather.has_data() else None
        if icon != self._last_icon:
            self._renderer.load_icon(icon)
            self._last_icon = icon

        return Frame(
            now=now,
            time_text=self._clock.format_time(now, self._show_seconds),
            date_text=self._clock.format_date(now),
            ambient=False,
            weather=self._weather,
            icon=icon
        )

    def _debug(self, message: str) -> None:
        if self._logger:
            self._logger.debug(message)

    @property
    def timer_state(self) -> SchedulerState:
        return self._scheduler.state
