"""
Main Window - Tkinter host for the watch face engine
"""
import time
import tkinter as tk
from typing import Any, Callable, Optional

from PIL import ImageTk

from ..core.engine import WatchFaceEngine
from ..core.data_listener import DataEvent, WeatherDataListener
from ..core.logging_service import LoggingService
from ..core.tick_scheduler import delay_to_next_boundary


class WatchFaceWindow:
    """
    Tk window standing in for the watch face hosting service.

    Delivers lifecycle callbacks to the engine on the Tk thread:
    visibility from map/unmap events, ambient mode from the 'a' key or an
    idle timeout, and a coarse minute tick.
    """

    def __init__(
        self,
        logger: LoggingService,
        width: int = 320,
        height: int = 320,
        is_round: bool = True,
        fullscreen: bool = False,
        time_tick_seconds: int = 60,
        ambient_timeout: int = 0,
        low_bit_ambient: bool = False
    ):
        """
        Initialize main window.

        Args:
            logger: Logging service
            width: Window width
            height: Window height
            is_round: Screen shape reported to the engine
            fullscreen: Whether to run fullscreen
            time_tick_seconds: Coarse tick period in seconds
            ambient_timeout: Idle seconds before entering ambient mode, 0 disables
            low_bit_ambient: Reported screen property
        """
        self._logger = logger
        self._width = width
        self._height = height
        self._is_round = is_round
        self._fullscreen = fullscreen
        self._time_tick_ms = max(1, time_tick_seconds) * 1000
        self._ambient_timeout_ms = max(0, ambient_timeout) * 1000
        self._low_bit_ambient = low_bit_ambient

        self._root: Optional[tk.Tk] = None
        self._label: Optional[tk.Label] = None
        self._photo: Optional[ImageTk.PhotoImage] = None

        self._engine: Optional[WatchFaceEngine] = None
        self._listener: Optional[WeatherDataListener] = None

        self._redraw_pending = False
        self._tick_handle: Optional[str] = None
        self._idle_handle: Optional[str] = None
        self._ambient = False
        self._running = False

    def attach(self, engine: WatchFaceEngine, listener: WeatherDataListener) -> None:
        self._engine = engine
        self._listener = listener

    def initialize(self) -> None:
        """Initialize Tkinter window"""
        self._logger.info("Initializing watch face window")

        self._root = tk.Tk()
        self._root.title("Sunshine Wear Face")
        self._root.configure(bg='#000000')

        if self._fullscreen:
            self._root.attributes('-fullscreen', True)
            self._root.config(cursor='none')
        else:
            self._root.geometry(f"{self._width}x{self._height}")
            self._root.resizable(False, False)

        self._label = tk.Label(self._root, bd=0, highlightthickness=0, bg='#000000')
        self._label.pack(fill=tk.BOTH, expand=True)

        self._root.bind('<Map>', lambda event: self._set_visible(True))
        self._root.bind('<Unmap>', lambda event: self._set_visible(False))
        self._root.bind('<KeyPress-a>', self._toggle_ambient)
        self._root.bind('<Escape>', self._exit_fullscreen)
        for sequence in ('<Motion>', '<Button>', '<Key>'):
            self._root.bind(sequence, self._on_user_activity, add='+')
        self._root.protocol("WM_DELETE_WINDOW", self.stop)

        self._logger.info(f"Window initialized: {self._width}x{self._height}")

    # Timer host

    def post_delayed(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        return self._root.after(delay_ms, callback)

    def remove(self, handle: Any) -> None:
        if self._root:
            self._root.after_cancel(handle)

    def invalidate(self) -> None:
        """Request a redraw; several requests before the next idle collapse into one"""
        if self._redraw_pending or not self._root:
            return
        self._redraw_pending = True
        self._root.after_idle(self._draw)

    # Inbound data

    def deliver_data_events(self, events) -> int:
        """Hand decoded data events to the listener; call on the Tk thread"""
        if not self._listener:
            return 0
        return self._listener.on_data_changed(
            [e if isinstance(e, DataEvent) else DataEvent.from_dict(e) for e in events]
        )

    # Internals

    def _draw(self) -> None:
        self._redraw_pending = False
        if not self._running or not self._engine:
            return
        try:
            image = self._engine.on_draw()
            self._photo = ImageTk.PhotoImage(image)
            self._label.configure(image=self._photo)
        except Exception as e:
            self._logger.error(f"Draw error: {e}", exc_info=True)

    def _set_visible(self, visible: bool) -> None:
        if self._engine:
            self._engine.on_visibility_changed(visible)
        if visible:
            self.invalidate()

    def _set_ambient(self, ambient: bool) -> None:
        if ambient == self._ambient:
            return
        self._ambient = ambient
        self._logger.info(f"{'Entering' if ambient else 'Leaving'} ambient mode")
        if self._engine:
            self._engine.on_ambient_mode_changed(ambient)

    def _toggle_ambient(self, event=None) -> None:
        self._set_ambient(not self._ambient)
        self._restart_idle_timer()

    def _on_user_activity(self, event=None) -> None:
        self._set_ambient(False)
        self._restart_idle_timer()

    def _restart_idle_timer(self) -> None:
        if not self._ambient_timeout_ms or not self._root:
            return
        if self._idle_handle is not None:
            self._root.after_cancel(self._idle_handle)
        self._idle_handle = self._root.after(self._ambient_timeout_ms, self._on_idle)

    def _on_idle(self) -> None:
        self._idle_handle = None
        self._set_ambient(True)

    def _schedule_time_tick(self) -> None:
        now_ms = int(time.time() * 1000)
        delay = delay_to_next_boundary(now_ms, self._time_tick_ms)
        self._tick_handle = self._root.after(delay, self._on_time_tick)

    def _on_time_tick(self) -> None:
        self._tick_handle = None
        if not self._running:
            return
        if self._engine:
            self._engine.on_time_tick()
        self._schedule_time_tick()

    def _exit_fullscreen(self, event=None) -> None:
        """Exit fullscreen mode"""
        if self._root and self._fullscreen:
            self._root.attributes('-fullscreen', False)
            self._root.config(cursor='')
            self._fullscreen = False
            self._logger.info("Exited fullscreen mode")

    def start(self) -> None:
        """Start UI event loop"""
        if not self._root:
            self.initialize()

        self._logger.info("Starting UI event loop")
        self._running = True

        if self._engine:
            self._engine.on_properties_changed(self._low_bit_ambient)
            self._engine.on_apply_window_insets(self._is_round)

        self._schedule_time_tick()
        self._restart_idle_timer()

        self._root.mainloop()

    def stop(self) -> None:
        """Stop UI and cleanup"""
        if not self._running and not self._root:
            return
        self._logger.info("Stopping UI")
        self._running = False

        if self._engine:
            self._engine.on_destroy()

        if self._root:
            for handle in (self._tick_handle, self._idle_handle):
                if handle is not None:
                    self._root.after_cancel(handle)
            self._tick_handle = None
            self._idle_handle = None
            try:
                self._root.quit()
                self._root.destroy()
            except tk.TclError as e:
                self._logger.error(f"Error during UI cleanup: {e}")

        self._root = None

    def is_running(self) -> bool:
        """Check if UI is running"""
        return self._running
