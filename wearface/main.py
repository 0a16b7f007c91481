"""
Main entry point for the Sunshine Wear Face
"""
import sys
import signal

from wearface.core.config_service import config
from wearface.core.clock_service import ClockService
from wearface.core.data_listener import WeatherDataListener
from wearface.core.engine import WatchFaceEngine
from wearface.core.logging_service import get_logger
from wearface.ui.main_window import WatchFaceWindow
from wearface.ui.renderer import FaceRenderer


class Application:
    """
    Main application orchestrator.
    """

    def __init__(self):
        """Initialize application"""
        config.reload()

        log_level = config.get('logging.level', 'INFO')
        self._logger = get_logger('wear-face', log_level)

        version = config.get('app.version', '1.0.0')
        self._logger.log_startup(version, self._get_config_summary())

        self._engine = None
        self._listener = None
        self._window = None

    def _get_config_summary(self) -> dict:
        """Get configuration summary for logging"""
        return {
            'timezone': config.get('timezone', ''),
            'display': {
                'width': config.get('display.width', 320),
                'height': config.get('display.height', 320),
                'shape': config.get('display.shape', 'round'),
            },
            'show_seconds': config.get('face.show_seconds', False),
        }

    def _initialize(self) -> None:
        """Build window, renderer, engine and data listener"""
        width = config.get('display.width', 320)
        height = config.get('display.height', 320)
        shape = config.get('display.shape', 'round')
        if shape not in ('round', 'square'):
            self._logger.warning(f"Unknown display shape '{shape}', using round")
            shape = 'round'
        is_round = shape == 'round'

        self._window = WatchFaceWindow(
            logger=self._logger,
            width=width,
            height=height,
            is_round=is_round,
            fullscreen=config.get('display.fullscreen', False),
            time_tick_seconds=config.get('face.time_tick_seconds', 60),
            ambient_timeout=config.get('face.ambient_timeout', 0),
            low_bit_ambient=config.get('face.low_bit_ambient', False)
        )
        self._window.initialize()

        renderer = FaceRenderer(
            width,
            height,
            is_round=is_round,
            font_file=config.get('face.font_file'),
            logger=self._logger
        )
        clock = ClockService(config.get('timezone', ''))
        self._logger.info(f"Clock initialized: timezone={clock.timezone or 'system'}")

        self._engine = WatchFaceEngine(
            host=self._window,
            renderer=renderer,
            clock=clock,
            logger=self._logger,
            update_rate_ms=config.get('face.interactive_update_rate_ms', 1000),
            show_seconds=config.get('face.show_seconds', False)
        )
        self._listener = WeatherDataListener(self._engine.on_weather_update, self._logger)
        self._window.attach(self._engine, self._listener)

        seed = config.get('weather.seed')
        if isinstance(seed, dict):
            self._listener.on_payload(seed)
        elif seed is not None:
            self._logger.warning("Ignoring weather.seed: expected a mapping")

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown"""
        def signal_handler(signum, frame):
            self._logger.info(f"Received signal {signum}, shutting down")
            self.shutdown()
            sys.exit(0)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        if hasattr(signal, 'SIGHUP'):
            signal.signal(signal.SIGHUP, lambda signum, frame: self.reload_config())

    def reload_config(self) -> None:
        """Re-read the config and hand its timezone to the engine, as a zone change"""
        config.reload()
        timezone = config.get('timezone', '')
        self._logger.info(f"Config reloaded: timezone={timezone or 'system'}")
        if self._engine and not self._engine.on_timezone_changed(timezone):
            self._logger.warning(f"Keeping previous timezone, '{timezone}' is not valid")

    def run(self) -> None:
        """Run the application"""
        try:
            self._setup_signal_handlers()
            self._initialize()

            self._logger.info("Watch face started")

            # Blocks until the window closes
            self._window.start()

        except KeyboardInterrupt:
            self._logger.info("Keyboard interrupt received")
        except Exception as e:
            self._logger.critical(f"Fatal error: {e}", exc_info=True)
            raise
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        """Cleanup and shutdown"""
        if self._window is None:
            return
        window, self._window = self._window, None
        window.stop()
        self._logger.log_shutdown()


def main():
    """Main entry point"""
    app = Application()
    app.run()


if __name__ == '__main__':
    main()
