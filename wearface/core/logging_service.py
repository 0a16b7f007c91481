"""
Logging Service - Structured logging with configurable levels
"""
import sys
import logging
from typing import Optional


class LoggingService:
    """
    Centralized logging service with structured output.
    """

    def __init__(self, name: str = 'wear-face', level: str = 'INFO'):
        """
        Initialize logging service.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self._logger = logging.getLogger(name)
        self._set_level(level)
        self._setup_handlers()

    def _set_level(self, level: str) -> None:
        """Set logging level from string"""
        level_map = {
            'DEBUG': logging.DEBUG,
            'INFO': logging.INFO,
            'WARNING': logging.WARNING,
            'ERROR': logging.ERROR,
            'CRITICAL': logging.CRITICAL
        }
        log_level = level_map.get(level.upper(), logging.INFO)
        self._logger.setLevel(log_level)

    def _setup_handlers(self) -> None:
        """Setup console handler with formatting"""
        self._logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self._logger.level)

        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)

        self._logger.addHandler(console_handler)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message"""
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message"""
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message"""
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """
        Log error message.

        Args:
            message: Error message
            exc_info: Include exception traceback
            **kwargs: Additional context
        """
        self._logger.error(message, exc_info=exc_info, extra=kwargs)

    def critical(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """Log critical message"""
        self._logger.critical(message, exc_info=exc_info, extra=kwargs)

    def log_startup(self, version: str, config: dict) -> None:
        """
        Log watch face startup information.

        Args:
            version: Application version
            config: Configuration summary
        """
        display = config.get('display', {})
        self.info("="*60)
        self.info(f"Sunshine Wear Face v{version} starting up")
        self.info(f"Python: {sys.version.split()[0]}")
        self.info(f"Timezone: {config.get('timezone') or 'system'}")
        self.info(f"Display: {display.get('width', 0)}x{display.get('height', 0)} ({display.get('shape', 'round')})")
        self.info(f"Seconds: {'shown' if config.get('show_seconds') else 'hidden'}")
        self.info("="*60)

    def log_shutdown(self) -> None:
        """Log watch face shutdown"""
        self.info("="*60)
        self.info("Sunshine Wear Face shutting down")
        self.info("="*60)


# Global singleton instance
_logging_service: Optional[LoggingService] = None


def get_logger(name: str = 'wear-face', level: str = 'INFO') -> LoggingService:
    """
    Get or create logging service singleton.

    Args:
        name: Logger name
        level: Log level

    Returns:
        LoggingService instance
    """
    global _logging_service
    if _logging_service is None:
        _logging_service = LoggingService(name, level)
    return _logging_service
