"""
Clock Service - Time and date logic
Handles timezone-aware time retrieval and watch face formatting
"""
import time
from datetime import datetime, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


DATE_FORMAT = '%a, %b %d %Y'


class ClockService:
    """
    Centralized clock/time service with timezone support.

    An empty timezone name follows the system zone, resolved again for every
    reading so DST transitions apply. The time source returns epoch seconds
    and defaults to time.time().
    """

    def __init__(self, timezone: str = '', time_source: Optional[Callable[[], float]] = None):
        """
        Initialize clock service with timezone.

        Args:
            timezone: IANA timezone string (e.g., 'America/Los_Angeles') or '' for system
            time_source: Callable returning epoch seconds
        """
        self._timezone = timezone or ''
        self._tz_obj: Optional[tzinfo] = None
        self._time_source = time_source or time.time
        self._load_timezone()

    def _load_timezone(self) -> None:
        """Load timezone object, fallback to UTC on error"""
        if not self._timezone:
            self._tz_obj = None
            return
        try:
            self._tz_obj = ZoneInfo(self._timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            print(f"Warning: Invalid timezone '{self._timezone}', using UTC: {e}")
            self._timezone = 'UTC'
            self._tz_obj = ZoneInfo('UTC')

    def set_timezone(self, timezone: str) -> bool:
        """
        Change timezone dynamically.

        Args:
            timezone: IANA timezone string, or '' for the system zone

        Returns:
            True if successful, False otherwise
        """
        if not timezone:
            self._timezone = ''
            self._load_timezone()
            return True
        try:
            tz_obj = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            print(f"Failed to set timezone '{timezone}': {e}")
            return False
        self._timezone = timezone
        self._tz_obj = tz_obj
        return True

    def refresh_timezone(self) -> None:
        """Re-read the TZ environment when following the system zone"""
        if not self._timezone and hasattr(time, 'tzset'):
            time.tzset()

    def current_millis(self) -> int:
        """Epoch milliseconds from the time source"""
        return int(self._time_source() * 1000)

    def get_current_time(self) -> datetime:
        """
        Get current time in configured timezone.

        Returns:
            Timezone-aware datetime object
        """
        if self._tz_obj is None:
            return datetime.fromtimestamp(self._time_source()).astimezone()
        return datetime.fromtimestamp(self._time_source(), self._tz_obj)

    @staticmethod
    def format_time(now: datetime, show_seconds: bool = False) -> str:
        """
        Format a watch face time string.

        Hours are not zero padded: '9:05' or '9:05:07'.
        """
        if show_seconds:
            return f"{now.hour}:{now.minute:02d}:{now.second:02d}"
        return f"{now.hour}:{now.minute:02d}"

    @staticmethod
    def format_date(now: datetime) -> str:
        """Format a watch face date string, e.g. 'Mon, Oct 19 2026'"""
        return now.strftime(DATE_FORMAT)

    @property
    def timezone(self) -> str:
        """Get configured timezone string ('' when following the system)"""
        return self._timezone
