"""
Weather Data Listener - Applies weather items synced from the phone
"""
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .logging_service import LoggingService


WEATHER_PATH = '/weather'

# Keys written by the phone app; the short names are accepted too
KEY_PREFIX = 'com.example.android.sunshine.data.'
MIN_TEMP_KEY = KEY_PREFIX + 'min_temp'
MAX_TEMP_KEY = KEY_PREFIX + 'max_temp'
WEATHER_ID_KEY = KEY_PREFIX + 'weather_id'


class DataEvent:
    """
    One changed or deleted data item as delivered by a sync transport.
    """

    TYPE_CHANGED = 1
    TYPE_DELETED = 2

    def __init__(self, type: int, path: str, data: Optional[Mapping[str, Any]] = None):
        self.type = type
        self.path = path
        self.data: Mapping[str, Any] = data or {}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> 'DataEvent':
        """
        Build an event from a plain mapping.

        Expected shape: {'type': 'changed'|'deleted', 'path': '/weather', 'data': {...}}.
        A missing type means 'changed'.
        """
        type_name = str(raw.get('type', 'changed')).lower()
        event_type = cls.TYPE_DELETED if type_name == 'deleted' else cls.TYPE_CHANGED
        return cls(event_type, raw.get('path', ''), raw.get('data') or {})

    def __repr__(self) -> str:
        kind = 'changed' if self.type == self.TYPE_CHANGED else 'deleted'
        return f'DataEvent({kind}, {self.path!r})'


class WeatherDataListener:
    """
    Filters a batch of data events down to weather updates.

    Events are handled in delivery order, so the last weather item of a batch
    is the one left on the face.
    """

    def __init__(
        self,
        on_weather_update: Callable[[int, int, int], None],
        logger: Optional[LoggingService] = None
    ):
        """
        Initialize listener.

        Args:
            on_weather_update: Receives (low, high, condition_code)
            logger: Logging service
        """
        self._on_weather_update = on_weather_update
        self._logger = logger

    def on_data_changed(self, events: Iterable[DataEvent]) -> int:
        """
        Handle a batch of data events.

        Returns:
            Number of weather updates applied
        """
        applied = 0
        for event in events:
            if event.type != DataEvent.TYPE_CHANGED or event.path != WEATHER_PATH:
                continue

            try:
                low, high, weather_id = self._read_weather(event.data)
            except (TypeError, ValueError) as e:
                if self._logger:
                    self._logger.warning(f"Skipping malformed weather item {dict(event.data)!r}: {e}")
                continue

            if self._logger:
                self._logger.info(f"Received weather data: ({low}, {high}), {weather_id}")
            self._on_weather_update(low, high, weather_id)
            applied += 1

        return applied

    def on_payload(self, payload: Dict[str, Any]) -> int:
        """Handle a single plain weather mapping as a changed /weather item"""
        return self.on_data_changed([DataEvent(DataEvent.TYPE_CHANGED, WEATHER_PATH, payload)])

    @staticmethod
    def _read_weather(data: Mapping[str, Any]):
        short_keys = [key[len(KEY_PREFIX):] for key in (MIN_TEMP_KEY, MAX_TEMP_KEY, WEATHER_ID_KEY)]
        if not any(key in data for key in (MIN_TEMP_KEY, MAX_TEMP_KEY, WEATHER_ID_KEY, *short_keys)):
            raise ValueError("no weather keys in item")
        values = []
        for key in (MIN_TEMP_KEY, MAX_TEMP_KEY, WEATHER_ID_KEY):
            value = data.get(key, data.get(key[len(KEY_PREFIX):], 0))
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{key} must be an integer, got {type(value).__name__}")
            values.append(value)
        return tuple(values)
