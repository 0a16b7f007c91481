"""
Weather State - Last weather summary pushed from the phone
"""
from typing import Any, Dict


class WeatherSnapshot:
    """
    Most recently received low/high temperature and condition code.

    Updates are applied as they arrive: last write wins, no range checks and
    no ordering checks. Until the first update the values read as 0 and
    has_data() is False.
    """

    DEFAULT_TEMP = 0
    DEFAULT_CONDITION = 0

    def __init__(self):
        self._low_temp: int = self.DEFAULT_TEMP
        self._high_temp: int = self.DEFAULT_TEMP
        self._condition_code: int = self.DEFAULT_CONDITION
        self._received: bool = False

    def apply_update(self, low: int, high: int, condition_code: int) -> None:
        """
        Overwrite the stored weather.

        Args:
            low: Low temperature for the day
            high: High temperature for the day
            condition_code: Weather condition identifier
        """
        self._low_temp = low
        self._high_temp = high
        self._condition_code = condition_code
        self._received = True

    def has_data(self) -> bool:
        """Whether any update has been received"""
        return self._received

    def as_dict(self) -> Dict[str, Any]:
        return {
            'low_temp': self._low_temp,
            'high_temp': self._high_temp,
            'condition_code': self._condition_code,
            'received': self._received,
        }

    @property
    def low_temp(self) -> int:
        return self._low_temp

    @property
    def high_temp(self) -> int:
        return self._high_temp

    @property
    def condition_code(self) -> int:
        return self._condition_code

    def __repr__(self) -> str:
        if not self._received:
            return 'WeatherSnapshot(received=False)'
        return (f'WeatherSnapshot(low={self._low_temp}, high={self._high_temp}, '
                f'code={self._condition_code})')
