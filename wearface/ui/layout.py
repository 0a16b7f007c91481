"""
Layout - Round and square positioning for watch face elements
"""
from typing import Any, Dict


# Sizes and vertical offsets as fractions of the screen height,
# horizontal positions as fractions of the screen width.
SQUARE_METRICS = {
    'time_size': 0.125,
    'date_size': 0.05,
    'temp_size': 0.07,
    'time_y': 0.36,
    'date_y': 0.50,
    'temp_y': 0.74,
}

ROUND_METRICS = {
    'time_size': 0.14,
    'date_size': 0.055,
    'temp_size': 0.07,
    'time_y': 0.38,
    'date_y': 0.52,
    'temp_y': 0.75,
}

HIGH_TEMP_X = 0.5
LOW_TEMP_X = 0.7
ICON_X = 0.2
ICON_SIZE = 0.16


class Layout:
    """
    Manages layout calculations for one screen shape.
    """

    def __init__(self, width: int, height: int, is_round: bool = True):
        """
        Initialize layout manager.

        Args:
            width: Display width in pixels
            height: Display height in pixels
            is_round: Use the round screen metrics
        """
        self._width = width
        self._height = height
        self._is_round = is_round

    @property
    def metrics(self) -> Dict[str, float]:
        return ROUND_METRICS if self._is_round else SQUARE_METRICS

    def font_size(self, element: str) -> int:
        """
        Get font size in pixels for 'time', 'date' or 'temp'.
        """
        key = f'{element}_size'
        if key not in self.metrics:
            raise ValueError(f"Unknown text element: {element}")
        return max(1, int(self.metrics[key] * self._height))

    def get_full_layout(self) -> Dict[str, Dict[str, Any]]:
        """
        Get anchor points for all elements.

        Text anchors are the horizontal center and the baseline, like the
        original canvas drawText calls.
        """
        center_x = self._width // 2
        time_y = int(self.metrics['time_y'] * self._height)
        date_y = int(self.metrics['date_y'] * self._height)
        temp_y = int(self.metrics['temp_y'] * self._height)
        icon_size = max(1, int(ICON_SIZE * self._width))

        return {
            'time': {'x': center_x, 'y': time_y, 'size': self.font_size('time')},
            'date': {'x': center_x, 'y': date_y, 'size': self.font_size('date')},
            'divider': {'x': center_x, 'y': date_y + self.divider_gap()},
            'high': {'x': int(HIGH_TEMP_X * self._width), 'y': temp_y, 'size': self.font_size('temp')},
            'low': {'x': int(LOW_TEMP_X * self._width), 'y': temp_y, 'size': self.font_size('temp')},
            'icon': {
                'x': int(ICON_X * self._width) - icon_size // 2,
                'y': temp_y - icon_size + self.font_size('temp') // 4,
                'size': icon_size,
            },
        }

    def divider_gap(self) -> int:
        # Scales the 20px gap of a 320px screen
        return max(4, int(self._height * 20 / 320))

    def set_round(self, is_round: bool) -> None:
        self._is_round = is_round

    @property
    def is_round(self) -> bool:
        return self._is_round
