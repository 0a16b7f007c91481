"""
Weather Icons - Condition code to icon category lookup
"""
from typing import Optional, Tuple


class Icon:
    """Icon categories drawn by the renderer"""

    STORM = 'storm'
    LIGHT_RAIN = 'light_rain'
    RAIN = 'rain'
    SNOW = 'snow'
    FOG = 'fog'
    CLEAR = 'clear'
    LIGHT_CLOUDS = 'light_clouds'
    CLOUDY = 'cloudy'

    ALL = (STORM, LIGHT_RAIN, RAIN, SNOW, FOG, CLEAR, LIGHT_CLOUDS, CLOUDY)


# (first, last, icon) with inclusive bounds, tested top to bottom.
# 761 appears in both the fog and the storm rows; the fog row comes first.
ICON_RANGES: Tuple[Tuple[int, int, str], ...] = (
    (200, 232, Icon.STORM),
    (300, 321, Icon.LIGHT_RAIN),
    (500, 504, Icon.RAIN),
    (511, 511, Icon.SNOW),
    (520, 531, Icon.RAIN),
    (600, 622, Icon.SNOW),
    (701, 761, Icon.FOG),
    (761, 761, Icon.STORM),
    (781, 781, Icon.STORM),
    (800, 800, Icon.CLEAR),
    (801, 801, Icon.LIGHT_CLOUDS),
    (802, 804, Icon.CLOUDY),
)


def resolve_icon(condition_code: int) -> Optional[str]:
    """
    Get the icon category for a weather condition code.

    Args:
        condition_code: Weather condition identifier (e.g., 800 for clear sky)

    Returns:
        Icon name, or None when no range matches
    """
    for first, last, icon in ICON_RANGES:
        if first <= condition_code <= last:
            return icon
    return None
