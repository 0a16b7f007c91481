"""
Theme - Watch face colors and weather icon palette
"""
from typing import Dict, Optional, Tuple


RGB = Tuple[int, int, int]


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert hex color to RGB tuple."""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class Theme:
    """
    Sunshine color scheme for the watch face.
    """

    # Color Palette
    BG_INTERACTIVE = '#03a9f4'    # Sunshine blue
    BG_AMBIENT = '#000000'        # Ambient mode is always black

    FG_PRIMARY = '#ffffff'        # Time and high temperature
    FG_SECONDARY_ALPHA = 175      # Date, divider and low temperature opacity

    # Weather icon colors
    ICON_SUN = '#ffd54f'
    ICON_CLOUD = '#eceff1'
    ICON_CLOUD_DARK = '#b0bec5'
    ICON_RAIN = '#e1f5fe'
    ICON_SNOW = '#ffffff'
    ICON_BOLT = '#ffeb3b'
    ICON_FOG = '#cfd8dc'

    DEGREE = '°'

    # Divider under the date, half width in pixels at 320px
    DIVIDER_HALF_WIDTH = 25

    @staticmethod
    def background(ambient: bool) -> RGB:
        return hex_to_rgb(Theme.BG_AMBIENT if ambient else Theme.BG_INTERACTIVE)

    @staticmethod
    def primary() -> RGB:
        return hex_to_rgb(Theme.FG_PRIMARY)

    @staticmethod
    def secondary(background: Optional[RGB] = None) -> RGB:
        """
        White blended over the background at FG_SECONDARY_ALPHA.

        Args:
            background: Background color (default: interactive background)
        """
        if background is None:
            background = Theme.background(False)
        fg = Theme.primary()
        alpha = Theme.FG_SECONDARY_ALPHA / 255
        return tuple(round(f * alpha + b * (1 - alpha)) for f, b in zip(fg, background))

    @staticmethod
    def get_icon_colors() -> Dict[str, RGB]:
        return {
            'sun': hex_to_rgb(Theme.ICON_SUN),
            'cloud': hex_to_rgb(Theme.ICON_CLOUD),
            'cloud_dark': hex_to_rgb(Theme.ICON_CLOUD_DARK),
            'rain': hex_to_rgb(Theme.ICON_RAIN),
            'snow': hex_to_rgb(Theme.ICON_SNOW),
            'bolt': hex_to_rgb(Theme.ICON_BOLT),
            'fog': hex_to_rgb(Theme.ICON_FOG),
        }
