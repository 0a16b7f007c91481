"""
Face Renderer - Draws watch face frames with PIL
No window system needed; the host decides where the image goes.
"""
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..core.engine import Frame
from ..core.icons import Icon
from ..core.logging_service import LoggingService
from .layout import Layout
from .theme import Theme


class FaceRenderer:
    """
    Renders engine frames into RGB images.
    """

    def __init__(
        self,
        width: int,
        height: int,
        is_round: bool = True,
        font_file: Optional[str] = None,
        logger: Optional[LoggingService] = None
    ):
        """
        Initialize renderer.

        Args:
            width: Frame width in pixels
            height: Frame height in pixels
            is_round: Start with the round layout
            font_file: TrueType font path; PIL's default font when unusable
            logger: Logging service
        """
        self._width = width
        self._height = height
        self._layout = Layout(width, height, is_round)
        self._font_file = font_file
        self._logger = logger

        self._fonts: Dict[int, ImageFont.ImageFont] = {}
        self._font_fallback_logged = False
        self._antialias = True

        self._icon: Optional[str] = None
        self._icon_sprite: Optional[Image.Image] = None
        self._icon_loads = 0

    def apply_shape(self, is_round: bool) -> None:
        self._layout.set_round(is_round)
        # Sprite size depends on the layout
        if self._icon is not None:
            self.load_icon(self._icon)

    def set_antialias(self, enabled: bool) -> None:
        self._antialias = enabled

    def load_icon(self, icon: Optional[str]) -> None:
        """
        Prepare the sprite for an icon category, or clear it for None.
        """
        self._icon = icon
        self._icon_loads += 1
        if icon is None:
            self._icon_sprite = None
            return
        size = self._layout.get_full_layout()['icon']['size']
        self._icon_sprite = draw_icon_sprite(icon, size)

    def render(self, frame: Frame) -> Image.Image:
        """
        Draw one frame.

        Args:
            frame: Frame built by the engine

        Returns:
            RGB image of the full screen
        """
        background = Theme.background(frame.ambient)
        image = Image.new('RGB', (self._width, self._height), background)
        draw = ImageDraw.Draw(image)
        draw.fontmode = 'L' if self._antialias else '1'

        layout = self._layout.get_full_layout()
        primary = Theme.primary()
        secondary = Theme.secondary(background)

        t = layout['time']
        self._draw_centered(draw, frame.time_text, t['x'], t['y'], t['size'], primary)

        if frame.ambient:
            return image

        if frame.date_text:
            d = layout['date']
            self._draw_centered(draw, frame.date_text, d['x'], d['y'], d['size'], secondary)
            div = layout['divider']
            half = int(Theme.DIVIDER_HALF_WIDTH * self._width / 320)
            draw.line([div['x'] - half, div['y'], div['x'] + half, div['y']], fill=secondary)

        weather = frame.weather
        if weather is not None and weather.has_data():
            high = layout['high']
            low = layout['low']
            self._draw_centered(draw, f"{weather.high_temp}{Theme.DEGREE}",
                                high['x'], high['y'], high['size'], primary)
            self._draw_centered(draw, f"{weather.low_temp}{Theme.DEGREE}",
                                low['x'], low['y'], low['size'], secondary)

            if frame.icon is not None and self._icon_sprite is not None:
                icon = layout['icon']
                image.paste(self._icon_sprite, (icon['x'], icon['y']), self._icon_sprite)

        return image

    def _font(self, size: int) -> ImageFont.ImageFont:
        font = self._fonts.get(size)
        if font is not None:
            return font
        try:
            if not self._font_file:
                raise OSError("no font file configured")
            font = ImageFont.truetype(self._font_file, size)
        except OSError as e:
            if not self._font_fallback_logged and self._logger:
                self._logger.warning(f"Font {self._font_file!r} unavailable ({e}), using default PIL font")
            self._font_fallback_logged = True
            font = ImageFont.load_default()
        self._fonts[size] = font
        return font

    def _draw_centered(self, draw: ImageDraw.ImageDraw, text: str, x: int, baseline: int,
                       size: int, color: Tuple[int, int, int]) -> None:
        """Draw text horizontally centered on x with its bottom on baseline"""
        font = self._font(size)
        left, _, right, bottom = draw.textbbox((0, 0), text, font=font)
        draw.text((x - (right - left) // 2 - left, baseline - bottom), text, font=font, fill=color)

    @property
    def icon(self) -> Optional[str]:
        return self._icon

    @property
    def icon_loads(self) -> int:
        """How many times an icon sprite was (re)loaded"""
        return self._icon_loads

    @property
    def layout(self) -> Layout:
        return self._layout


def _cloud(draw: ImageDraw.ImageDraw, s: int, top: float, color, scale: float = 1.0) -> None:
    """Draw a cloud whose body spans the sprite width, starting at top"""
    w = s * scale
    x0 = (s - w) / 2
    body_top = top + w * 0.25
    draw.ellipse([x0 + w * 0.05, body_top, x0 + w * 0.45, body_top + w * 0.4], fill=color)
    draw.ellipse([x0 + w * 0.25, top, x0 + w * 0.75, top + w * 0.5], fill=color)
    draw.ellipse([x0 + w * 0.55, body_top + w * 0.05, x0 + w * 0.95, body_top + w * 0.4], fill=color)
    draw.rectangle([x0 + w * 0.25, body_top + w * 0.2, x0 + w * 0.75, body_top + w * 0.4], fill=color)


def _sun(draw: ImageDraw.ImageDraw, cx: float, cy: float, r: float, color) -> None:
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=color)
    ray = max(1, int(r * 0.25))
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1), (0.7, 0.7), (-0.7, 0.7), (0.7, -0.7), (-0.7, -0.7)):
        draw.line([cx + dx * r * 1.25, cy + dy * r * 1.25, cx + dx * r * 1.6, cy + dy * r * 1.6],
                  fill=color, width=ray)


def draw_icon_sprite(icon: str, size: int) -> Image.Image:
    """
    Draw a square RGBA sprite for an icon category.

    Args:
        icon: One of Icon.ALL
        size: Sprite edge in pixels

    Returns:
        Transparent image with the icon drawn on it
    """
    if icon not in Icon.ALL:
        raise ValueError(f"Unknown icon: {icon}")

    s = size
    sprite = Image.new('RGBA', (s, s), (0, 0, 0, 0))
    draw = ImageDraw.Draw(sprite)
    colors = Theme.get_icon_colors()
    line = max(1, s // 16)

    if icon == Icon.CLEAR:
        _sun(draw, s / 2, s / 2, s * 0.25, colors['sun'])
    elif icon == Icon.LIGHT_CLOUDS:
        _sun(draw, s * 0.35, s * 0.35, s * 0.18, colors['sun'])
        _cloud(draw, s, s * 0.35, colors['cloud'], scale=0.8)
    elif icon == Icon.CLOUDY:
        _cloud(draw, s, s * 0.1, colors['cloud_dark'], scale=0.7)
        _cloud(draw, s, s * 0.3, colors['cloud'])
    elif icon in (Icon.LIGHT_RAIN, Icon.RAIN):
        _cloud(draw, s, s * 0.05, colors['cloud'])
        drops = 2 if icon == Icon.LIGHT_RAIN else 4
        step = s / (drops + 1)
        for i in range(1, drops + 1):
            x = step * i
            draw.line([x, s * 0.72, x - s * 0.06, s * 0.92], fill=colors['rain'], width=line)
    elif icon == Icon.SNOW:
        _cloud(draw, s, s * 0.05, colors['cloud'])
        r = max(1, s // 20)
        for x, y in ((0.25, 0.75), (0.5, 0.85), (0.75, 0.75), (0.375, 0.93), (0.625, 0.93)):
            draw.ellipse([x * s - r, y * s - r, x * s + r, y * s + r], fill=colors['snow'])
    elif icon == Icon.FOG:
        for i, y in enumerate((0.3, 0.45, 0.6, 0.75)):
            inset = s * (0.1 if i % 2 == 0 else 0.2)
            draw.line([inset, y * s, s - inset, y * s], fill=colors['fog'], width=line * 2)
    elif icon == Icon.STORM:
        _cloud(draw, s, s * 0.05, colors['cloud_dark'])
        draw.polygon([
            (s * 0.55, s * 0.55), (s * 0.38, s * 0.78), (s * 0.5, s * 0.78),
            (s * 0.42, s * 0.98), (s * 0.64, s * 0.7), (s * 0.52, s * 0.7),
        ], fill=colors['bolt'])

    return sprite
