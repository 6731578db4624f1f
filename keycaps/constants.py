"""Named sizing and color constants for key rendering, and RenderConfig.

All sizes in U (1U = one standard key pitch) unless noted.
"""
from typing import Literal, NamedTuple

# Output
PIXEL_WIDTH = 1200                 # px, raster width / svg width attribute

# Layout
KEY = 1.0                          # 1U
LAYOUT_PADDING = KEY * 0.1         # margin around the whole layout

# Cap
KEY_RADIUS = KEY * 0.1             # corner radius of cap and shine
KEY_STROKE_WIDTH = KEY * 0.015

# Shine (inset highlight)
SHINE_PADDING_TOP = KEY * 0.05
SHINE_PADDING_SIDE = KEY * 0.12
SHINE_PADDING_BOTTOM = KEY * 0.2
SHINE_PADDING = KEY * 0.05         # legend gutter inside the shine

# Legends
FONT_UNIT = KEY * 0.033
LINE_HEIGHT = FONT_UNIT * 4
FONT_FAMILY = "Arial, Helvetica, sans-serif"

# Colors (HSL lightness ratios)
KEY_STROKE_DARKEN = 0.7
KEY_SHINE_DIFF = 0.15
GHOST_OPACITY = 0.5

# Rotation pivot marker
PIVOT_RADIUS = KEY * 0.05


class RenderConfig(NamedTuple):
    """Every sizing knob the normalizer and composers read."""
    pixel_width: int = PIXEL_WIDTH
    layout_padding: float = LAYOUT_PADDING
    key_radius: float = KEY_RADIUS
    key_stroke_width: float = KEY_STROKE_WIDTH
    shine_padding_top: float = SHINE_PADDING_TOP
    shine_padding_side: float = SHINE_PADDING_SIDE
    shine_padding_bottom: float = SHINE_PADDING_BOTTOM
    shine_gutter: float = SHINE_PADDING
    font_unit: float = FONT_UNIT
    line_height: float = LINE_HEIGHT
    font_family: str = FONT_FAMILY
    key_stroke_darken: float = KEY_STROKE_DARKEN
    key_shine_diff: float = KEY_SHINE_DIFF
    ghost_opacity: float = GHOST_OPACITY
    pivot_radius: float = PIVOT_RADIUS
    show_pivots: bool = False
    backend: Literal["svg", "png"] = "svg"


DEFAULT_CONFIG = RenderConfig()
