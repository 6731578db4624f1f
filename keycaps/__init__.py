"""Key rendering: layout normalization, scene nodes and SVG/PNG composers."""

from .constants import RenderConfig, DEFAULT_CONFIG
from .layout import Viewport, normalize_keyboard
from .element import Element, format_number
from .svg import key_element, build_svg, render_svg
