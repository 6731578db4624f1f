"""Keyboard layout types, KLE parsing, geometry and color helpers."""

from .types import Point, Bounds, Key, KeyDefault, Keyboard, KeyboardMetadata, KEY_MAX_LABELS
from .geometry import GeometryError, rotate, key_corners, key_bounds, keyboard_bounds
from .serial import LayoutError, parse_kle, loads, load
from .color import parse_hex, to_hex, darken, lighten, to_rgba
