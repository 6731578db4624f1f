"""Layout normalization: shift every key so the layout sits inside a padded viewport."""
from typing import NamedTuple

from kle.types import Keyboard
from kle.geometry import keyboard_bounds
from keycaps.constants import RenderConfig, DEFAULT_CONFIG


class Viewport(NamedTuple):
    """Normalized canvas size in U."""
    width: float
    height: float

    def pixel_size(self, pixel_width: int) -> tuple[int, int]:
        """Pixel (width, height) at the given width, preserving aspect ratio."""
        if self.width <= 0:
            return pixel_width, 0
        return pixel_width, int(round(pixel_width * self.height / self.width))


def normalize_keyboard(keyboard: Keyboard, config: RenderConfig = DEFAULT_CONFIG) -> Viewport:
    """Translate all keys so nothing lies left of or above (padding, padding).

    The bounds are anchored at the KLE origin: the low corner is the
    component-wise min of (0, 0) and every rotated key corner, so keys that
    rotate into negative space are pulled back in, and a layout drawn right of
    the origin keeps its offset.  Mutates the keys in place and is not
    idempotent: every call shifts by at least the padding again.
    x2/y2 are relative to (x, y) and move with the key origin.
    """
    pad = config.layout_padding
    bounds = keyboard_bounds(keyboard.keys)
    if bounds is None:
        return Viewport(2*pad, 2*pad)

    lo_x = min(0.0, bounds.min[0]); lo_y = min(0.0, bounds.min[1])
    dx = -lo_x + pad
    dy = -lo_y + pad
    for key in keyboard.keys:
        key.x += dx; key.y += dy
        key.rotation_x += dx; key.rotation_y += dy

    return Viewport(bounds.max[0] - lo_x + 2*pad, bounds.max[1] - lo_y + 2*pad)
