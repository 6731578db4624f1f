"""Legend placement on the 3-column x 4-row anchor grid inside the shine.

Slot i sits in column i % 3 (start/middle/end) and row i // 3; row 3 is the
front face and is anchored to the full key height.
"""
import re
from typing import Iterator, Literal, NamedTuple

from kle.types import Key, KEY_MAX_LABELS
from keycaps.constants import RenderConfig

Anchor = Literal["start", "middle", "end"]

_ANCHORS: tuple[Anchor, Anchor, Anchor] = ("start", "middle", "end")
_TAG_RE = re.compile(r"<[^>]*>")


class LegendAnchor(NamedTuple):
    x: float; y: float; anchor: Anchor


class Legend(NamedTuple):
    index: int; text: str
    x: float; y: float; anchor: Anchor
    font_size: float; color: str


def legend_anchor(key: Key, index: int, config: RenderConfig) -> LegendAnchor:
    """Baseline position of slot index in the key's local frame."""
    if not 0 <= index < KEY_MAX_LABELS:
        raise IndexError(f"Legend slot out of range: {index}")
    side = config.shine_padding_side; top = config.shine_padding_top
    gutter = config.shine_gutter; lh = config.line_height
    shine_w = key.width - 2*side
    shine_h = key.height - top - config.shine_padding_bottom
    col = index % 3; row = index // 3
    xs = (side + gutter, side + shine_w/2, side + shine_w - gutter)
    ys = (top + lh + gutter, top + shine_h/2 + lh/2, top + shine_h - gutter, key.height)
    return LegendAnchor(xs[col], ys[row], _ANCHORS[col])


def legend_font_size(key: Key, index: int, config: RenderConfig) -> float:
    size = key.text_size[index] if index < len(key.text_size) else None
    return 3*config.font_unit + config.font_unit*(size or key.default.text_size)


def legend_color(key: Key, index: int) -> str:
    color = key.text_color[index] if index < len(key.text_color) else None
    return color or key.default.text_color


def clean_label(text: str) -> str:
    """Drop inline HTML tags that KLE allows inside labels."""
    return _TAG_RE.sub("", text)


def iter_legends(key: Key, config: RenderConfig) -> Iterator[Legend]:
    """Non-empty legends of key in slot order."""
    for i in range(min(len(key.labels), KEY_MAX_LABELS)):
        text = clean_label(key.labels[i] or "")
        if not text:
            continue
        a = legend_anchor(key, i, config)
        yield Legend(i, text, a.x, a.y, a.anchor,
                     legend_font_size(key, i, config), legend_color(key, i))
