"""Raster key composer: draws keys with Pillow and encodes a PNG.

Each key is drawn in its own unrotated frame on a transparent layer the size
of the canvas; the layer is then rotated about the key's pivot and composited,
so legends rotate with their cap exactly as in the SVG output.
"""
import base64
import io
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from kle.types import Key, Keyboard
from kle.color import darken, lighten, to_rgba
from keycaps.constants import RenderConfig, DEFAULT_CONFIG
from keycaps.layout import normalize_keyboard
from keycaps.legends import iter_legends
from keycaps.svg import cap_size

_PIL_ANCHORS = {"start": "ls", "middle": "ms", "end": "rs"}


@lru_cache(maxsize=64)
def _font(px: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=max(1, px))


def _rounded_rect(draw: ImageDraw.ImageDraw, x: float, y: float, w: float, h: float,
                  scale: float, config: RenderConfig, fill: str, outline: str) -> None:
    if w <= 0 or h <= 0:
        return
    stroke = max(1, int(round(config.key_stroke_width * scale)))
    draw.rounded_rectangle(
        [x*scale, y*scale, (x+w)*scale, (y+h)*scale],
        radius=config.key_radius*scale,
        fill=to_rgba(fill), outline=to_rgba(outline), width=stroke,
    )


def draw_key(image: Image.Image, key: Key, config: RenderConfig, scale: float) -> None:
    """Composite one normalized key onto image (RGBA) at scale px per U."""
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)

    if not (key.decal or key.ghost):
        w, h = cap_size(key)
        _rounded_rect(draw, key.x, key.y, w, h, scale, config,
                      key.color, darken(key.color, config.key_stroke_darken))
        side = config.shine_padding_side; top = config.shine_padding_top
        _rounded_rect(draw, key.x + side, key.y + top,
                      key.width - 2*side, key.height - top - config.shine_padding_bottom,
                      scale, config,
                      lighten(key.color, config.key_shine_diff),
                      darken(key.color, config.key_shine_diff))

    for lg in iter_legends(key, config):
        draw.text(((key.x + lg.x)*scale, (key.y + lg.y)*scale), lg.text,
                  fill=to_rgba(lg.color), font=_font(int(round(lg.font_size*scale))),
                  anchor=_PIL_ANCHORS[lg.anchor])

    if key.rotation_angle:
        # PIL rotates counter-clockwise; key angles are clockwise on screen
        rx, ry = key.pivot
        layer = layer.rotate(-key.rotation_angle, resample=Image.BICUBIC,
                             center=(rx*scale, ry*scale))
    if key.ghost:
        alpha = layer.getchannel("A").point(lambda v: int(v * config.ghost_opacity))
        layer.putalpha(alpha)
    image.alpha_composite(layer)


def render_image(keyboard: Keyboard, config: RenderConfig = DEFAULT_CONFIG) -> Image.Image:
    """Normalize keyboard (once) and draw every key in list order."""
    viewport = normalize_keyboard(keyboard, config)
    size = viewport.pixel_size(config.pixel_width)
    image = Image.new("RGBA", (size[0], max(1, size[1])), (0, 0, 0, 0))
    scale = config.pixel_width / viewport.width if viewport.width > 0 else 0.0
    for key in keyboard.keys:
        draw_key(image, key, config, scale)
    return image


def render_png(keyboard: Keyboard, config: RenderConfig = DEFAULT_CONFIG) -> bytes:
    buf = io.BytesIO()
    render_image(keyboard, config).save(buf, format="PNG")
    return buf.getvalue()


def render_img_tag(keyboard: Keyboard, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """HTML <img> embedding the PNG as a data URI."""
    data = base64.b64encode(render_png(keyboard, config)).decode("ascii")
    return f'<img src="data:image/png;base64,{data}"/>'
