"""Hex color helpers: parse, lighten and darken in HSL space."""
import colorsys

RGB = tuple[int, int, int]


def parse_hex(value: str) -> RGB:
    """'#rgb' or '#rrggbb' to an (r, g, b) triple. Raises ValueError."""
    s = value.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch*2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"Not a hex color: {value!r}")
    try:
        return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)
    except ValueError:
        raise ValueError(f"Not a hex color: {value!r}") from None

def to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*(max(0, min(255, int(round(c)))) for c in rgb))

def _scale_lightness(value: str, factor: float) -> str:
    r, g, b = parse_hex(value)
    h, l, s = colorsys.rgb_to_hls(r/255.0, g/255.0, b/255.0)
    l = max(0.0, min(1.0, l*factor))
    rr, gg, bb = colorsys.hls_to_rgb(h, l, s)
    return to_hex((rr*255, gg*255, bb*255))

def darken(value: str, ratio: float) -> str:
    """Reduce HSL lightness by ratio of itself (0.7 keeps 30%)."""
    return _scale_lightness(value, 1.0-ratio)

def lighten(value: str, ratio: float) -> str:
    """Increase HSL lightness by ratio of itself, clamped to white."""
    return _scale_lightness(value, 1.0+ratio)

def to_rgba(value: str, alpha: int = 255) -> tuple[int, int, int, int]:
    """Pillow fill tuple for a hex color."""
    return (*parse_hex(value), alpha)
