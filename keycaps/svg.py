"""SVG key composer: one <g> per key, authored in the key's local frame."""
from html import escape

from kle.types import Key, Keyboard
from kle.color import darken, lighten
from keycaps.constants import RenderConfig, DEFAULT_CONFIG
from keycaps.element import Element, format_number
from keycaps.layout import Viewport, normalize_keyboard
from keycaps.legends import iter_legends

SVG_NS = "http://www.w3.org/2000/svg"


def cap_size(key: Key) -> tuple[float, float]:
    """Stepped keys draw the secondary rectangle as the cap."""
    if key.stepped and key.width2 > 0 and key.height2 > 0:
        return key.width2, key.height2
    return key.width, key.height


def key_transform(key: Key) -> str:
    """Rotation about the (normalized) pivot wrapping the move to the key origin."""
    move = f"translate({format_number(key.x)} {format_number(key.y)})"
    if not key.rotation_angle:
        return move
    rx, ry = key.pivot
    return (f"rotate({format_number(key.rotation_angle)} {format_number(rx)} {format_number(ry)})"
            f" {move}")


def cap_element(key: Key, config: RenderConfig) -> Element:
    w, h = cap_size(key)
    return (Element("rect")
            .style("fill", key.color)
            .style("stroke", darken(key.color, config.key_stroke_darken))
            .style("stroke-width", config.key_stroke_width)
            .attr("rx", config.key_radius)
            .attr("width", w)
            .attr("height", h))


def shine_element(key: Key, config: RenderConfig) -> Element:
    side = config.shine_padding_side; top = config.shine_padding_top
    return (Element("rect")
            .style("fill", lighten(key.color, config.key_shine_diff))
            .style("stroke", darken(key.color, config.key_shine_diff))
            .style("stroke-width", config.key_stroke_width)
            .attr("x", side)
            .attr("y", top)
            .attr("rx", config.key_radius)
            .attr("width", key.width - 2*side)
            .attr("height", key.height - top - config.shine_padding_bottom))


def legends_element(key: Key, config: RenderConfig) -> Element:
    group = Element("g")
    for lg in iter_legends(key, config):
        group.child(Element("text")
                    .style("font-size", lg.font_size)
                    .style("fill", lg.color)
                    .attr("x", lg.x)
                    .attr("y", lg.y)
                    .attr("text-anchor", lg.anchor)
                    .attr("font-family", config.font_family)
                    .child(escape(lg.text, quote=False)))
    return group


def key_element(key: Key, config: RenderConfig = DEFAULT_CONFIG) -> Element:
    """Subtree for one normalized key.

    Decals and ghosts have no cap or shine; ghosts are drawn translucent.
    """
    g = Element("g").attr("transform", key_transform(key))
    if key.ghost:
        g.attr("opacity", config.ghost_opacity)
    if not (key.decal or key.ghost):
        g.child(cap_element(key, config))
        g.child(shine_element(key, config))
    g.child(legends_element(key, config))
    return g


def pivot_marker(key: Key, config: RenderConfig) -> Element:
    rx, ry = key.pivot
    return (Element("circle")
            .attr("cx", rx).attr("cy", ry)
            .attr("r", config.pivot_radius)
            .attr("fill", key.color))


def svg_root(viewport: Viewport, config: RenderConfig) -> Element:
    px_w, px_h = viewport.pixel_size(config.pixel_width)
    return (Element("svg")
            .attr("xmlns", SVG_NS)
            .attr("viewBox", f"0 0 {format_number(viewport.width)} {format_number(viewport.height)}")
            .attr("width", px_w)
            .attr("height", px_h))


def build_svg(keyboard: Keyboard, config: RenderConfig = DEFAULT_CONFIG) -> Element:
    """Normalize keyboard (once) and assemble the full scene tree."""
    viewport = normalize_keyboard(keyboard, config)
    root = svg_root(viewport, config)
    for key in keyboard.keys:
        if config.show_pivots and key.rotation_angle:
            root.child(pivot_marker(key, config))
        root.child(key_element(key, config))
    return root


def render_svg(keyboard: Keyboard, config: RenderConfig = DEFAULT_CONFIG) -> str:
    return build_svg(keyboard, config).serialize()
