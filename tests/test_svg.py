"""Tests for keycaps/svg.py vector composer."""
import pytest
from kle.types import Key, Keyboard
from keycaps.constants import LAYOUT_PADDING
from keycaps.layout import normalize_keyboard
from keycaps.svg import (
    SVG_NS, cap_size, key_transform, key_element, build_svg, render_svg,
)

P = LAYOUT_PADDING


class TestSingleKeyScene:
    @pytest.fixture
    def root(self, single_key):
        return build_svg(single_key)

    def test_root_viewport(self, root):
        assert root.tag == "svg"
        assert root.attributes["xmlns"] == SVG_NS
        assert root.attributes["viewBox"] == "0 0 1.2 1.2"
        assert root.attributes["width"] == 1200
        assert root.attributes["height"] == 1200

    def test_cap_rect(self, root):
        cap, shine = root.find_all("rect")
        assert cap.attributes["width"] == 1
        assert cap.attributes["height"] == 1
        assert cap.serialize() == (
            '<rect style="fill:#cc0000;stroke:#3d0000;stroke-width:0.015;"'
            ' rx="0.1" width="1" height="1"/>'
        )

    def test_shine_rect(self, root):
        _, shine = root.find_all("rect")
        assert shine.styles["fill"] == "#eb0000"
        assert shine.styles["stroke"] == "#ad0000"
        assert shine.attributes["x"] == pytest.approx(0.12)
        assert shine.attributes["width"] == pytest.approx(0.76)
        assert shine.attributes["height"] == pytest.approx(0.75)

    def test_key_group_translated(self, root):
        (g,) = [c for c in root.children]
        assert g.attributes["transform"] == "translate(0.1 0.1)"

    def test_serialized_envelope(self, single_key):
        out = render_svg(single_key)
        assert out.startswith(f'<svg xmlns="{SVG_NS}" viewBox="0 0 1.2 1.2" width="1200" height="1200">')
        assert out.endswith("</svg>")
        assert "\n" not in out


class TestKeyElement:
    def test_rotation_wraps_translation(self, rotated_key):
        normalize_keyboard(rotated_key)
        key = rotated_key.keys[0]
        assert key_transform(key) == "rotate(90 1.1 0.1) translate(1.1 0.1)"

    def test_children_in_local_frame(self, rotated_key):
        normalize_keyboard(rotated_key)
        cap = key_element(rotated_key.keys[0]).find_all("rect")[0]
        assert "x" not in cap.attributes and "y" not in cap.attributes

    def test_ghost_and_decal(self, ghost_and_decal):
        root = build_svg(ghost_and_decal)
        ghost, decal = root.children
        assert ghost.find_all("rect") == []
        assert ghost.attributes["opacity"] == 0.5
        assert [t.children for t in ghost.find_all("text")] == [["G"]]
        assert decal.find_all("rect") == []
        assert "opacity" not in decal.attributes
        assert [t.children for t in decal.find_all("text")] == [["D"]]

    def test_stepped_cap_uses_secondary(self, config):
        key = Key(width=1.25, width2=1.75, height2=1, stepped=True)
        assert cap_size(key) == (1.75, 1)
        cap, shine = key_element(key, config).find_all("rect")
        assert cap.attributes["width"] == 1.75
        assert shine.attributes["width"] == pytest.approx(1.01)

    def test_unstepped_secondary_ignored(self):
        assert cap_size(Key(width=1.25, height=2, x2=-0.25, width2=1.5, height2=1)) == (1.25, 2)

    def test_legend_text(self, config):
        key = Key(labels=["A&B", "", "", "", "", "", "<b>x</b>"], text_color=[None] * 6 + ["#123456"])
        texts = key_element(key, config).find_all("text")
        assert [t.children for t in texts] == [["A&amp;B"], ["x"]]
        first, second = texts
        assert first.attributes["text-anchor"] == "start"
        assert first.attributes["font-family"] == config.font_family
        assert second.styles["fill"] == "#123456"
        assert second.serialize().startswith('<text style="font-size:0.198;fill:#123456;" x="0.17"')

    def test_no_legends_leaves_empty_group(self, config):
        g = key_element(Key(), config)
        assert g.children[-1].serialize() == "<g/>"


class TestPivots:
    def test_hidden_by_default(self, rotated_key):
        assert build_svg(rotated_key).find_all("circle") == []

    def test_marker_precedes_key(self, rotated_key, config):
        root = build_svg(rotated_key, config._replace(show_pivots=True))
        marker, g = root.children
        assert marker.tag == "circle"
        assert (marker.attributes["cx"], marker.attributes["cy"]) == pytest.approx((1 + P, P))
        assert g.tag == "g"

    def test_unrotated_keys_have_no_marker(self, single_key, config):
        root = build_svg(single_key, config._replace(show_pivots=True))
        assert root.find_all("circle") == []


def test_render_order_follows_key_list(sample_keyboard):
    root = build_svg(sample_keyboard)
    assert len(root.children) == len(sample_keyboard.keys)


def test_identical_layouts_render_identically(sample_text):
    from kle.serial import loads
    assert render_svg(loads(sample_text)) == render_svg(loads(sample_text))


def test_empty_layout_renders_padding_only_viewport():
    from kle.serial import loads
    out = render_svg(loads("[]"))
    assert out.startswith("<svg")
    assert 'viewBox="0 0 0.2 0.2"' in out
    assert 'width="1200"' in out and 'height="1200"' in out
