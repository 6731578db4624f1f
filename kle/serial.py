"""Parse keyboard-layout-editor (KLE) JSON into a Keyboard.

The KLE format is a list of rows.  An optional leading object holds keyboard
metadata; every other row is a list whose strings are keys (labels separated
by newlines) and whose objects change the properties of the keys after them.
"""
import copy
import json
import logging
import os
from dataclasses import fields

from .types import Key, Keyboard, KeyboardMetadata, KEY_MAX_LABELS

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised for layout text that is not a valid KLE document."""


# Serialized label position -> grid slot, one row per alignment flag value.
# fmt: off
LABEL_MAP: list[list[int]] = [
    # 0  1  2  3  4  5  6  7  8  9 10 11   # align flags
    [ 0, 6, 2, 8, 9,11, 3, 5, 1, 4, 7,10], # 0 = no centering
    [ 1, 7,-1,-1, 9,11, 4,-1,-1,-1,-1,10], # 1 = center x
    [ 3,-1, 5,-1, 9,11,-1,-1, 4,-1,-1,10], # 2 = center y
    [ 4,-1,-1,-1, 9,11,-1,-1,-1,-1,-1,10], # 3 = center x & y
    [ 0, 6, 2, 8,10,-1, 3, 5, 1, 4, 7,-1], # 4 = center front (default)
    [ 1, 7,-1,-1,10,-1, 4,-1,-1,-1,-1,-1], # 5 = center front & x
    [ 3,-1, 5,-1,10,-1,-1,-1, 4,-1,-1,-1], # 6 = center front & y
    [ 4,-1,-1,-1,10,-1,-1,-1,-1,-1,-1,-1], # 7 = center front & x & y
]
# fmt: on

_ROTATION_PROPS = ("r", "rx", "ry")
_NUMBER_PROPS = ("r", "rx", "ry", "x", "y", "w", "h", "x2", "y2", "w2", "h2", "f", "f2")
_STRING_PROPS = ("c", "t", "p")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_props(props: dict) -> None:
    """Reject property values of the wrong JSON type before they reach the cursor."""
    for name in _NUMBER_PROPS:
        if name in props and not _is_number(props[name]):
            raise LayoutError(f"Property {name!r} must be a number, got {props[name]!r}")
    for name in _STRING_PROPS:
        if name in props and not isinstance(props[name], str):
            raise LayoutError(f"Property {name!r} must be a string, got {props[name]!r}")
    if "a" in props and (not isinstance(props["a"], int) or isinstance(props["a"], bool)):
        raise LayoutError(f"Property 'a' must be an integer, got {props['a']!r}")
    if "fa" in props and not (isinstance(props["fa"], list)
                              and all(v is None or _is_number(v) for v in props["fa"])):
        raise LayoutError(f"Property 'fa' must be a list of numbers, got {props['fa']!r}")


def reorder_items(items: list, align: int) -> list:
    """Move serialized items to their grid slots for the given alignment."""
    if not 0 <= align < len(LABEL_MAP):
        raise LayoutError(f"Unknown label alignment: {align}")
    ret: list = [None] * KEY_MAX_LABELS
    for i, item in enumerate(items[:KEY_MAX_LABELS]):
        if item:
            slot = LABEL_MAP[align][i]
            if slot >= 0:
                ret[slot] = item
    return ret


def _finish_key(current: Key, item: str, align: int) -> Key:
    key = copy.deepcopy(current)
    if key.x2 or key.y2 or key.width2 or key.height2:
        key.width2 = key.width2 or key.width
        key.height2 = key.height2 or key.height
    items = item.split("\n")
    if len(items) > KEY_MAX_LABELS:
        logger.warning("Label string has %d items, keeping the first %d: %r",
                       len(items), KEY_MAX_LABELS, item)
        items = items[:KEY_MAX_LABELS]
    key.labels = [label or "" for label in reorder_items(items, align)]
    key.text_size = reorder_items(key.text_size, align)
    # text_color is already in slot order (reordered when "t" was read)
    key.text_color = (list(key.text_color) + [None] * KEY_MAX_LABELS)[:KEY_MAX_LABELS]
    # Per-slot overrides only matter where there is a label
    for i, label in enumerate(key.labels):
        if not label:
            key.text_size[i] = None
            key.text_color[i] = None
    if key.width <= 0 or key.height <= 0:
        raise LayoutError(f"Key {item!r} has non-positive size {key.width}x{key.height}")
    return key


def _apply_props(current: Key, props: dict, cluster: dict, align: int) -> int:
    """Apply a property object to the cursor key; returns the new alignment."""
    _check_props(props)
    if "r" in props:
        current.rotation_angle = props["r"]
    if "rx" in props:
        current.rotation_x = cluster["x"] = props["rx"]
        current.x, current.y = cluster["x"], cluster["y"]
    if "ry" in props:
        current.rotation_y = cluster["y"] = props["ry"]
        current.x, current.y = cluster["x"], cluster["y"]
    if "a" in props:
        align = props["a"]
    if "f" in props:
        current.default.text_size = props["f"]
        current.text_size = []
    if "f2" in props:
        current.text_size = [current.text_size[0] if current.text_size else None]
        current.text_size += [props["f2"]] * (KEY_MAX_LABELS-1)
    if "fa" in props:
        current.text_size = list(props["fa"])
    if "p" in props:
        current.profile = props["p"]
    if "c" in props:
        current.color = props["c"]
    if "t" in props:
        split = props["t"].split("\n")
        if split[0]:
            current.default.text_color = split[0]
        current.text_color = reorder_items(split, align)
    if "x" in props:
        current.x = round(current.x + props["x"], 6)
    if "y" in props:
        current.y = round(current.y + props["y"], 6)
    if "w" in props:
        current.width = props["w"]
    if "h" in props:
        current.height = props["h"]
    if "x2" in props:
        current.x2 = props["x2"]
    if "y2" in props:
        current.y2 = props["y2"]
    if "w2" in props:
        current.width2 = props["w2"]
    if "h2" in props:
        current.height2 = props["h2"]
    if "n" in props:
        current.nub = props["n"]
    if "l" in props:
        current.stepped = props["l"]
    if "d" in props:
        current.decal = props["d"]
    if "g" in props:
        current.ghost = props["g"]
    return align


def parse_kle(rows) -> Keyboard:
    """Build a Keyboard from decoded KLE rows. Raises LayoutError."""
    if not isinstance(rows, list):
        raise LayoutError("Expected a list of rows")

    meta = KeyboardMetadata()
    keys: list[Key] = []
    current = Key()
    cluster = {"x": 0.0, "y": 0.0}
    align = 4

    for r, row in enumerate(rows):
        if isinstance(row, dict):
            if r != 0:
                raise LayoutError(f"Metadata object only allowed as the first row (row {r})")
            names = {f.name for f in fields(KeyboardMetadata)}
            meta = KeyboardMetadata(**{k: v for k, v in row.items() if k in names})
            continue
        if not isinstance(row, list):
            raise LayoutError(f"Unexpected row type {type(row).__name__} (row {r})")
        for k, item in enumerate(row):
            if not isinstance(item, (str, dict)):
                raise LayoutError(f"Unexpected item type {type(item).__name__} (row {r})")
            if isinstance(item, dict) and k != 0 and any(p in item for p in _ROTATION_PROPS):
                raise LayoutError(
                    f"Rotation can only be specified on the first key in a row (row {r})")
            try:
                if isinstance(item, str):
                    keys.append(_finish_key(current, item, align))
                    # Cursor moves right; size and per-key flags reset
                    current.x = round(current.x + current.width, 6)
                    current.width = current.height = 1.0
                    current.x2 = current.y2 = current.width2 = current.height2 = 0.0
                    current.nub = current.stepped = current.decal = False
                else:
                    align = _apply_props(current, item, cluster, align)
            except (TypeError, AttributeError) as e:
                raise LayoutError(f"Bad property value in row {r}: {e}") from e
        current.y = round(current.y + 1, 6)
        current.x = current.rotation_x

    return Keyboard(meta=meta, keys=keys)


def loads(text: str) -> Keyboard:
    """Parse KLE JSON text. Raises LayoutError."""
    try:
        rows = json.loads(text)
    except json.JSONDecodeError as e:
        raise LayoutError(f"Invalid JSON: {e}") from e
    return parse_kle(rows)


def load(path: str | os.PathLike) -> Keyboard:
    """Read and parse a KLE JSON file (UTF-8, as exported by the editor)."""
    with open(path, encoding="utf-8") as f:
        return loads(f.read())
