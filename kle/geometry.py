"""Pure geometry for key layouts: rotation, rotated key corners, bounds."""
import math

import numpy as np

from .types import Point, Bounds, Key

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Rotation
# ============================================================
def rotate(p: Point, pivot: Point, angle: float) -> Point:
    """Rotate p about pivot by angle degrees, clockwise on a y-down canvas.

    angle == 0 returns p itself; a point on the pivot returns the pivot.
    """
    if angle == 0:
        return p
    dx = p[0]-pivot[0]; dy = p[1]-pivot[1]; d = math.sqrt(dx**2+dy**2)
    if d == 0:
        return pivot
    a = math.acos(max(-1.0, min(1.0, dx/d)))
    if dy < 0:
        a = -a
    a += math.radians(angle)
    return (pivot[0]+d*math.cos(a), pivot[1]+d*math.sin(a))

# ============================================================
# Key Bounds
# ============================================================
def key_corners(key: Key) -> list[Point]:
    """Unrotated corners of the primary rectangle, then the secondary one.

    The secondary rectangle is always included; when it is zero-sized its
    corners collapse onto (x+x2, y+y2).
    """
    if key.width <= 0 or key.height <= 0:
        raise GeometryError(f"Key size must be positive: {key.width}x{key.height}")
    x, y = key.x, key.y
    sx, sy = x+key.x2, y+key.y2
    return [
        (x, y), (x+key.width, y), (x+key.width, y+key.height), (x, y+key.height),
        (sx, sy), (sx+key.width2, sy), (sx+key.width2, sy+key.height2), (sx, sy+key.height2),
    ]

def key_bounds(key: Key) -> list[Point]:
    """Corners of key rotated about its own pivot; their extremes bound the cap."""
    pivot = key.pivot
    return [rotate(c, pivot, key.rotation_angle) for c in key_corners(key)]

def keyboard_bounds(keys: list[Key]) -> Bounds | None:
    """Component-wise min/max over every key's rotated corners. None when empty."""
    if not keys:
        return None
    corners = np.array([c for key in keys for c in key_bounds(key)], dtype=float)
    lo = corners.min(axis=0); hi = corners.max(axis=0)
    return Bounds(min=(float(lo[0]), float(lo[1])), max=(float(hi[0]), float(hi[1])))
