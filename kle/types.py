"""Shared type definitions for keyboard layouts."""
from dataclasses import dataclass, field
from typing import NamedTuple

Point = tuple[float, float]

KEY_MAX_LABELS = 12


class Bounds(NamedTuple):
    min: Point; max: Point

    @property
    def width(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        return self.max[1] - self.min[1]


@dataclass
class KeyDefault:
    text_color: str = "#000000"
    text_size: int = 3


@dataclass
class Key:
    """One key record in U-space.

    x2/y2 are offsets of the secondary rectangle from (x, y); all four
    secondary fields are 0 when the key has no secondary rectangle.
    Labels, text colors and text sizes are indexed by the 12-slot legend grid.
    """
    color: str = "#cccccc"
    labels: list[str] = field(default_factory=list)
    text_color: list[str | None] = field(default_factory=list)
    text_size: list[int | None] = field(default_factory=list)
    default: KeyDefault = field(default_factory=KeyDefault)
    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0
    x2: float = 0.0
    y2: float = 0.0
    width2: float = 0.0
    height2: float = 0.0
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_angle: float = 0.0
    decal: bool = False
    ghost: bool = False
    stepped: bool = False
    nub: bool = False
    profile: str = ""

    @property
    def pivot(self) -> Point:
        return (self.rotation_x, self.rotation_y)

    def label(self, index: int) -> str:
        return self.labels[index] if index < len(self.labels) and self.labels[index] else ""


@dataclass
class KeyboardMetadata:
    name: str = ""
    author: str = ""
    backcolor: str = "#eeeeee"
    notes: str = ""


@dataclass
class Keyboard:
    meta: KeyboardMetadata = field(default_factory=KeyboardMetadata)
    keys: list[Key] = field(default_factory=list)
