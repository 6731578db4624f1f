"""Generic scene node: a tag with attributes, inline styles and children.

Built with chained calls and serialized to markup in one pass:

    Element("rect").attr("width", 1).style("fill", "#c00").serialize()
    -> '<rect style="fill:#c00;" width="1"/>'
"""
from typing import Iterator, Union

Value = Union[str, int, float]


def format_number(value: Value) -> str:
    """Markup text for an attribute or style value."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, float):
        value = round(value, 6)
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


class Element:
    def __init__(self, tag: str):
        self.tag = tag
        self.attributes: dict[str, Value] = {}
        self.styles: dict[str, Value] = {}
        self.children: list[Union["Element", str]] = []

    def attr(self, name: str, value: Value) -> "Element":
        self.attributes[name] = value
        return self

    def style(self, name: str, value: Value) -> "Element":
        self.styles[name] = value
        return self

    def child(self, node: Union["Element", str]) -> "Element":
        """Append a node, or text which is emitted verbatim (caller escapes)."""
        self.children.append(node)
        return self

    def serialize(self) -> str:
        attrs = self._serialize_attributes()
        if not self.children:
            return f"<{self.tag}{attrs}/>"
        content = "".join(c if isinstance(c, str) else c.serialize() for c in self.children)
        return f"<{self.tag}{attrs}>{content}</{self.tag}>"

    def _serialize_attributes(self) -> str:
        out = ""
        style = "".join(f"{k}:{format_number(v)};" for k, v in self.styles.items())
        if style:
            out += f' style="{style}"'
        for k, v in self.attributes.items():
            out += f' {k}="{format_number(v)}"'
        return out

    def walk(self, depth: int = 0) -> Iterator[tuple[int, "Element"]]:
        """Depth-first (depth, element) pairs, self first; text is skipped."""
        yield depth, self
        for c in self.children:
            if isinstance(c, Element):
                yield from c.walk(depth + 1)

    def find_all(self, tag: str) -> list["Element"]:
        """Descendants (not self) with the given tag, in document order."""
        return [e for d, e in self.walk() if d > 0 and e.tag == tag]

    def __repr__(self):
        return f"Element({self.tag!r}, {len(self.attributes)} attrs, {len(self.children)} children)"
