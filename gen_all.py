"""Regenerate every HTML output from the layouts under layouts/.

Renders the vector page and the embedded-PNG page from the same set of
layouts so the two can be compared side by side.
"""
import os, sys

from keycaps.gen_keycaps import main as gen_keycaps

_DIR = os.path.dirname(os.path.abspath(__file__))

_OUTPUTS = [
    ("svg", ".out.html"),
    ("png", ".out.png.html"),
]


def main(root: str = _DIR) -> int:
    status = 0
    for fmt, name in _OUTPUTS:
        out = os.path.join(root, name)
        print(f"  rendering {fmt} -> {name} ...")
        status |= gen_keycaps(["--root", root, "--format", fmt, "--out", out])
    print("done.")
    return status


if __name__ == "__main__":
    sys.exit(main())
