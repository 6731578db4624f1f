"""Render KLE layouts to SVG (or embedded PNG) and collect them in one HTML file.

Usage:
    python -m keycaps.gen_keycaps [--root DIR] [--pattern GLOB] [--out FILE]
                                  [--format svg|png] [--width PX] [--padding U]
                                  [--show-pivots] [-v]

Each layout is parsed, normalized once and rendered independently; a layout
that fails to parse is reported and skipped, the rest of the batch continues.
"""
import argparse
import glob
import logging
import os
import sys

from kle.serial import loads
from keycaps.constants import RenderConfig, DEFAULT_CONFIG, PIXEL_WIDTH, LAYOUT_PADDING
from keycaps.svg import render_svg
from keycaps.raster import render_img_tag

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "layouts/**/*.json"
DEFAULT_OUT = ".out.html"

_BACKENDS = {
    "svg": render_svg,
    "png": render_img_tag,
}


def render_layout(text: str, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Layout JSON text to one markup document. Raises LayoutError."""
    try:
        backend = _BACKENDS[config.backend]
    except KeyError:
        raise ValueError(f"Unknown backend: {config.backend!r}") from None
    return backend(loads(text), config)


def find_layouts(root: str = ".", pattern: str = DEFAULT_PATTERN) -> list[str]:
    """Layout files under root matching pattern, sorted for stable output."""
    return sorted(glob.glob(os.path.join(root, pattern), recursive=True))


def render_files(paths: list[str], config: RenderConfig = DEFAULT_CONFIG
                 ) -> tuple[list[str], list[str]]:
    """Render each path; returns (documents, failed_paths)."""
    docs, failed = [], []
    for path in paths:
        print(path)
        try:
            with open(path, encoding="utf-8") as f:
                docs.append(render_layout(f.read(), config))
        except (ValueError, OSError) as e:  # LayoutError, GeometryError, bad colors
            logger.error("Skipping %s: %s", path, e)
            failed.append(path)
    return docs, failed


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render keyboard-layout-editor JSON files to SVG/PNG in one HTML file",
    )
    parser.add_argument("--root", default=".", help="Directory searched for layouts (default: .)")
    parser.add_argument("--pattern", default=DEFAULT_PATTERN,
                        help=f"Glob relative to root (default: {DEFAULT_PATTERN})")
    parser.add_argument("--out", default=DEFAULT_OUT, help=f"Output file (default: {DEFAULT_OUT})")
    parser.add_argument("--format", choices=sorted(_BACKENDS), default="svg",
                        help="Vector markup or embedded PNG (default: svg)")
    parser.add_argument("--width", type=int, default=PIXEL_WIDTH,
                        help=f"Output width in pixels (default: {PIXEL_WIDTH})")
    parser.add_argument("--padding", type=float, default=LAYOUT_PADDING,
                        help=f"Margin around the layout in U (default: {LAYOUT_PADDING})")
    parser.add_argument("--show-pivots", action="store_true",
                        help="Mark rotation pivots of rotated keys (svg only)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    config = DEFAULT_CONFIG._replace(
        backend=args.format, pixel_width=args.width,
        layout_padding=args.padding, show_pivots=args.show_pivots,
    )
    paths = find_layouts(args.root, args.pattern)
    logger.debug("Found %d layouts under %s", len(paths), args.root)
    docs, failed = render_files(paths, config)

    with open(args.out, "w", encoding="utf-8") as f:
        f.write("\n".join(docs))

    print(f"{len(docs)} layouts written to {args.out}")
    if failed:
        print(f"{len(failed)} failed: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
