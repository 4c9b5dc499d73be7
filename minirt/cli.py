"""Command line entry point: render a ``.rt`` scene to a PPM image."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from minirt.parser import parse_scene
from minirt.render import render
from minirt.scene import HEIGHT, WIDTH, SceneError

USAGE = "Usage: minirt <scene.rt> [-o image.ppm] [--width N] [--height N]"


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(USAGE)


def _positive(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(text) from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(text)
    return value


def write_ppm(pixels: Iterable[Iterable[int]], path: str | os.PathLike[str]) -> None:
    """Write rows of packed 0xRRGGBB pixels as a binary PPM (P6) image."""
    rows = [list(row) for row in pixels]
    if not rows or not rows[0]:
        raise ValueError("image is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("image rows differ in length")
    body = bytearray()
    for row in rows:
        for pixel in row:
            body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    header = f"P6\n{width} {len(rows)}\n255\n".encode("ascii")
    with open(path, "wb") as handle:
        handle.write(header + body)


def _build_parser() -> _Parser:
    parser = _Parser(prog="minirt", usage=USAGE, add_help=False)
    parser.add_argument("scene")
    parser.add_argument("-o", "--output")
    parser.add_argument("--width", type=_positive, default=WIDTH)
    parser.add_argument("--height", type=_positive, default=HEIGHT)
    return parser


def _report(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Render the scene named on the command line; return the exit status."""
    try:
        args = _build_parser().parse_args(argv)
        scene = parse_scene(args.scene)
        pixels = render(scene, args.width, args.height)
        output = args.output or Path(args.scene).with_suffix(".ppm")
        write_ppm(pixels, output)
    except (_UsageError, SceneError) as exc:
        _report(str(exc))
        return 1
    except OSError as exc:
        _report(f"Cannot write image: {exc.strerror or exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())