"""Scrolling height-map terrain built from octave Perlin noise."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from perlinterrain.perlin import PerlinNoise

DEFAULT_SEED = 123456

Point = tuple[float, float, float]


@dataclass(frozen=True)
class TerrainSettings:
    """Grid size, noise parameters and scroll speeds of a terrain."""

    width: int = 1200
    height: int = 800
    cellsize: int = 12
    frequency: float = 0.11
    octaves: int = 4
    amplitude: float = 110.0
    scroll_x: float = 0.0
    scroll_y: float = -2.0


@dataclass(frozen=True)
class Segment:
    """A straight 3D line from ``start`` to ``end``."""

    start: Point
    end: Point


def grid_shape(width: int, height: int, cellsize: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` of a grid covering ``width`` x ``height``."""
    if cellsize <= 0:
        raise ValueError(f"cellsize must be positive, got {cellsize}")
    return height // cellsize, width // cellsize


def generate_height_map(
    noise: PerlinNoise, settings: TerrainSettings, time: float = 0.0
) -> list[list[float]]:
    """Sample the terrain heights for every grid cell at ``time`` seconds."""
    rows, cols = grid_shape(settings.width, settings.height, settings.cellsize)
    offset_x = time * settings.scroll_x
    offset_y = time * settings.scroll_y
    return [
        [
            noise.octave2d_01(
                x * settings.frequency + offset_x,
                y * settings.frequency + offset_y,
                settings.octaves,
            )
            * settings.amplitude
            for x in range(cols)
        ]
        for y in range(rows)
    ]


def wireframe_segments(
    height_map: Sequence[Sequence[float]], cellsize: float
) -> Iterator[Segment]:
    """Yield the four edges of every quad cell of ``height_map``."""
    for y, (row, next_row) in enumerate(zip(height_map, height_map[1:])):
        for x in range(len(row) - 1):
            left = (x * cellsize, row[x], y * cellsize)
            right = ((x + 1) * cellsize, row[x + 1], y * cellsize)
            top = (x * cellsize, next_row[x], (y + 1) * cellsize)
            bottom = ((x + 1) * cellsize, next_row[x + 1], (y + 1) * cellsize)
            yield Segment(left, right)
            yield Segment(right, bottom)
            yield Segment(bottom, top)
            yield Segment(top, left)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    defaults = TerrainSettings()
    parser = argparse.ArgumentParser(
        prog="perlinterrain",
        description="Generate a Perlin-noise terrain and print it as text.",
    )
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--cellsize", type=int, default=defaults.cellsize)
    parser.add_argument("--frequency", type=float, default=defaults.frequency)
    parser.add_argument("--octaves", type=int, default=defaults.octaves)
    parser.add_argument(
        "--amplitude",
        type=float,
        default=None,
        help="terrain height scale (random in [60, 160] when omitted)",
    )
    parser.add_argument("--scroll-x", type=float, default=defaults.scroll_x)
    parser.add_argument("--scroll-y", type=float, default=defaults.scroll_y)
    parser.add_argument("--time", type=float, default=0.0)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument(
        "--format", choices=("heights", "segments"), default="heights"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the height map or its wireframe segments to standard output."""
    args = _parse_args(argv)
    amplitude = (
        args.amplitude if args.amplitude is not None else float(random.randint(60, 160))
    )
    settings = TerrainSettings(
        width=args.width,
        height=args.height,
        cellsize=args.cellsize,
        frequency=args.frequency,
        octaves=args.octaves,
        amplitude=amplitude,
        scroll_x=args.scroll_x,
        scroll_y=args.scroll_y,
    )
    try:
        height_map = generate_height_map(PerlinNoise(args.seed), settings, args.time)
    except ValueError as exc:
        print(f"perlinterrain: {exc}", file=sys.stderr)
        return 2

    out = sys.stdout
    if args.format == "heights":
        for row in height_map:
            out.write(" ".join(f"{h:.4f}" for h in row) + "\n")
    else:
        for seg in wireframe_segments(height_map, settings.cellsize):
            coords = (*seg.start, *seg.end)
            out.write(" ".join(f"{c:.4f}" for c in coords) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())