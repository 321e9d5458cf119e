# perlinterrain

Classic 3D Perlin noise with a permutation table that is shuffled from a
seeded 32-bit Mersenne Twister. It comes with octave ("fractal") helpers
and a small terrain generator. The generator turns the noise into a
scrolling height map and a wireframe grid, and prints either one as text.

The same seed always gives the same permutation table. Noise values are
therefore the same from run to run and from machine to machine.

## Installation

```
pip install perlinterrain
```

The package needs only the standard library at run time.

## Noise

```python
from perlinterrain.perlin import PerlinNoise

noise = PerlinNoise(123456)

noise.noise1d(0.5)             # in [-1, 1]
noise.noise2d(0.5, 1.25)       # in [-1, 1]
noise.noise3d(0.5, 1.25, 2.0)  # in [-1, 1]

noise.noise2d_01(0.5, 1.25)    # remapped to [0, 1]
```

`PerlinNoise()` with no seed uses the classic reference permutation table.
`PerlinNoise(seed)` and `reseed(seed)` build the table from an integer seed
through `MT19937`. They also accept any callable that returns unsigned
integers, and use it as the random source instead.

`noise1d` and `noise2d` sample `noise3d` at fixed values for the missing
coordinates, `DEFAULT_Y = 0.12345` and `DEFAULT_Z = 0.34567`.

### Octave noise

Octave noise adds several layers together. Each layer has twice the
frequency of the one before it, and its amplitude is multiplied by
`persistence`, which defaults to `0.5`.

| Methods                                   | Result                                       |
|-------------------------------------------|----------------------------------------------|
| `octave1d`, `octave2d`, `octave3d`        | raw sum, may fall outside [-1, 1]            |
| `octave1d_11`, `octave2d_11`, `octave3d_11` | clamped to [-1, 1]                         |
| `octave1d_01`, `octave2d_01`, `octave3d_01` | clamped and remapped to [0, 1]             |
| `normalized_octave1d/2d/3d`               | divided by the summed amplitudes             |
| `normalized_octave1d_01/2d_01/3d_01`      | normalized, then remapped to [0, 1]          |

```python
noise.octave2d_01(3.3, 7.1, 4)
noise.normalized_octave3d(1.0, 2.0, 3.0, 6, 0.5)
```

### Saving and restoring state

- `serialize()` returns the 256-entry permutation table as `bytes`.
- `deserialize(state)` loads a table back from any sequence of 256 integers
  in `0..255`. It raises `ValueError` when the state does not meet that rule.

```python
state = noise.serialize()
other = PerlinNoise(1)
other.deserialize(state)
assert other.noise2d(0.3, 0.7) == noise.noise2d(0.3, 0.7)
```

### Building blocks

`perlinterrain.perlin` also exposes the pieces the noise is built from:

- `fade`
- `lerp`
- `grad`
- `remap_01`
- `clamp_11`
- `remap_clamp_01`
- `max_amplitude`
- `random_bounded` and `shuffle`, which together make up the portable
  in-place shuffle used to build the permutation from a random source.

`perlinterrain.mt19937.MT19937` is the 32-bit Mersenne Twister used for
seeding:

- Calling an instance returns the next 32-bit output.
- `seed(seed)` resets its state.
- The default seed is 5489.

## Terrain

`perlinterrain.terrain` builds a grid of heights from the noise:

- `TerrainSettings` is a frozen dataclass that holds the settings:
  - `width` = 1200
  - `height` = 800
  - `cellsize` = 12
  - `frequency` = 0.11
  - `octaves` = 4
  - `amplitude` = 110.0
  - `scroll_x` = 0.0
  - `scroll_y` = -2.0
- `grid_shape(width, height, cellsize)` returns `(rows, cols)`. It raises
  `ValueError` if `cellsize` is not positive.
- `generate_height_map(noise, settings, time=0.0)` returns a list of rows of
  heights. For each cell it calls `octave2d_01` at
  `index * frequency + time * scroll_speed` and multiplies the result by
  `amplitude`.
- `wireframe_segments(height_map, cellsize)` yields four `Segment` objects
  for every quad cell of the map. Each `Segment` holds 3D `start` and `end`
  points of the form `(x, height, z)`.

```python
from perlinterrain.perlin import PerlinNoise
from perlinterrain.terrain import TerrainSettings, generate_height_map, wireframe_segments

settings = TerrainSettings(width=120, height=60)
heights = generate_height_map(PerlinNoise(123456), settings, time=1.5)
segments = list(wireframe_segments(heights, settings.cellsize))
```

## Command line

```
perlinterrain [--width N] [--height N] [--cellsize N] [--frequency F]
              [--octaves N] [--amplitude F] [--scroll-x F] [--scroll-y F]
              [--time F] [--seed N] [--format {heights,segments}]
```

The command builds a terrain and writes it to standard output.

- Defaults come from `TerrainSettings`.
- The default seed is 123456.
- `--time` defaults to 0.

If `--amplitude` is left out, a random whole number from 60 to 160 is used
for it.

The `--format` option chooses what is printed:

- `--format heights` (the default) prints one line per grid row, giving the
  heights to four decimal places.
- `--format segments` prints one line per wireframe segment, giving the six
  coordinates of its start and end points.

An invalid grid, such as a non-positive cell size, is reported on standard
error and the command exits with status 2.

## What this package does not do

The package does not open a window, render the terrain in 3D, orbit a camera,
or offer on-screen controls for frequency and octaves. It computes heights
and wireframe line segments and prints them as text. Drawing them is left to
whatever program reads that output or calls the functions above.

## Running the tests

```
pip install perlinterrain[test]
pytest
```