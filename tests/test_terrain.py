import pytest

from perlinterrain.perlin import PerlinNoise
from perlinterrain.terrain import (
    Segment,
    TerrainSettings,
    generate_height_map,
    grid_shape,
    main,
    wireframe_segments,
)


@pytest.fixture
def noise():
    return PerlinNoise(123456)


def test_grid_shape_default_screen():
    assert grid_shape(1200, 800, 12) == (66, 100)


def test_grid_shape_rejects_non_positive_cellsize():
    with pytest.raises(ValueError):
        grid_shape(100, 100, 0)
    with pytest.raises(ValueError):
        grid_shape(100, 100, -4)


def test_height_map_shape_and_range(noise):
    settings = TerrainSettings(width=120, height=60, cellsize=12, amplitude=100.0)
    hm = generate_height_map(noise, settings, 0.0)
    assert len(hm) == 5
    assert all(len(row) == 10 for row in hm)
    assert all(0.0 <= h <= 100.0 for row in hm for h in row)


def test_height_map_is_deterministic(noise):
    settings = TerrainSettings(width=96, height=48, cellsize=12)
    first = generate_height_map(noise, settings, 1.5)
    second = generate_height_map(PerlinNoise(123456), settings, 1.5)
    assert first == second


def test_height_map_scales_with_amplitude(noise):
    base = TerrainSettings(width=96, height=48, cellsize=12, amplitude=50.0)
    double = TerrainSettings(width=96, height=48, cellsize=12, amplitude=100.0)
    low = generate_height_map(noise, base, 0.0)
    high = generate_height_map(noise, double, 0.0)
    for row_low, row_high in zip(low, high):
        for a, b in zip(row_low, row_high):
            assert b == pytest.approx(2 * a)


def test_scrolling_shifts_rows(noise):
    settings = TerrainSettings(
        width=60, height=60, cellsize=12, frequency=0.5, scroll_x=0.0, scroll_y=-0.5
    )
    still = generate_height_map(noise, settings, 0.0)
    moved = generate_height_map(noise, settings, 1.0)
    assert moved[1:] == still[:-1]


def test_time_has_no_effect_without_scroll(noise):
    settings = TerrainSettings(width=60, height=60, cellsize=12, scroll_x=0.0, scroll_y=0.0)
    assert generate_height_map(noise, settings, 0.0) == generate_height_map(
        noise, settings, 7.0
    )


def test_wireframe_segment_count():
    hm = [[0.0] * 5 for _ in range(4)]
    segments = list(wireframe_segments(hm, 10))
    assert len(segments) == 4 * 3 * 4


def test_wireframe_first_cell_edges():
    hm = [[1.0, 2.0], [3.0, 4.0]]
    segments = list(wireframe_segments(hm, 12))
    assert segments == [
        Segment((0, 1.0, 0), (12, 2.0, 0)),
        Segment((12, 2.0, 0), (12, 4.0, 12)),
        Segment((12, 4.0, 12), (0, 3.0, 12)),
        Segment((0, 3.0, 12), (0, 1.0, 0)),
    ]


def test_wireframe_cells_form_closed_loops(noise):
    settings = TerrainSettings(width=72, height=48, cellsize=12)
    hm = generate_height_map(noise, settings, 0.0)
    segments = list(wireframe_segments(hm, settings.cellsize))
    for i in range(0, len(segments), 4):
        cell = segments[i : i + 4]
        for a, b in zip(cell, cell[1:] + cell[:1]):
            assert a.end == b.start


def test_wireframe_empty_for_single_row():
    assert list(wireframe_segments([[1.0, 2.0, 3.0]], 12)) == []


def test_main_prints_heights(capsys):
    code = main(
        ["--width", "48", "--height", "36", "--cellsize", "12", "--amplitude", "80"]
    )
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 3
    values = [float(v) for line in out for v in line.split()]
    assert len(values) == 12
    assert all(0.0 <= v <= 80.0 for v in values)


def test_main_prints_segments(capsys):
    code = main(
        [
            "--width", "36", "--height", "36", "--cellsize", "12",
            "--amplitude", "80", "--format", "segments",
        ]
    )
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 4 * 2 * 2
    assert all(len(line.split()) == 6 for line in out)


def test_main_rejects_zero_cellsize(capsys):
    assert main(["--cellsize", "0", "--amplitude", "80"]) == 2
    assert "cellsize" in capsys.readouterr().err