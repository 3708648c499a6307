import math

import pytest

from luckydraw.services.reveal.geometry import (
    ease_out_cubic,
    label_position,
    resting_angle,
    sector_at_pointer,
    sector_colors,
    sector_layout,
    sector_width,
    target_rotation,
)


@pytest.mark.parametrize("sector_count", [1, 2, 3, 4, 7, 12])
@pytest.mark.parametrize("full_turns", [5, 6, 7, 8, 9])
def test_resting_angle_centres_target_sector(sector_count: int, full_turns: int) -> None:
    width = 360 / sector_count

    for target_index in range(sector_count):
        rotation = target_rotation(target_index=target_index, sector_count=sector_count, full_turns=full_turns)
        expected = (360 - target_index * width - width / 2) % 360

        assert math.isclose(resting_angle(rotation), expected, abs_tol=1e-9)
        assert sector_at_pointer(rotation, sector_count) == target_index


def test_rotation_includes_full_turns() -> None:
    assert target_rotation(target_index=0, sector_count=2, full_turns=5) == 5 * 360 + 270


def test_sector_width_rejects_empty_wheel() -> None:
    with pytest.raises(ValueError):
        sector_width(0)


def test_target_index_must_be_on_the_wheel() -> None:
    with pytest.raises(ValueError):
        target_rotation(target_index=3, sector_count=3, full_turns=5)


def test_layout_covers_the_circle() -> None:
    layout = sector_layout(5)

    assert [arc.index for arc in layout] == [0, 1, 2, 3, 4]
    assert layout[0].start == 0
    assert math.isclose(sum(arc.extent for arc in layout), 360)
    assert math.isclose(layout[1].mid, 108)


def test_colors_are_distinct_hex() -> None:
    colors = sector_colors(6)

    assert len(set(colors)) == 6
    assert all(len(color) == 7 and color.startswith("#") for color in colors)


def test_label_of_single_sector_points_down() -> None:
    # one sector spans the whole wheel, its middle is at 180 degrees
    dx, dy = label_position(0, 1, radius=100)

    assert math.isclose(dx, 0, abs_tol=1e-9)
    assert math.isclose(dy, 100)


def test_label_follows_rotation() -> None:
    dx, dy = label_position(0, 4, radius=10, rotation=360 - 45)

    assert math.isclose(dx, 0, abs_tol=1e-9)
    assert math.isclose(dy, -10)


def test_ease_out_cubic_is_clamped() -> None:
    assert ease_out_cubic(-1) == 0
    assert ease_out_cubic(0) == 0
    assert ease_out_cubic(1) == 1
    assert ease_out_cubic(2) == 1
    assert ease_out_cubic(0.5) > 0.5
