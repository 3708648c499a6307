"""Wheel geometry shared by the reveal session and every renderer.

Angles are degrees, measured clockwise from the pointer at 12 o'clock.
Sector ``i`` spans ``[i * width, (i + 1) * width)`` on the unrotated wheel,
and a positive rotation turns the wheel clockwise.
"""

import colorsys
import math
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class SectorArc:
    index: int
    start: float
    extent: float

    @property
    def mid(self) -> float:
        return self.start + self.extent / 2


def sector_width(sector_count: int) -> float:
    if sector_count < 1:
        msg = f"Wheel needs at least one sector, got {sector_count}"
        raise ValueError(msg)

    return 360 / sector_count


def target_rotation(target_index: int, sector_count: int, full_turns: int) -> float:
    """Rotation that brings the centre of ``target_index`` under the pointer after ``full_turns`` turns."""
    width = sector_width(sector_count)
    if not 0 <= target_index < sector_count:
        msg = f"Target index {target_index} outside wheel of {sector_count} sectors"
        raise ValueError(msg)

    return full_turns * 360 + (360 - target_index * width - width / 2)


def resting_angle(rotation: float) -> float:
    return rotation % 360


def sector_at_pointer(rotation: float, sector_count: int) -> int:
    width = sector_width(sector_count)
    wheel_angle = (360 - resting_angle(rotation)) % 360
    return int(wheel_angle // width) % sector_count


def sector_layout(sector_count: int) -> List[SectorArc]:
    width = sector_width(sector_count)
    return [SectorArc(index=i, start=i * width, extent=width) for i in range(sector_count)]


def sector_colors(sector_count: int, saturation: float = 0.75, lightness: float = 0.65) -> List[str]:
    hue_step = 360 / max(sector_count, 1)
    colors: List[str] = []

    for i in range(sector_count):
        r, g, b = colorsys.hls_to_rgb((i * hue_step) / 360, lightness, saturation)
        colors.append(f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}")

    return colors


def label_position(index: int, sector_count: int, radius: float, rotation: float = 0.0) -> Tuple[float, float]:
    """Offset of a sector's label from the wheel centre, screen coordinates (y grows downwards)."""
    angle = math.radians(sector_layout(sector_count)[index].mid + rotation)
    return radius * math.sin(angle), -radius * math.cos(angle)


def ease_out_cubic(progress: float) -> float:
    progress = min(max(progress, 0.0), 1.0)
    return 1 - (1 - progress) ** 3
