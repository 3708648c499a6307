from luckydraw.services.reveal.geometry import (
    SectorArc,
    ease_out_cubic,
    label_position,
    resting_angle,
    sector_at_pointer,
    sector_colors,
    sector_layout,
    sector_width,
    target_rotation,
)
from luckydraw.services.reveal.normalizer import normalize, unwrap_raw_outcome
from luckydraw.services.reveal.scheduler import AsyncioScheduler, Scheduler, TimerHandle
from luckydraw.services.reveal.session import RevealSession, RevealTimer

__all__ = [
    "AsyncioScheduler",
    "RevealSession",
    "RevealTimer",
    "Scheduler",
    "SectorArc",
    "TimerHandle",
    "ease_out_cubic",
    "label_position",
    "normalize",
    "resting_angle",
    "sector_at_pointer",
    "sector_colors",
    "sector_layout",
    "sector_width",
    "target_rotation",
    "unwrap_raw_outcome",
]
