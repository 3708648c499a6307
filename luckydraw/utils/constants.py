from typing import Tuple

# Reserved "no win" entry, always first on the wheel
SENTINEL_PRIZE_ID: int = -1
SENTINEL_PRIZE_NAME: str = "Better Luck"
SENTINEL_PRIZE_IMAGE: str = "/betterlucknexttime.png"

# Full turns drawn per spin: floor(random() * SPREAD) + MIN
MIN_FULL_ROTATIONS: int = 5
FULL_ROTATION_SPREAD: int = 5

# Reveal timings in milliseconds
SPIN_DURATION_MS: int = 5000
LANDED_DWELL_MS: int = 4000
CELEBRATION_DURATION_MS: int = 5000

OTHER_CHOICE: str = "Other"

CAMPAIGN_SOURCES: Tuple[str, ...] = (
    "Facebook Ads",
    "Retail Shop",
    "Google Ads",
    "Youtube",
    "Friend Recommended",
    OTHER_CHOICE,
)

PROFESSIONS: Tuple[str, ...] = (
    "Service",
    "Business",
    "Self Employed",
    "Student",
    OTHER_CHOICE,
)
