from collections.abc import Mapping
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError

from luckydraw.schemas.outcome import CanonicalOutcome
from luckydraw.schemas.prize import Prize, PrizeCatalog


def unwrap_raw_outcome(raw: Any) -> Optional[Prize]:
    """Collapse the backend ``gift`` value into a single prize or ``None``.

    Accepted shapes are ``None``, one prize-shaped mapping (or ``Prize``), and a
    list holding zero or one of those. Anything else, an empty mapping, or a
    mapping whose ``id`` is missing or falsy counts as "no prize".
    """
    if raw is None:
        return None

    if isinstance(raw, (list, tuple)):
        if not raw:
            return None

        if len(raw) > 1:
            logger.warning(f"Gift list holds {len(raw)} entries, only the first one is used")

        candidate = raw[0]
        if isinstance(candidate, (list, tuple)):
            logger.warning("Nested gift list in submission outcome, treating as no prize")
            return None

        return unwrap_raw_outcome(candidate)

    if isinstance(raw, Prize):
        return raw if raw.id else None

    if isinstance(raw, Mapping):
        if not raw.get("id"):
            return None

        try:
            return Prize.model_validate(dict(raw))

        except ValidationError as error:
            logger.warning(f"Malformed gift in submission outcome, treating as no prize: {error.errors()}")
            return None

    logger.warning(f"Unexpected gift type {type(raw).__name__} in submission outcome, treating as no prize")
    return None


def normalize(raw: Any, catalog: PrizeCatalog) -> CanonicalOutcome:
    prize = unwrap_raw_outcome(raw)
    if prize is None:
        return CanonicalOutcome.no_prize()

    if prize.id == catalog.sentinel.id:
        return CanonicalOutcome.no_prize()

    target_index = catalog.index_of(prize.id)
    if target_index is None:
        logger.warning(f"Won prize id={prize.id} ('{prize.name}') is not in the wheel catalog, showing no prize")
        return CanonicalOutcome.no_prize()

    return CanonicalOutcome(has_prize=True, prize=prize, target_index=target_index)
