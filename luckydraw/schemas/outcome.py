from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.prize import Prize


class CanonicalOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_prize: bool = False
    prize: Optional[Prize] = None
    target_index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_consistency(self) -> "CanonicalOutcome":
        if self.has_prize:
            if self.prize is None or self.prize.is_sentinel:
                msg = "A winning outcome needs a non-sentinel prize"
                raise ValueError(msg)

        elif self.prize is not None or self.target_index != 0:
            msg = "A losing outcome points at the sentinel (index 0) with no prize"
            raise ValueError(msg)

        return self

    @classmethod
    def no_prize(cls) -> "CanonicalOutcome":
        return cls(has_prize=False, prize=None, target_index=0)

    @property
    def is_celebrated(self) -> bool:
        return self.has_prize and self.prize is not None and not self.prize.is_sentinel

    @property
    def headline(self) -> str:
        return "Congratulations!" if self.is_celebrated else "Thank you for participating!"

    @property
    def message(self) -> str:
        if self.is_celebrated and self.prize is not None:
            return f"You've won a {self.prize.name}!"

        return "Unfortunately, you didn't win a prize this time."


class RevealSnapshot(BaseModel):
    """Read-only view of a reveal session handed to renderers."""

    model_config = ConfigDict(frozen=True)

    phase: RevealPhase
    rotation_angle: float = 0.0
    stopped_at_entry: Optional[Prize] = None
    revealed_outcome: Optional[CanonicalOutcome] = None
    celebrate: bool = False
