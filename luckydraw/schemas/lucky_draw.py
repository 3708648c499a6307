from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class LuckyDraw(BaseModel):
    id: int
    name: str = ""
    description: str = ""
    redeem_condition: str = ""
    terms_and_conditions: str = ""
    how_to_participate: str = ""
    background_image: Optional[str] = None
    hero_image: Optional[str] = None
    main_offer_stamp_image: Optional[str] = None
    qr: Optional[str] = None
    type: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class LuckyDrawUpdate(BaseModel):
    """Editable text fields of a lucky draw. Only the fields that were set are sent."""

    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = Field(default=None, min_length=1)
    how_to_participate: Optional[str] = Field(default=None, min_length=1)
    redeem_condition: Optional[str] = Field(default=None, min_length=1)
    terms_and_conditions: Optional[str] = Field(default=None, min_length=1)

    @field_validator("end_date")
    @classmethod
    def end_after_start(cls, value: Optional[date], info: ValidationInfo) -> Optional[date]:
        start = info.data.get("start_date")
        if value is not None and start is not None and value < start:
            msg = "End date must not be before start date"
            raise ValueError(msg)

        return value

    def to_form_fields(self) -> Dict[str, str]:
        data = self.model_dump(mode="json", exclude_none=True)
        return {key: str(value) for key, value in data.items()}
