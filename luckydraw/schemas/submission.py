from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator, model_validator

from luckydraw.utils.constants import OTHER_CHOICE

REQUIRED_MESSAGES: Dict[str, str] = {
    "customer_name": "Customer name is required",
    "shop_name": "Shop name is required",
    "sold_area": "Sold area is required",
    "how_know_about_campaign": "This field is required",
    "profession": "Profession is required",
}


class CustomerEntry(BaseModel):
    customer_name: str
    phone_number: str
    email: Optional[EmailStr] = None
    shop_name: str
    sold_area: str
    region: Optional[str] = None
    imei: str
    how_know_about_campaign: str
    other_campaign_source: Optional[str] = None
    profession: str
    other_profession: Optional[str] = None

    @field_validator("customer_name", "shop_name", "sold_area", "how_know_about_campaign", "profession")
    @classmethod
    def required(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            raise ValueError(REQUIRED_MESSAGES[str(info.field_name)])

        return value

    @field_validator("phone_number")
    @classmethod
    def phone_length(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 10:
            msg = "Contact number must be at least 10 digits"
            raise ValueError(msg)

        return value

    @field_validator("imei")
    @classmethod
    def imei_length(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 15:
            msg = "IMEI must be at least 15 characters"
            raise ValueError(msg)

        return value

    @field_validator("email", "region", "other_campaign_source", "other_profession", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None

        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def other_choices_filled(self) -> "CustomerEntry":
        if self.how_know_about_campaign == OTHER_CHOICE and not self.other_campaign_source:
            msg = "Please tell us how you heard about the campaign"
            raise ValueError(msg)

        if self.profession == OTHER_CHOICE and not self.other_profession:
            msg = "Please specify your profession"
            raise ValueError(msg)

        return self

    @property
    def campaign_source(self) -> str:
        if self.how_know_about_campaign == OTHER_CHOICE:
            return self.other_campaign_source or ""

        return self.how_know_about_campaign

    @property
    def resolved_profession(self) -> str:
        if self.profession == OTHER_CHOICE:
            return self.other_profession or ""

        return self.profession

    def to_payload(self, lucky_draw_system: int) -> Dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True)
        payload.update(
            {
                "how_know_about_campaign": self.campaign_source,
                "profession": self.resolved_profession,
                "lucky_draw_system": lucky_draw_system,
            }
        )

        return payload


class SubmissionResponse(BaseModel):
    customer_name: str = ""
    date_of_purchase: Optional[str] = None
    imei: str = ""
    phone_model: Optional[str] = None
    phone_number: str = ""
    shop_name: str = ""
    sold_area: str = ""

    # null | gift object | [gift object], normalized by the reveal layer
    gift: Any = Field(default=None)
