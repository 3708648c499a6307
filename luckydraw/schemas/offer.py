from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from luckydraw.schemas.enums.offer_type import OfferCondition, OfferKind
from luckydraw.schemas.prize import Prize


def parse_sale_numbers(raw: str) -> List[int]:
    numbers: List[int] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue

        if not chunk.isdigit():
            msg = f"Invalid sale position: '{chunk}'"
            raise ValueError(msg)

        numbers.append(int(chunk))

    return numbers


class Offer(BaseModel):
    id: int
    type: Optional[OfferKind] = None
    lucky_draw_system_id: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    daily_quantity: int = 0
    type_of_offer: str = ""
    offer_condition_value: str = ""
    sale_numbers: Optional[List[int]] = None
    valid_condition: List[int] = []

    # Mobile phone offers
    gift: Optional[Prize] = None
    priority: Optional[int] = None

    # Recharge card offers
    amount: Optional[float] = None
    provider: Optional[str] = None

    @field_validator("gift", mode="before")
    @classmethod
    def gift_reference(cls, value: Any) -> Any:
        # some endpoints return the gift id only
        if isinstance(value, int):
            return {"id": value}

        return value

    @property
    def reward_label(self) -> str:
        if self.gift is not None:
            return self.gift.name or f"Gift #{self.gift.id}"

        if self.amount is not None:
            return f"{self.provider or 'Recharge'} {self.amount:g}"

        return "-"


class OfferForm(BaseModel):
    type: OfferKind = OfferKind.MOBILE
    start_date: date
    end_date: date
    daily_quantity: int = Field(ge=1)
    type_of_offer: OfferCondition = OfferCondition.EVERY_CERTAIN_SALE
    offer_condition_value: str = Field(min_length=1)
    gift: Optional[int] = None
    amount: Optional[float] = Field(default=None, gt=0)
    provider: Optional[str] = None

    @model_validator(mode="after")
    def check_offer(self) -> "OfferForm":
        if self.end_date < self.start_date:
            msg = "End date must not be before start date"
            raise ValueError(msg)

        if self.type == OfferKind.MOBILE and self.gift is None:
            msg = "Mobile phone offers need a gift item"
            raise ValueError(msg)

        if self.type == OfferKind.RECHARGE and (self.amount is None or not self.provider):
            msg = "Recharge card offers need an amount and a provider"
            raise ValueError(msg)

        if self.type_of_offer == OfferCondition.AT_SALE_POSITION:
            sale_numbers = parse_sale_numbers(self.offer_condition_value)
            if len(sale_numbers) != self.daily_quantity:
                msg = "Number of sales numbers should be equal to daily quantity"
                raise ValueError(msg)

            if len(set(sale_numbers)) != len(sale_numbers):
                msg = "Sales numbers should be unique numbers"
                raise ValueError(msg)

        return self

    @property
    def sale_numbers(self) -> Optional[List[int]]:
        if self.type_of_offer != OfferCondition.AT_SALE_POSITION:
            return None

        return parse_sale_numbers(self.offer_condition_value)

    def to_payload(self, lucky_draw_system: int) -> Dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True)
        payload.update(
            {
                "lucky_draw_system": lucky_draw_system,
                "sale_numbers": self.sale_numbers,
                "priority": 0,
            }
        )

        return payload
