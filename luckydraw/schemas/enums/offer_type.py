from enum import Enum, unique


@unique
class OfferKind(str, Enum):
    MOBILE = "mobile"
    RECHARGE = "recharge"

    @property
    def endpoint(self) -> str:
        return "mobile-phone-offers" if self == OfferKind.MOBILE else "recharge-card-offers"


@unique
class OfferCondition(str, Enum):
    EVERY_CERTAIN_SALE = "After every certain sale"
    AT_SALE_POSITION = "At certain sale position"
