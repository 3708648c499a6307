from datetime import date
from typing import List

import pytest
from pydantic import ValidationError

from luckydraw.schemas.api_error import ApiError
from luckydraw.schemas.enums.offer_type import OfferCondition, OfferKind
from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.lucky_draw import LuckyDrawUpdate
from luckydraw.schemas.offer import Offer, OfferForm, parse_sale_numbers
from luckydraw.schemas.outcome import CanonicalOutcome
from luckydraw.schemas.prize import Prize, PrizeCatalog
from luckydraw.schemas.submission import CustomerEntry

ENTRY = {
    "customer_name": "Sita Sharma",
    "phone_number": "9800000000",
    "email": "",
    "shop_name": "Hello Mobiles",
    "sold_area": "Kathmandu",
    "imei": "356938035643809",
    "how_know_about_campaign": "Facebook Ads",
    "profession": "Student",
}


class TestPrizeCatalog:
    def test_gift_list_gets_sentinel_first(self, gift_list: List[dict]) -> None:
        catalog = PrizeCatalog.from_gift_list(gift_list, group_id=3)

        assert len(catalog) == 4
        assert catalog[0].is_sentinel
        assert catalog[0].name == "Better Luck"
        assert catalog[0].group_id == 3
        assert [prize.id for prize in catalog] == [-1, 5, 8, 13]

    def test_server_sentinel_is_dropped(self) -> None:
        catalog = PrizeCatalog.from_gift_list([{"id": -1, "name": "Try again"}, {"id": 4, "name": "Cap"}])

        assert [prize.id for prize in catalog] == [-1, 4]
        assert catalog.sentinel.name == "Better Luck"

    def test_gifts_with_null_fields_are_kept(self) -> None:
        catalog = PrizeCatalog.from_gift_list(
            [
                {"id": 21, "name": "Tablet", "image": None, "lucky_draw_system": 3},
                {"id": 22, "name": None, "image": None, "lucky_draw_system": 3},
            ]
        )

        assert [prize.id for prize in catalog] == [-1, 21, 22]
        assert catalog[1].image_ref == ""
        assert catalog[2].name == ""

    def test_sentinel_alone_is_valid(self) -> None:
        catalog = PrizeCatalog.from_gift_list([])

        assert len(catalog) == 1

    def test_empty_catalog_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            PrizeCatalog([])

    def test_catalog_must_start_with_sentinel(self) -> None:
        with pytest.raises(ValueError):
            PrizeCatalog([Prize(id=5, name="Phone"), Prize.sentinel()])

    def test_index_lookup(self, catalog: PrizeCatalog) -> None:
        assert catalog.index_of(13) == 3
        assert catalog.index_of(42) is None

    def test_catalog_equality(self, gift_list: List[dict]) -> None:
        assert PrizeCatalog.from_gift_list(gift_list) == PrizeCatalog.from_gift_list(gift_list)


class TestCanonicalOutcome:
    def test_no_prize_defaults(self) -> None:
        outcome = CanonicalOutcome.no_prize()

        assert outcome.target_index == 0
        assert outcome.is_celebrated is False
        assert outcome.headline == "Thank you for participating!"

    def test_win_needs_real_prize(self) -> None:
        with pytest.raises(ValidationError):
            CanonicalOutcome(has_prize=True, prize=Prize.sentinel(), target_index=0)

    def test_loss_points_at_sentinel(self) -> None:
        with pytest.raises(ValidationError):
            CanonicalOutcome(has_prize=False, prize=None, target_index=2)

    def test_win_message(self) -> None:
        outcome = CanonicalOutcome(has_prize=True, prize=Prize(id=5, name="Phone"), target_index=1)

        assert outcome.headline == "Congratulations!"
        assert outcome.message == "You've won a Phone!"


def test_reveal_phases_only_move_forward() -> None:
    assert RevealPhase.IDLE.next_phase == RevealPhase.SPINNING
    assert RevealPhase.SPINNING.next_phase == RevealPhase.LANDED
    assert RevealPhase.LANDED.next_phase == RevealPhase.REVEALED
    assert RevealPhase.REVEALED.next_phase is None
    assert RevealPhase.REVEALED.is_terminal


class TestCustomerEntry:
    def test_payload_uses_choices_and_draw(self) -> None:
        payload = CustomerEntry.model_validate(ENTRY).to_payload(lucky_draw_system=3)

        assert payload["lucky_draw_system"] == 3
        assert payload["how_know_about_campaign"] == "Facebook Ads"
        assert payload["profession"] == "Student"
        assert "email" not in payload

    def test_other_choices_are_replaced_by_free_text(self) -> None:
        entry = CustomerEntry.model_validate(
            {
                **ENTRY,
                "how_know_about_campaign": "Other",
                "other_campaign_source": "Radio",
                "profession": "Other",
                "other_profession": "Farmer",
            }
        )

        payload = entry.to_payload(lucky_draw_system=1)

        assert payload["how_know_about_campaign"] == "Radio"
        assert payload["profession"] == "Farmer"

    def test_other_choice_needs_free_text(self) -> None:
        with pytest.raises(ValidationError, match="how you heard"):
            CustomerEntry.model_validate({**ENTRY, "how_know_about_campaign": "Other"})

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("customer_name", "  ", "Customer name is required"),
            ("phone_number", "98000", "at least 10 digits"),
            ("imei", "12345", "at least 15 characters"),
            ("shop_name", "", "Shop name is required"),
            ("email", "not-an-email", "email"),
        ],
    )
    def test_invalid_fields(self, field: str, value: str, message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            CustomerEntry.model_validate({**ENTRY, field: value})

    def test_valid_email_is_kept(self) -> None:
        entry = CustomerEntry.model_validate({**ENTRY, "email": "sita@example.com"})

        assert entry.to_payload(lucky_draw_system=1)["email"] == "sita@example.com"


class TestOfferForm:
    def base(self, **overrides: object) -> dict:
        data = {
            "type": OfferKind.MOBILE,
            "start_date": date(2024, 10, 1),
            "end_date": date(2024, 10, 31),
            "daily_quantity": 3,
            "type_of_offer": OfferCondition.EVERY_CERTAIN_SALE,
            "offer_condition_value": "10",
            "gift": 5,
        }
        data.update(overrides)
        return data

    def test_interval_offer_payload(self) -> None:
        payload = OfferForm.model_validate(self.base()).to_payload(lucky_draw_system=3)

        assert payload["lucky_draw_system"] == 3
        assert payload["sale_numbers"] is None
        assert payload["priority"] == 0
        assert payload["type_of_offer"] == "After every certain sale"
        assert payload["start_date"] == "2024-10-01"

    def test_sale_positions_become_numbers(self) -> None:
        form = OfferForm.model_validate(
            self.base(type_of_offer=OfferCondition.AT_SALE_POSITION, offer_condition_value="3, 7,12")
        )

        assert form.to_payload(lucky_draw_system=1)["sale_numbers"] == [3, 7, 12]

    def test_sale_positions_must_match_daily_quantity(self) -> None:
        with pytest.raises(ValidationError, match="equal to daily quantity"):
            OfferForm.model_validate(
                self.base(type_of_offer=OfferCondition.AT_SALE_POSITION, offer_condition_value="3,7")
            )

    def test_sale_positions_must_be_unique(self) -> None:
        with pytest.raises(ValidationError, match="unique"):
            OfferForm.model_validate(
                self.base(type_of_offer=OfferCondition.AT_SALE_POSITION, offer_condition_value="3,3,7")
            )

    def test_mobile_offer_needs_gift(self) -> None:
        with pytest.raises(ValidationError, match="gift item"):
            OfferForm.model_validate(self.base(gift=None))

    def test_recharge_offer_needs_amount_and_provider(self) -> None:
        with pytest.raises(ValidationError, match="amount and a provider"):
            OfferForm.model_validate(self.base(type=OfferKind.RECHARGE, gift=None, amount=100))

        form = OfferForm.model_validate(self.base(type=OfferKind.RECHARGE, gift=None, amount=100, provider="NTC"))
        assert form.type.endpoint == "recharge-card-offers"

    def test_end_date_after_start(self) -> None:
        with pytest.raises(ValidationError, match="End date"):
            OfferForm.model_validate(self.base(end_date=date(2024, 9, 1)))


def test_parse_sale_numbers_rejects_text() -> None:
    assert parse_sale_numbers("1, 2,,3") == [1, 2, 3]

    with pytest.raises(ValueError):
        parse_sale_numbers("1,two")


def test_offer_accepts_gift_id_or_object() -> None:
    by_id = Offer.model_validate({"id": 1, "gift": 5})
    by_object = Offer.model_validate({"id": 2, "gift": {"id": 5, "name": "Phone"}})
    recharge = Offer.model_validate({"id": 3, "amount": 100, "provider": "NTC"})

    assert by_id.reward_label == "Gift #5"
    assert by_object.reward_label == "Phone"
    assert recharge.reward_label == "NTC 100"


def test_lucky_draw_update_only_sends_set_fields() -> None:
    update = LuckyDrawUpdate(name="Dashain Offer", start_date=date(2024, 10, 1))

    assert update.to_form_fields() == {"name": "Dashain Offer", "start_date": "2024-10-01"}

    with pytest.raises(ValidationError):
        LuckyDrawUpdate(start_date=date(2024, 10, 2), end_date=date(2024, 10, 1))


def test_api_error_prefers_error_then_message() -> None:
    assert ApiError.from_body({"error": "IMEI already used"}).describe("x") == "IMEI already used"
    assert ApiError.from_body({"message": "Bad file"}).describe("x") == "Bad file"
    assert ApiError.from_body([]).describe("fallback") == "fallback"
