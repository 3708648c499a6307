from pathlib import Path
from typing import List, Optional

import aiohttp
from loguru import logger

from luckydraw.core.managers.file import file_mgr
from luckydraw.infrastructure.clients.base import BaseClient
from luckydraw.schemas.enums.message_tag import MessageTag
from luckydraw.schemas.enums.offer_type import OfferKind
from luckydraw.schemas.imei import ImeiUploadResult
from luckydraw.schemas.lucky_draw import LuckyDraw, LuckyDrawUpdate
from luckydraw.schemas.offer import Offer, OfferForm
from luckydraw.schemas.page import Page
from luckydraw.schemas.prize import Prize


class AdminClient(BaseClient):
    """Bearer-authenticated management endpoints."""

    authorized = True

    # Lucky draws
    async def list_lucky_draws(self) -> Optional[Page[LuckyDraw]]:
        body = await self._send(method="GET", path="lucky-draw-systems/", action="Fetching lucky draws")
        if body is None:
            return None

        return self._parse_page(LuckyDraw, body, action="Fetching lucky draws")

    async def get_lucky_draw(self, lucky_draw_id: int) -> Optional[LuckyDraw]:
        body = await self._send(
            method="GET",
            path=f"lucky-draw-systems/{lucky_draw_id}/",
            action="Fetching lucky draw",
        )
        if body is None:
            return None

        return self._parse(LuckyDraw, body, action="Fetching lucky draw")

    async def update_lucky_draw(self, lucky_draw_id: int, update: LuckyDrawUpdate) -> Optional[LuckyDraw]:
        fields = update.to_form_fields()
        if not fields:
            self.notify(tag=MessageTag.WARNING, message="Nothing to update")
            return None

        form = aiohttp.FormData()
        for name, value in fields.items():
            form.add_field(name, value)

        body = await self._send(
            method="PATCH",
            path=f"lucky-draw-systems/{lucky_draw_id}/",
            action="Updating lucky draw",
            data=form,
        )
        if body is None:
            return None

        lucky_draw = self._parse(LuckyDraw, body, action="Updating lucky draw")
        if lucky_draw is not None:
            self.notify(tag=MessageTag.SUCCESS, message="Lucky draw updated successfully")

        return lucky_draw

    # Gift items
    async def list_gift_items(self, lucky_draw_id: int) -> Optional[Page[Prize]]:
        body = await self._send(
            method="GET",
            path="gift-items/",
            action="Fetching gift items",
            params={"lucky_draw_system_id": lucky_draw_id},
        )
        if body is None:
            return None

        return self._parse_page(Prize, body, action="Fetching gift items")

    async def add_gift_item(self, lucky_draw_id: int, name: str) -> Optional[Prize]:
        name = name.strip()
        if not name:
            self.notify(tag=MessageTag.ERROR, message="Gift name is required")
            return None

        form = aiohttp.FormData()
        form.add_field("name", name)
        form.add_field("lucky_draw_system", str(lucky_draw_id))

        body = await self._send(
            method="POST",
            path="gift-items/",
            action="Adding gift item",
            params={"lucky_draw_system_id": lucky_draw_id},
            data=form,
        )
        if body is None:
            return None

        gift = self._parse(Prize, body, action="Adding gift item")
        if gift is not None:
            self.notify(tag=MessageTag.SUCCESS, message="Gift item added successfully")

        return gift

    async def delete_gift_item(self, gift_id: int) -> bool:
        body = await self._send(method="DELETE", path=f"gift-items/{gift_id}/", action="Deleting gift item")
        if body is None:
            return False

        self.notify(tag=MessageTag.SUCCESS, message="Gift item deleted successfully")
        return True

    # Offers
    async def list_offers(self, lucky_draw_id: int, kind: OfferKind) -> Optional[Page[Offer]]:
        body = await self._send(
            method="GET",
            path=f"{kind.endpoint}/",
            action=f"Fetching {kind.value} offers",
            params={"lucky_draw_system_id": lucky_draw_id},
        )
        if body is None:
            return None

        page = self._parse_page(Offer, body, action=f"Fetching {kind.value} offers")
        if page is None:
            return None

        page.results = [offer if offer.type else offer.model_copy(update={"type": kind}) for offer in page.results]
        return page

    async def list_all_offers(self, lucky_draw_id: int) -> Optional[List[Offer]]:
        offers: List[Offer] = []
        for kind in OfferKind:
            page = await self.list_offers(lucky_draw_id=lucky_draw_id, kind=kind)
            if page is None:
                return None

            offers.extend(page.results)

        return offers

    async def add_offer(self, lucky_draw_id: int, form: OfferForm) -> Optional[Offer]:
        body = await self._send(
            method="POST",
            path=f"{form.type.endpoint}/",
            action="Adding offer",
            json_body=form.to_payload(lucky_draw_system=lucky_draw_id),
        )
        if body is None:
            return None

        offer = self._parse(Offer, body, action="Adding offer")
        if offer is not None:
            self.notify(tag=MessageTag.SUCCESS, message="Offer added successfully")

        return offer

    async def delete_offer(self, offer_id: int, kind: OfferKind) -> bool:
        body = await self._send(method="DELETE", path=f"{kind.endpoint}/{offer_id}/", action="Deleting offer")
        if body is None:
            return False

        self.notify(tag=MessageTag.SUCCESS, message="Offer deleted successfully")
        return True

    # IMEI allow-list
    async def upload_imei(self, lucky_draw_id: int, file_path: str | Path) -> Optional[ImeiUploadResult]:
        try:
            filename, content = file_mgr.read_upload(file_path=file_path)

        except OSError as error:
            logger.error(f"Cannot read IMEI file: {error}")
            self.notify(tag=MessageTag.ERROR, message="Please select a file to upload.")
            return None

        form = aiohttp.FormData()
        form.add_field("file", content, filename=filename, content_type="text/csv")
        form.add_field("lucky_draw_system", str(lucky_draw_id))

        body = await self._send(method="POST", path="upload-imeino/", action="IMEI upload", data=form)
        if body is None:
            return None

        result = ImeiUploadResult(success=True)
        if isinstance(body, dict):
            result = ImeiUploadResult.model_validate({**body, "success": True})

        self.notify(tag=MessageTag.SUCCESS, message=result.message)
        return result
