from typing import List, Optional

from luckydraw.infrastructure.clients.base import BaseClient
from luckydraw.schemas.enums.message_tag import MessageTag
from luckydraw.schemas.organization import OrganizationData
from luckydraw.schemas.prize import Prize
from luckydraw.schemas.submission import CustomerEntry, SubmissionResponse


class BackendClient(BaseClient):
    """Public, unauthenticated endpoints used by the entry form."""

    async def get_organization(self, organization_id: int) -> Optional[OrganizationData]:
        body = await self._send(
            method="GET",
            path="get-organization/",
            action="Organization lookup",
            params={"organization_id": organization_id},
            silent=True,
        )
        if body is None:
            message = f"Organization {organization_id} unavailable, using the fallback lucky draw"
            self.notify(tag=MessageTag.WARNING, message=message)
            return None

        return self._parse(OrganizationData, body, action="Organization lookup")

    async def submit_entry(self, entry: CustomerEntry, lucky_draw_system: int) -> Optional[SubmissionResponse]:
        body = await self._send(
            method="POST",
            path="customers/",
            action="Form submission",
            json_body=entry.to_payload(lucky_draw_system=lucky_draw_system),
        )
        if body is None:
            return None

        submission = self._parse(SubmissionResponse, body, action="Form submission")
        if submission is not None:
            self.notify(tag=MessageTag.SUCCESS, message="Your information has been successfully submitted.")

        return submission

    async def get_gift_list(self, lucky_draw_id: int) -> Optional[List[Prize]]:
        body = await self._send(
            method="GET",
            path="get-gift-list/",
            action="Gift list",
            params={"lucky_draw_system_id": lucky_draw_id},
        )
        if body is None:
            return None

        return self._parse_list(Prize, body, action="Gift list")
