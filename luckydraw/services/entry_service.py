import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

from luckydraw.core.mixins.async_init import AsyncMixin
from luckydraw.core.settings import Settings
from luckydraw.infrastructure.clients.backend import BackendClient
from luckydraw.infrastructure.logging import audit_logger
from luckydraw.schemas.enums.message_tag import MessageTag
from luckydraw.schemas.organization import OrganizationData
from luckydraw.schemas.outcome import CanonicalOutcome
from luckydraw.schemas.prize import Prize, PrizeCatalog
from luckydraw.schemas.submission import CustomerEntry, SubmissionResponse
from luckydraw.services.reveal.normalizer import normalize
from luckydraw.services.reveal.scheduler import Scheduler
from luckydraw.services.reveal.session import RevealSession
from luckydraw.utils.types.callback import OnAddMessageCallback, OnRevealChangeCallback


@dataclass(frozen=True)
class EntrySubmission:
    response: SubmissionResponse
    catalog: PrizeCatalog
    outcome: CanonicalOutcome


class EntryService(AsyncMixin):
    """Entry form flow: submit the customer, build the wheel, hand out reveal sessions.

    ``service = await EntryService(client=..., settings=...)`` loads the
    organization header first; when that fails the configured fallback draw is
    used.
    """

    async def __ainit__(
        self,
        client: BackendClient,
        settings: Settings,
        on_add_message: Optional[OnAddMessageCallback] = None,
    ) -> None:
        self._client = client
        self._settings = settings
        self._on_add_message = on_add_message

        if on_add_message is not None:
            self._client.set_message_callback(on_add_message=on_add_message)

        self._organization = await self._client.get_organization(organization_id=settings.organization_id)
        if self._organization is not None:
            logger.info(f"Loaded lucky draw '{self._organization.display_name}' (id={self._organization.id})")

    @property
    def organization(self) -> Optional[OrganizationData]:
        return self._organization

    @property
    def lucky_draw_id(self) -> int:
        if self._organization is not None:
            return self._organization.id

        return self._settings.fallback_lucky_draw_id

    @property
    def title(self) -> str:
        if self._organization is not None and self._organization.display_name:
            return self._organization.display_name

        return self._settings.program_name

    async def load_catalog(self) -> Optional[PrizeCatalog]:
        gifts: Optional[List[Prize]] = await self._client.get_gift_list(lucky_draw_id=self.lucky_draw_id)
        if gifts is None:
            return None

        return PrizeCatalog.from_gift_list(gifts, group_id=self.lucky_draw_id)

    async def submit(self, entry: CustomerEntry) -> Optional[EntrySubmission]:
        response = await self._client.submit_entry(entry=entry, lucky_draw_system=self.lucky_draw_id)
        if response is None:
            return None

        catalog = await self.load_catalog()
        if catalog is None:
            return None

        outcome = normalize(response.gift, catalog)
        won = outcome.prize.name if outcome.prize is not None else "no prize"
        audit_logger(self.lucky_draw_id).info(
            f"IMEI {entry.imei} ({response.customer_name or entry.customer_name}): {won}, "
            f"sector {outcome.target_index} of {len(catalog)}"
        )

        return EntrySubmission(response=response, catalog=catalog, outcome=outcome)

    def start_reveal(
        self,
        submission: EntrySubmission,
        scheduler: Scheduler,
        random_source: Callable[[], float] = random.random,
        listener: Optional[OnRevealChangeCallback] = None,
    ) -> RevealSession:
        session = RevealSession(
            catalog=submission.catalog,
            scheduler=scheduler,
            outcome=submission.outcome,
            timings=self._settings.reveal,
            random_source=random_source,
        )
        if listener is not None:
            session.add_listener(listener)

        return session

    def announce(self, outcome: CanonicalOutcome) -> None:
        if self._on_add_message is None:
            return

        tag = MessageTag.PRIZE if outcome.is_celebrated else MessageTag.CONSOLATION
        self._on_add_message(tag=tag, message=f"{outcome.headline} {outcome.message}")
