"""
Fire-and-forget engagement tracking for contact clicks.

Tracking always runs first and its failure is only logged: the user-facing
action (opening the chat link or the dialer) happens regardless. Lost
clicks are not retried or queued.
"""

import logging
from typing import Callable, Optional

from vitrine.api_client import APIClient, APIError
from vitrine.schemas.enums import ClickType
from vitrine.schemas.listing import ListingDetail
from vitrine.utils.formatters import get_whatsapp_link
from vitrine.utils.validators import only_digits

logger = logging.getLogger(__name__)

Opener = Callable[[str], None]


def default_whatsapp_message(listing: ListingDetail) -> str:
    return f"Olá {listing.name}! Vi seu anúncio e gostaria de mais informações."


class ContactTracker:
    """Records contact clicks against a listing and performs the action."""

    def __init__(self, api: APIClient):
        self.api = api

    async def track(self, listing_id: int, kind: ClickType) -> bool:
        """
        Record one click.

        Returns:
            False when the backend call failed; never raises
        """
        try:
            await self.api.post(
                f"acompanhante/{listing_id}/track",
                json={"tipo": ClickType(kind).value},
            )
        except APIError as e:
            logger.warning(f"Falha ao registrar clique {kind} no anúncio {listing_id}: {e.message}")
            return False
        return True

    async def open_whatsapp(
        self,
        listing: ListingDetail,
        opener: Opener,
        message: Optional[str] = None,
    ) -> str:
        """Track a WhatsApp click, then open the chat link."""
        await self.track(listing.id, ClickType.WHATSAPP)

        link = get_whatsapp_link(listing.whatsapp, message or default_whatsapp_message(listing))
        opener(link)
        return link

    async def call(self, listing: ListingDetail, opener: Opener) -> str:
        """Track a phone click, then open the dialer."""
        await self.track(listing.id, ClickType.PHONE)

        link = f"tel:{only_digits(listing.phone or listing.whatsapp)}"
        opener(link)
        return link

    async def favorite(self, listing_id: int) -> bool:
        return await self.track(listing_id, ClickType.FAVORITE)
