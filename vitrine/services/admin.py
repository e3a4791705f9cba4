"""
Admin moderation of pending listings.

The backend enforces the admin role; the client only checks it to decide
what to show.
"""

from typing import List

from vitrine.api_client import APIClient, parse_as
from vitrine.schemas.base import MessageResponse
from vitrine.schemas.listing import OwnedListing
from vitrine.services.session import SessionManager


class ModerationService:
    """Pending queue plus approve/reject actions."""

    def __init__(self, api: APIClient, session: SessionManager):
        self.api = api
        self.session = session

    async def pending(self) -> List[OwnedListing]:
        data = await self.api.get("admin/pendentes", token=self.session.require_token())
        items = data.get("pendentes", []) if isinstance(data, dict) else []
        return [parse_as(OwnedListing, item) for item in items]

    async def approve(self, listing_id: int) -> MessageResponse:
        data = await self.api.post(
            f"admin/aprovar/{listing_id}",
            token=self.session.require_token(),
        )
        return parse_as(MessageResponse, data)

    async def reject(self, listing_id: int, reason: str) -> MessageResponse:
        """Reject a listing; the reason is sent to the provider."""
        data = await self.api.post(
            f"admin/reprovar/{listing_id}",
            json={"motivo": reason},
            token=self.session.require_token(),
        )
        return parse_as(MessageResponse, data)
