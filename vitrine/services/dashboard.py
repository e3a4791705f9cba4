"""
Dashboard engagement statistics.
"""

from vitrine.api_client import APIClient, parse_as
from vitrine.schemas.listing import DashboardStats
from vitrine.services.session import SessionManager


class DashboardService:
    def __init__(self, api: APIClient, session: SessionManager):
        self.api = api
        self.session = session

    async def stats(self) -> DashboardStats:
        data = await self.api.get("dashboard/stats", token=self.session.require_token())
        return parse_as(DashboardStats, data)
