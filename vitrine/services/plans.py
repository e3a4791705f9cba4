"""
Subscription plans and hosted checkout.

No payment logic lives here: the backend creates the checkout and the
front end just redirects to the URL it returns.
"""

from typing import List

from vitrine.api_client import APIClient, APIError, parse_as
from vitrine.schemas.taxonomy import CheckoutSession, Plan
from vitrine.services.session import SessionManager


class PlanService:
    """Plan listing and checkout creation."""

    def __init__(self, api: APIClient, session: SessionManager):
        self.api = api
        self.session = session

    async def list_plans(self) -> List[Plan]:
        data = await self.api.get("planos")
        if not isinstance(data, list):
            raise APIError("Resposta inválida do servidor", 0, detail=data)
        return [parse_as(Plan, item) for item in data]

    async def checkout(self, plan_id: str) -> str:
        """
        Create a payment for a plan.

        Returns:
            Hosted checkout URL to redirect to

        Raises:
            APIError: Request failed or no checkout URL was returned
        """
        data = await self.api.post(
            "pagamento/criar",
            json={"plano": plan_id},
            token=self.session.require_token(),
        )
        checkout = parse_as(CheckoutSession, data)
        if not checkout.init_point:
            raise APIError(checkout.message or "Erro ao criar pagamento", 0, detail=data)
        return checkout.init_point
