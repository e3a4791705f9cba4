"""
Testes de integração para os services de taxonomias, planos,
dashboard e moderação (contra o CMS falso).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from vitrine.api_client import APIClient, APIError
from vitrine.schemas.enums import ModerationStatus, PlanTier
from vitrine.services.admin import ModerationService
from vitrine.services.catalog import CatalogService
from vitrine.services.dashboard import DashboardService
from vitrine.services.plans import PlanService


# ==========================================
# CatalogService
# ==========================================

class TestCatalogService:
    """Taxonomias para filtros e formulário."""

    @pytest.mark.anyio
    async def test_cities(self, api):
        cities = await CatalogService(api).cities()

        assert [c.slug for c in cities] == ["rio-de-janeiro", "niteroi"]
        assert cities[1].name == "Niterói"

    @pytest.mark.anyio
    async def test_neighborhoods_by_city(self, api, cms):
        await CatalogService(api).neighborhoods("rio-de-janeiro")

        assert cms.last_params == {"cidade": "rio-de-janeiro"}

    @pytest.mark.anyio
    async def test_load_filters(self, api):
        filters = await CatalogService(api).load_filters()

        assert len(filters["cities"]) == 2
        assert len(filters["categories"]) == 1

    @pytest.mark.anyio
    async def test_load_all(self, api):
        taxonomies = await CatalogService(api).load_all()

        assert set(taxonomies) == {"cities", "neighborhoods", "categories", "services"}
        assert [s.id for s in taxonomies["services"]] == [3, 5]

    @pytest.mark.anyio
    async def test_load_filters_degrades_to_empty(self):
        """Falha nas taxonomias não impede os filtros de aparecerem."""
        api = MagicMock(spec=APIClient)
        api.get = AsyncMock(side_effect=APIError("Erro de conexão. Tente novamente.", 0))

        filters = await CatalogService(api).load_filters()

        assert filters == {"cities": [], "categories": []}

    @pytest.mark.anyio
    async def test_one_failed_taxonomy_keeps_the_others(self):
        """Só a lista que falhou fica vazia; as demais chegam completas."""
        async def get(endpoint, params=None, token=None):
            if endpoint == "bairros":
                raise APIError("Erro 500", 500)
            return [{"id": 1, "nome": endpoint, "slug": endpoint}]

        api = MagicMock(spec=APIClient)
        api.get = AsyncMock(side_effect=get)

        taxonomies = await CatalogService(api).load_all()

        assert taxonomies["neighborhoods"] == []
        assert [t.slug for t in taxonomies["cities"]] == ["cidades"]
        assert [t.slug for t in taxonomies["categories"]] == ["categorias"]
        assert [t.slug for t in taxonomies["services"]] == ["servicos"]
        assert api.get.await_count == 4

    @pytest.mark.anyio
    async def test_non_list_response(self):
        api = MagicMock(spec=APIClient)
        api.get = AsyncMock(return_value={"message": "oops"})

        with pytest.raises(APIError):
            await CatalogService(api).categories()


# ==========================================
# PlanService
# ==========================================

class TestPlanService:
    """Planos e checkout hospedado."""

    @pytest.mark.anyio
    async def test_list_plans(self, api, session):
        plans = await PlanService(api, session).list_plans()

        assert [p.id for p in plans] == ["premium", "vip"]
        assert plans[0].price == 99.9
        assert plans[0].benefits == ["Destaque"]

    @pytest.mark.anyio
    async def test_checkout_returns_url(self, api, logged_session):
        url = await PlanService(api, logged_session).checkout("vip")

        assert url == "https://pay.test/checkout/pref-1"

    @pytest.mark.anyio
    async def test_checkout_without_init_point_raises(self, api, logged_session):
        with pytest.raises(APIError) as exc_info:
            await PlanService(api, logged_session).checkout("inexistente")

        assert exc_info.value.message == "Plano inválido"

    @pytest.mark.anyio
    async def test_checkout_requires_session(self, api, session):
        with pytest.raises(APIError) as exc_info:
            await PlanService(api, session).checkout("vip")

        assert exc_info.value.status_code == 401


# ==========================================
# DashboardService
# ==========================================

class TestDashboardService:

    @pytest.mark.anyio
    async def test_stats(self, api, logged_session):
        stats = await DashboardService(api, logged_session).stats()

        assert stats.has_listing is True
        assert stats.listing_status == ModerationStatus.PUBLISHED
        assert stats.plan == PlanTier.VIP
        assert stats.days_left == 43
        assert stats.stats.favorites == 9
        assert stats.stats.conversion_rate == 10.0


# ==========================================
# ModerationService
# ==========================================

class TestModerationService:
    """Fila de pendentes e ações do administrador."""

    @pytest.mark.anyio
    async def test_pending(self, api, admin_session):
        pending = await ModerationService(api, admin_session).pending()

        assert [item.id for item in pending] == [42, 43]
        assert pending[0].status == ModerationStatus.PENDING

    @pytest.mark.anyio
    async def test_pending_forbidden_for_provider(self, api, logged_session):
        with pytest.raises(APIError) as exc_info:
            await ModerationService(api, logged_session).pending()

        assert exc_info.value.status_code == 403

    @pytest.mark.anyio
    async def test_approve(self, api, admin_session):
        result = await ModerationService(api, admin_session).approve(42)

        assert result.success is True
        assert result.message == "Perfil aprovado"

    @pytest.mark.anyio
    async def test_reject_sends_reason(self, api, cms, admin_session):
        result = await ModerationService(api, admin_session).reject(42, "Fotos fora das regras")

        assert result.success is True
        assert cms.last_body == {"motivo": "Fotos fora das regras"}
