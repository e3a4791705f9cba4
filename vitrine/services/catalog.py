"""
Taxonomies used by filters and the profile form.

The fan-out loaders request several taxonomies concurrently; their relative
completion order is not assumed anywhere.
"""

import asyncio
import logging
from typing import Awaitable, Dict, List, Optional

from vitrine.api_client import APIClient, APIError, parse_as
from vitrine.schemas.taxonomy import Taxonomy

logger = logging.getLogger(__name__)


class CatalogService:
    """Reads flat taxonomy lists from the CMS."""

    def __init__(self, api: APIClient):
        self.api = api

    async def _list(self, endpoint: str, params: Optional[dict] = None) -> List[Taxonomy]:
        data = await self.api.get(endpoint, params=params)
        if not isinstance(data, list):
            raise APIError("Resposta inválida do servidor", 0, detail=data)
        return [parse_as(Taxonomy, item) for item in data]

    async def cities(self) -> List[Taxonomy]:
        return await self._list("cidades")

    async def categories(self) -> List[Taxonomy]:
        return await self._list("categorias")

    async def services(self) -> List[Taxonomy]:
        return await self._list("servicos")

    async def neighborhoods(self, city: Optional[str] = None) -> List[Taxonomy]:
        params = {"cidade": city} if city else None
        return await self._list("bairros", params=params)

    async def _gather(self, **loaders: Awaitable[List[Taxonomy]]) -> Dict[str, List[Taxonomy]]:
        """
        Await the loaders concurrently, keyed by name.

        Every loader runs to completion; one that fails with APIError
        degrades to an empty list without affecting the others.
        """
        results = await asyncio.gather(*loaders.values(), return_exceptions=True)

        lists: Dict[str, List[Taxonomy]] = {}
        for name, result in zip(loaders, results):
            if isinstance(result, APIError):
                logger.error(f"Erro ao carregar taxonomia {name}: {result.message}")
                lists[name] = []
            elif isinstance(result, BaseException):
                raise result
            else:
                lists[name] = result
        return lists

    async def load_filters(self) -> Dict[str, List[Taxonomy]]:
        """
        Load cities and categories for the listing filters.

        A failed list degrades to empty; filters still render.
        """
        return await self._gather(cities=self.cities(), categories=self.categories())

    async def load_all(self) -> Dict[str, List[Taxonomy]]:
        """Load the four taxonomies used by the profile form."""
        return await self._gather(
            cities=self.cities(),
            neighborhoods=self.neighborhoods(),
            categories=self.categories(),
            services=self.services(),
        )
