"""
Listing query/pagination model and public listing lookups.

ListingQuery turns the filter state into query parameters for
GET /acompanhantes and holds the page of results it got back.
"""

import logging
import math
from typing import Any, List, Optional

from vitrine.api_client import APIClient, APIError, parse_as
from vitrine.core.config import get_settings
from vitrine.schemas.enums import SortMode
from vitrine.schemas.listing import Listing, ListingDetail, ListingFilters, ListingPage
from vitrine.utils.validators import parse_optional_int

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Erro de conexão. Tente novamente."


class ListingQuery:
    """
    Filter state plus the page of listings it produced.

    Invariant: changing any filter other than page resets page to 1.

    Requests are tagged with a sequence number; a response is applied only
    if no newer request was issued after it (latest wins).
    """

    def __init__(
        self,
        api: APIClient,
        per_page: Optional[int] = None,
        city: str = "",
        category: str = "",
    ):
        self.api = api
        self.per_page = per_page or get_settings().LISTINGS_PER_PAGE
        self.filters = ListingFilters(city=city, category=category)
        self.items: List[Listing] = []
        self.total = 0
        self.total_pages = 1
        self.error: Optional[str] = None
        self.loading = False
        self._seq = 0

    @property
    def page(self) -> int:
        return self.filters.page

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def set_filter(self, name: str, value: Any) -> None:
        """
        Update one filter field.

        Any field other than page sends the user back to the first page.
        """
        if name not in ListingFilters.model_fields:
            raise ValueError(f"Filtro desconhecido: {name}")

        setattr(self.filters, name, value)
        if name != "page":
            self.filters.page = 1

    def set_page(self, page: int) -> None:
        self.set_filter("page", page)

    def clear_filters(self) -> None:
        """Reset every filter to its default and page to 1."""
        self.filters = ListingFilters()

    def to_params(self) -> dict:
        """
        Build the query for GET /acompanhantes.

        page, per_page and ordenar always go; the optional filters only
        when set. Price bounds that aren't whole numbers are left out.
        """
        filters = self.filters
        params = {
            "page": filters.page,
            "per_page": self.per_page,
            "ordenar": SortMode(filters.sort).value,
        }

        if filters.city:
            params["cidade"] = filters.city
        if filters.category:
            params["categoria"] = filters.category

        for key, raw in (("preco_min", filters.price_min), ("preco_max", filters.price_max)):
            try:
                value = parse_optional_int(raw)
            except ValueError:
                logger.debug(f"Ignorando {key} não numérico: {raw!r}")
                continue
            if value is not None:
                params[key] = value

        if filters.verified:
            params["verificada"] = "true"
        if filters.online:
            params["online"] = "true"

        return params

    def compute_total_pages(self, total: int) -> int:
        return max(1, math.ceil(total / self.per_page))

    async def fetch_page(self) -> bool:
        """
        Request the current page.

        On success the held results are replaced. On failure they are kept
        and `error` holds a message for display. A response that arrives
        after a newer request was issued is discarded.

        Returns:
            True if a successful result was applied
        """
        self._seq += 1
        seq = self._seq
        self.loading = True

        try:
            data = await self.api.get("acompanhantes", params=self.to_params())
            page = parse_as(ListingPage, data)
        except APIError as e:
            if seq != self._seq:
                return False
            logger.error(f"Erro ao carregar anúncios: {e}")
            self.error = FETCH_ERROR_MESSAGE
            self.loading = False
            return False

        if seq != self._seq:
            logger.debug(f"Descartando resposta obsoleta #{seq} (atual #{self._seq})")
            return False

        self.items = page.items
        self.total = page.total
        self.total_pages = self.compute_total_pages(page.total)
        self.error = None
        self.loading = False
        return True

    @property
    def is_empty(self) -> bool:
        """Empty result that is not an error (renders the empty state)."""
        return not self.items and self.error is None


class ListingService:
    """Public lookups that are not part of the paginated query."""

    def __init__(self, api: APIClient):
        self.api = api

    async def get(self, slug: str) -> ListingDetail:
        """
        Load a listing detail page.

        Raises:
            APIError: Listing not found or request failed
        """
        data = await self.api.get(f"acompanhante/{slug}")
        return parse_as(ListingDetail, data)
