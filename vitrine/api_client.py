"""
API Client wrapper for the marketplace CMS REST API.

Provides a unified async interface for making HTTP requests to the backend
with bearer-token injection and uniform error translation.
"""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from vitrine.core.config import get_settings

logger = logging.getLogger(__name__)

BaseModelT = TypeVar("BaseModelT", bound=BaseModel)


class APIError(Exception):
    """Normalized error raised for every failed API call."""

    def __init__(self, message: str, status_code: int = 0, detail: Any = None):
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)


class APIClient:
    """
    Async HTTP client for the CMS REST API.

    Features:
        - Fixed base address (set at deploy time)
        - Optional bearer token per call, never read from global state
        - Timeout handling
        - Structured error translation into APIError

    There is no caching, deduplication or retry: a failed call surfaces
    immediately to its caller.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the API, namespace included
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use ASGI/Mock transports)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self._transport = transport

    def _get_url(self, endpoint: str) -> str:
        """Build full URL for an endpoint."""
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}"

    def _get_headers(self, token: Optional[str] = None, json_body: bool = True) -> dict:
        """Build request headers."""
        headers = {}
        if json_body:
            headers["Content-Type"] = "application/json"
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _handle_response(self, response: httpx.Response) -> Any:
        """
        Parse the JSON body and translate error statuses.

        Raises:
            APIError: For non-2xx responses or a body that isn't JSON
        """
        try:
            data = response.json()
        except ValueError:
            raise APIError(
                "Resposta inválida do servidor",
                response.status_code,
                detail=response.text,
            )

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            raise APIError(
                message or f"Erro {response.status_code}",
                response.status_code,
                detail=data,
            )

        return data

    async def _request(
        self,
        method: str,
        endpoint: str,
        token: Optional[str] = None,
        json_body: bool = True,
        **kwargs,
    ) -> Any:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API endpoint relative to the base URL
            token: Bearer token, when the endpoint requires authentication
            json_body: Whether the request carries a JSON content type
            **kwargs: Additional arguments for httpx

        Returns:
            Parsed JSON response

        Raises:
            APIError: For API and transport errors
        """
        url = self._get_url(endpoint)
        headers = self._get_headers(token, json_body)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException:
            raise APIError("Tempo de requisição esgotado", 0)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} falhou: {e!r}")
            raise APIError("Erro de conexão. Tente novamente.", 0)
        except (UnicodeEncodeError, httpx.InvalidURL) as e:
            # Header ou URL que o httpx não consegue montar (ex.: token não ASCII)
            logger.warning(f"{method} {url} não pôde ser montada: {e!r}")
            raise APIError("Requisição inválida", 0, detail=str(e))

        return self._handle_response(response)

    async def get(
        self,
        endpoint: str,
        params: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> Any:
        """Make a GET request."""
        return await self._request("GET", endpoint, token=token, params=params)

    async def post(
        self,
        endpoint: str,
        json: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> Any:
        """Make a POST request."""
        return await self._request("POST", endpoint, token=token, json=json)

    async def delete(self, endpoint: str, token: Optional[str] = None) -> Any:
        """Make a DELETE request."""
        return await self._request("DELETE", endpoint, token=token)

    async def upload(
        self,
        endpoint: str,
        field: str,
        filename: str,
        content: bytes,
        content_type: str,
        token: Optional[str] = None,
    ) -> Any:
        """
        Upload a file as multipart/form-data.

        Skips the JSON content type so httpx can set the multipart boundary;
        auth header and error translation are the same as any other call.
        """
        files = {field: (filename, content, content_type)}
        return await self._request(
            "POST",
            endpoint,
            token=token,
            json_body=False,
            files=files,
        )


def parse_as(model: type[BaseModelT], data: Any) -> BaseModelT:
    """
    Validate a response body into a schema.

    A body that doesn't fit the schema is reported as the same APIError the
    client raises for any other bad response.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Resposta fora do formato esperado para {model.__name__}: {e}")
        raise APIError("Resposta inválida do servidor", 0, detail=data)
