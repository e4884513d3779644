"""
Low-level async HTTP client for the Naver Maps API.

Every call is a single signed GET; there is no retry and no caching.
"""

import logging

import httpx

from ..config import Credentials
from ..constants import (
    Endpoints,
    ErrorMessages,
    Headers,
    MapFormat,
    NaverConfig,
    RouteOption,
)

logger = logging.getLogger(__name__)


class NaverAPIError(RuntimeError):
    """Non-success HTTP status from the Naver Maps API."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(ErrorMessages.API_ERROR.format(status_code, reason))


def _clean_params(params: dict) -> dict[str, str]:
    """Drop None values and stringify the rest."""
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, RouteOption | MapFormat):
            value = value.value
        cleaned[key] = str(value)
    return cleaned


class NaverMapsClient:
    """Async HTTP client for the Naver Cloud Platform Maps API.

    Features:
    - API key id/secret headers on every request
    - JSON or raw binary responses
    - Lazily created httpx client
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = NaverConfig.BASE_URL,
        debug: bool = False,
    ):
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._debug = debug
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "User-Agent": NaverConfig.USER_AGENT,
                    Headers.KEY_ID: self._credentials.key_id,
                    Headers.KEY: self._credentials.key_secret,
                },
            )
        return self._client

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}/{endpoint.lstrip('/')}"

    def _log(self, msg: str, *args) -> None:
        logger.log(logging.INFO if self._debug else logging.DEBUG, msg, *args)

    async def request(
        self,
        endpoint: str,
        params: dict,
        expect_binary: bool = False,
    ) -> dict | list | bytes:
        """Make a signed GET request to a Naver Maps endpoint.

        Args:
            endpoint: Path such as "/map-geocode/v2/geocode"
            params: Query parameters; None values are omitted
            expect_binary: Return the raw body instead of parsed JSON

        Returns:
            Parsed JSON, or bytes when expect_binary is set

        Raises:
            ValueError: If credentials are not configured
            ConnectionError: On network failure
            NaverAPIError: On a non-2xx response
        """
        if not self._credentials.configured:
            raise ValueError(ErrorMessages.MISSING_CREDENTIALS)

        client = await self._get_client()
        url = self._url(endpoint)
        query = _clean_params(params)
        self._log("GET %s %s", url, query)

        try:
            response = await client.get(url, params=query)
        except httpx.ConnectError as e:
            raise ConnectionError(ErrorMessages.NETWORK_ERROR.format(e)) from e
        except httpx.TimeoutException as e:
            raise ConnectionError(ErrorMessages.NETWORK_ERROR.format(e)) from e

        self._log("%s -> %d", endpoint, response.status_code)
        if not response.is_success:
            raise NaverAPIError(response.status_code, response.reason_phrase)

        if expect_binary:
            return response.content
        return response.json()

    async def geocode(self, query: str) -> dict:
        """Forward geocode: address or place name to candidate addresses."""
        return await self.request(Endpoints.GEOCODE, {"query": query})

    async def reverse_geocode(self, lat: float, lng: float) -> dict:
        """Reverse geocode a coordinate.

        The API takes "lng,lat", the reverse of the argument order.
        """
        params = {"coords": f"{lng},{lat}", "output": "json"}
        return await self.request(Endpoints.REVERSE_GEOCODE, params)

    async def driving(
        self,
        start: str,
        goal: str,
        option: str = RouteOption.TRAFAST.value,
        waypoints: str | None = None,
    ) -> dict:
        """Driving directions between two "lng,lat" points."""
        params = {
            "start": start,
            "goal": goal,
            "option": option,
            "waypoints": waypoints or None,
        }
        return await self.request(Endpoints.DRIVING, params)

    @staticmethod
    def _static_map_params(center: str, level: int, w: int, h: int, format: str) -> dict:
        return {"center": center, "level": level, "w": w, "h": h, "format": format}

    async def static_map(
        self,
        center: str,
        level: int,
        w: int,
        h: int,
        format: str = MapFormat.PNG.value,
    ) -> bytes:
        """Fetch a static raster map image."""
        params = self._static_map_params(center, level, w, h, format)
        return await self.request(Endpoints.STATIC_MAP, params, expect_binary=True)

    def static_map_url(
        self,
        center: str,
        level: int,
        w: int,
        h: int,
        format: str = MapFormat.PNG.value,
    ) -> str:
        """Build the static raster map URL without fetching it."""
        params = _clean_params(self._static_map_params(center, level, w, h, format))
        return str(httpx.URL(self._url(Endpoints.STATIC_MAP), params=params))

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
