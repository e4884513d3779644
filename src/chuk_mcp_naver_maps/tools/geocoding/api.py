"""
Geocoding tool registration for chuk-mcp-naver-maps.

Registers forward and reverse geocoding tools.
"""

import logging
from typing import Literal

from ...core.maps import Failed, GeocodeItem, ReverseItem
from ...models.responses import GeocodeResponse, ReverseGeocodeResponse
from ..render import render_outcome

logger = logging.getLogger(__name__)


def _build_geocode_response(item: GeocodeItem) -> GeocodeResponse:
    return GeocodeResponse(
        query=item.query,
        address=item.address,
        lat=item.lat,
        lng=item.lng,
        road_address=item.road_address,
        jibun_address=item.jibun_address,
        english_address=item.english_address,
    )


def _build_reverse_response(item: ReverseItem) -> ReverseGeocodeResponse:
    return ReverseGeocodeResponse(lat=item.lat, lng=item.lng, address=item.address)


def register_geocoding_tools(mcp, service):
    """Register geocoding tools with the MCP server."""

    @mcp.tool()
    async def geocode(address: str, output_mode: Literal["text", "json"] = "text") -> str:
        """Convert an address to latitude/longitude coordinates.

        Uses the Naver geocoding API; best results with Korean road-name or
        jibun addresses (e.g. "서울특별시 강남구 테헤란로 152").

        Args:
            address: Address to convert
            output_mode: "text" (default) or "json"

        Returns:
            Address of the best match and its coordinates (latitude, longitude)
        """
        try:
            outcome = await service.geocode(address)
        except Exception as e:
            logger.error("geocode failed: %s", e)
            outcome = Failed(str(e))
        return render_outcome(outcome, _build_geocode_response, output_mode)

    @mcp.tool()
    async def reverse_geocode(
        lat: float, lng: float, output_mode: Literal["text", "json"] = "text"
    ) -> str:
        """Convert latitude/longitude coordinates to an address.

        Args:
            lat: Latitude (-90 to 90)
            lng: Longitude (-180 to 180)
            output_mode: "text" (default) or "json"

        Returns:
            The coordinates and the address found there
        """
        try:
            outcome = await service.reverse_geocode(lat, lng)
        except Exception as e:
            logger.error("reverse_geocode failed: %s", e)
            outcome = Failed(str(e))
        return render_outcome(outcome, _build_reverse_response, output_mode)
