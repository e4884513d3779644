"""Response and payload models for chuk-mcp-naver-maps."""

from .naver import (
    DirectionsPayload,
    GeocodeAddress,
    GeocodePayload,
    ReverseGeocodePayload,
    ReverseGeocodeResult,
    RouteProfiles,
)
from .responses import (
    DirectionsResponse,
    ErrorResponse,
    GeocodeResponse,
    NotFoundResponse,
    ReverseGeocodeResponse,
    StaticMapResponse,
    format_response,
)

__all__ = [
    "DirectionsPayload",
    "DirectionsResponse",
    "ErrorResponse",
    "GeocodeAddress",
    "GeocodePayload",
    "GeocodeResponse",
    "NotFoundResponse",
    "ReverseGeocodePayload",
    "ReverseGeocodeResponse",
    "ReverseGeocodeResult",
    "RouteProfiles",
    "StaticMapResponse",
    "format_response",
]
