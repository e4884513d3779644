"""
Map service: async orchestrator for the Naver Maps operations.

Wraps NaverMapsClient with input validation, geocode-if-needed resolution,
response parsing, and typed outcome results.
"""

import base64
import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from ..constants import (
    FILE_EXTENSIONS,
    MIME_TYPES,
    ErrorMessages,
    MapDelivery,
    MapFormat,
    RouteOption,
    StaticMapLimits,
)
from ..models.naver import DirectionsPayload, GeocodePayload, ReverseGeocodePayload
from .coordinates import format_coordinate, format_number, is_coordinate
from .naver import NaverMapsClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


# --- Outcomes ---


@dataclass
class Found(Generic[T]):
    data: T


@dataclass
class NotFound:
    message: str
    detail: str | None = None


@dataclass
class Failed:
    reason: str


Outcome = Found | NotFound | Failed


# --- Results ---


@dataclass
class GeocodeItem:
    """First geocoding candidate for an address."""

    query: str
    address: str
    lat: float
    lng: float
    road_address: str | None = None
    jibun_address: str | None = None
    english_address: str | None = None


@dataclass
class ReverseItem:
    lat: float
    lng: float
    address: str


@dataclass
class RouteSummary:
    """Projection of a single route from a directions response."""

    option: RouteOption
    start: str
    goal: str
    distance_m: float
    duration_ms: float
    toll_fare: float | None = None
    fuel_price: float | None = None
    taxi_fare: float | None = None


@dataclass
class StaticMapImage:
    center: str
    level: int
    width: int
    height: int
    format: MapFormat
    delivery: MapDelivery
    data: bytes | None = field(default=None, repr=False)
    url: str | None = None
    path: str | None = None

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self.format]

    def to_base64(self) -> str:
        return base64.b64encode(self.data or b"").decode("ascii")


class MapService:
    """Central manager for Naver Maps operations.

    Returns Found/NotFound outcomes; transport and validation errors
    are raised for the tool boundary to report.
    """

    def __init__(self, client: NaverMapsClient, output_dir: str | None = None):
        self._client = client
        self._output_dir = output_dir

    # --- Validation helpers ---

    @staticmethod
    def _validate_coordinates(lat: float, lng: float) -> None:
        if not (-90 <= lat <= 90):
            raise ValueError(ErrorMessages.INVALID_LAT.format(lat))
        if not (-180 <= lng <= 180):
            raise ValueError(ErrorMessages.INVALID_LNG.format(lng))

    @staticmethod
    def _validate_query(query: str) -> None:
        if not query or not query.strip():
            raise ValueError(ErrorMessages.EMPTY_QUERY)

    @staticmethod
    def _validate_static_map(level: int, w: int, h: int) -> None:
        if not (StaticMapLimits.MIN_LEVEL <= level <= StaticMapLimits.MAX_LEVEL):
            raise ValueError(
                ErrorMessages.INVALID_LEVEL.format(
                    StaticMapLimits.MIN_LEVEL, StaticMapLimits.MAX_LEVEL, level
                )
            )
        for name, size in (("너비", w), ("높이", h)):
            if not (StaticMapLimits.MIN_SIZE <= size <= StaticMapLimits.MAX_SIZE):
                raise ValueError(
                    ErrorMessages.INVALID_SIZE.format(
                        name, StaticMapLimits.MIN_SIZE, StaticMapLimits.MAX_SIZE, size
                    )
                )

    @staticmethod
    def _parse_enum(enum_cls, value: str, message: str):
        try:
            return enum_cls(value)
        except ValueError:
            choices = ", ".join(e.value for e in enum_cls)
            raise ValueError(message.format(value, choices)) from None

    # --- Resolution ---

    async def resolve_location(self, value: str) -> str:
        """Turn an address into "lng,lat"; coordinates pass through.

        If geocoding finds nothing the original string is returned and
        left for the downstream call to reject.
        """
        if is_coordinate(value):
            return value
        payload = GeocodePayload.model_validate(await self._client.geocode(value))
        if not payload.addresses:
            logger.debug("No geocode candidate for %r, passing through", value)
            return value
        addr = payload.addresses[0]
        return format_coordinate(addr.x, addr.y)

    # --- Primary operations ---

    async def directions(
        self,
        start: str,
        goal: str,
        option: str = RouteOption.TRAFAST.value,
        waypoints: str | None = None,
    ) -> Found[RouteSummary] | NotFound:
        """Driving directions between two places.

        Args:
            start: Address or "lng,lat"
            goal: Address or "lng,lat"
            option: Route profile (trafast, tracomfort, traoptimal, trainormal)
            waypoints: Optional "lng1,lat1:lng2,lat2" passed through unchanged

        Returns:
            Found(RouteSummary) or NotFound
        """
        self._validate_query(start)
        self._validate_query(goal)
        route_option = self._parse_enum(RouteOption, option, ErrorMessages.INVALID_OPTION)

        start_coords = await self.resolve_location(start)
        goal_coords = await self.resolve_location(goal)

        raw = await self._client.driving(
            start_coords, goal_coords, option=route_option.value, waypoints=waypoints
        )
        payload = DirectionsPayload.model_validate(raw)
        picked = payload.route.first_route() if payload.route is not None else None
        if picked is None:
            detail = payload.message if payload.code else None
            return NotFound(ErrorMessages.ROUTE_NOT_FOUND, detail=detail)

        found_option, route = picked
        summary = route.summary
        return Found(
            RouteSummary(
                option=found_option,
                start=",".join(format_number(v) for v in summary.start.location),
                goal=",".join(format_number(v) for v in summary.goal.location),
                distance_m=summary.distance,
                duration_ms=summary.duration,
                toll_fare=summary.toll_fare,
                fuel_price=summary.fuel_price,
                taxi_fare=summary.taxi_fare,
            )
        )

    async def geocode(self, address: str) -> Found[GeocodeItem] | NotFound:
        """Forward geocode an address to its first candidate."""
        self._validate_query(address)
        payload = GeocodePayload.model_validate(await self._client.geocode(address))
        if not payload.addresses:
            return NotFound(ErrorMessages.ADDRESS_NOT_FOUND)
        addr = payload.addresses[0]
        return Found(
            GeocodeItem(
                query=address,
                address=addr.preferred_address,
                lat=addr.y,
                lng=addr.x,
                road_address=addr.road_address,
                jibun_address=addr.jibun_address,
                english_address=addr.english_address,
            )
        )

    async def reverse_geocode(self, lat: float, lng: float) -> Found[ReverseItem] | NotFound:
        """Reverse geocode a coordinate to its first address label."""
        self._validate_coordinates(lat, lng)
        raw = await self._client.reverse_geocode(lat, lng)
        payload = ReverseGeocodePayload.model_validate(raw)
        if not payload.results:
            return NotFound(ErrorMessages.COORDINATE_NOT_FOUND)
        return Found(ReverseItem(lat=lat, lng=lng, address=payload.results[0].label))

    async def static_map(
        self,
        center: str,
        level: int = StaticMapLimits.DEFAULT_LEVEL,
        w: int = StaticMapLimits.DEFAULT_SIZE,
        h: int = StaticMapLimits.DEFAULT_SIZE,
        format: str = MapFormat.PNG.value,
        delivery: str = MapDelivery.INLINE.value,
    ) -> Found[StaticMapImage]:
        """Render a static map around an address or coordinate.

        Args:
            center: Address or "lng,lat"
            level: Zoom level (1-20)
            w: Width in pixels (1-1280)
            h: Height in pixels (1-1280)
            format: "png" or "jpeg"
            delivery: "inline" (base64), "url" (no fetch) or "file"

        Returns:
            Found(StaticMapImage) carrying bytes, URL, or file path
        """
        self._validate_query(center)
        self._validate_static_map(level, w, h)
        map_format = self._parse_enum(MapFormat, format, ErrorMessages.INVALID_FORMAT)
        map_delivery = self._parse_enum(MapDelivery, delivery, ErrorMessages.INVALID_DELIVERY)

        center_coords = await self.resolve_location(center)
        image = StaticMapImage(
            center=center_coords,
            level=level,
            width=w,
            height=h,
            format=map_format,
            delivery=map_delivery,
        )

        if map_delivery is MapDelivery.URL:
            image.url = self._client.static_map_url(center_coords, level, w, h, map_format.value)
            return Found(image)

        image.data = await self._client.static_map(center_coords, level, w, h, map_format.value)
        if map_delivery is MapDelivery.FILE:
            image.path = str(self._write_image(image))
        return Found(image)

    def _write_image(self, image: StaticMapImage) -> Path:
        """Write fetched image bytes under the configured output directory."""
        out_dir = Path(self._output_dir) if self._output_dir else Path.cwd()
        out_dir.mkdir(parents=True, exist_ok=True)
        name = f"naver_static_map_{uuid.uuid4().hex[:12]}.{FILE_EXTENSIONS[image.format]}"
        path = out_dir / name
        path.write_bytes(image.data or b"")
        logger.info("Static map written to %s", path)
        return path
