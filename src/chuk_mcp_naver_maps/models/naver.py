"""
Pydantic models for Naver Maps API payloads.

Only the fields the tools read are declared; everything else is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..constants import ROUTE_PRIORITY, RouteOption


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# --- Geocode ---


class GeocodeAddress(_Payload):
    """A single geocoding candidate."""

    x: float = Field(..., description="Longitude")
    y: float = Field(..., description="Latitude")
    road_address: str | None = Field(None, alias="roadAddress")
    jibun_address: str | None = Field(None, alias="jibunAddress")
    english_address: str | None = Field(None, alias="englishAddress")

    @property
    def preferred_address(self) -> str:
        """Road-based address if present, else the parcel-based one."""
        return self.road_address or self.jibun_address or ""


class GeocodePayload(_Payload):
    status: str | None = None
    error_message: str | None = Field(None, alias="errorMessage")
    addresses: list[GeocodeAddress] = Field(default_factory=list)


# --- Reverse geocode ---


class RegionArea(_Payload):
    name: str = ""


class Region(_Payload):
    area0: RegionArea | None = None
    area1: RegionArea | None = None
    area2: RegionArea | None = None
    area3: RegionArea | None = None
    area4: RegionArea | None = None

    def label(self) -> str:
        """Join area1..area4 names ("서울특별시 강남구 역삼동")."""
        areas = [self.area1, self.area2, self.area3, self.area4]
        return " ".join(a.name for a in areas if a is not None and a.name)


class ReverseGeocodeResult(_Payload):
    name: str | None = None
    text: str | None = None
    region: Region | None = None

    @property
    def label(self) -> str:
        if self.text:
            return self.text
        if self.region is not None:
            region_label = self.region.label()
            if region_label:
                return region_label
        return self.name or ""


class ReverseGeocodePayload(_Payload):
    results: list[ReverseGeocodeResult] = Field(default_factory=list)


# --- Directions ---


class RoutePoint(_Payload):
    location: list[float] = Field(default_factory=list, description="[lng, lat]")


class RouteSummaryPayload(_Payload):
    start: RoutePoint
    goal: RoutePoint
    distance: float = Field(..., description="Metres")
    duration: float = Field(..., description="Milliseconds")
    toll_fare: float | None = Field(None, alias="tollFare")
    taxi_fare: float | None = Field(None, alias="taxiFare")
    fuel_price: float | None = Field(None, alias="fuelPrice")


class RoutePayload(_Payload):
    summary: RouteSummaryPayload


class RouteProfiles(_Payload):
    trafast: list[RoutePayload] | None = None
    tracomfort: list[RoutePayload] | None = None
    traoptimal: list[RoutePayload] | None = None
    trainormal: list[RoutePayload] | None = None

    def first_route(self) -> tuple[RouteOption, RoutePayload] | None:
        """First route found scanning profiles in ROUTE_PRIORITY order."""
        for option in ROUTE_PRIORITY:
            routes = getattr(self, option.value)
            if routes:
                return option, routes[0]
        return None


class DirectionsPayload(_Payload):
    code: int | None = None
    message: str | None = None
    route: RouteProfiles | None = None
