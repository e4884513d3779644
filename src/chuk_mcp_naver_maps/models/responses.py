"""
Response models for chuk-mcp-naver-maps tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..constants import ErrorMessages, SuccessMessages
from ..core.coordinates import format_number


def format_response(model: BaseModel, output_mode: str = "text") -> str:
    """Format a response model as human-readable text or JSON.

    Args:
        model: Pydantic response model instance
        output_mode: "text" (default) or "json"

    Returns:
        Formatted string
    """
    if output_mode == "json":
        return str(model.model_dump_json(exclude_none=True))
    if hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json(exclude_none=True))


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")

    def to_text(self) -> str:
        return ErrorMessages.FAILED.format(self.error)


class NotFoundResponse(BaseModel):
    """The provider answered but had nothing to return."""

    model_config = ConfigDict(extra="forbid")

    message: str = Field(..., description="Not-found message")
    detail: str | None = Field(None, description="Provider-supplied explanation")

    def to_text(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class DirectionsResponse(BaseModel):
    """Driving directions summary."""

    model_config = ConfigDict(extra="forbid")

    option: str = Field(..., description="Route profile the summary was taken from")
    option_label: str = Field(..., description="Human-readable route profile")
    start: str = Field(..., description="Resolved start location (lng,lat)")
    goal: str = Field(..., description="Resolved goal location (lng,lat)")
    distance: str = Field(..., description="Distance in km, one decimal")
    duration: str = Field(..., description="Duration in whole minutes")
    toll_fare: str = Field(..., description="Toll fare")
    fuel_price: str = Field(..., description="Estimated fuel cost")
    taxi_fare: str | None = Field(None, description="Estimated taxi fare")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            self.message,
            "",
            f"📍 출발: {self.start}",
            f"📍 도착: {self.goal}",
            f"🛣️ 경로: {self.option_label} ({self.option})",
            "",
            f"📏 거리: {self.distance}",
            f"⏱️ 소요시간: {self.duration}",
            f"💰 통행료: {self.toll_fare}",
            f"⛽ 예상 연료비: {self.fuel_price}",
        ]
        if self.taxi_fare is not None:
            lines.append(f"🚕 택시 요금: {self.taxi_fare}")
        return "\n".join(lines)


class GeocodeResponse(BaseModel):
    """Forward geocoding response."""

    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., description="Original address query")
    address: str = Field(..., description="Road address, else jibun address")
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")
    road_address: str | None = Field(None, description="Road-name address")
    jibun_address: str | None = Field(None, description="Parcel (jibun) address")
    english_address: str | None = Field(None, description="English address")

    def to_text(self) -> str:
        coords = f"{format_number(self.lat)}, {format_number(self.lng)}"
        return f"📍 주소: {self.address}\n🌐 좌표: {coords} (위도, 경도)"


class ReverseGeocodeResponse(BaseModel):
    """Reverse geocoding response."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Query latitude")
    lng: float = Field(..., description="Query longitude")
    address: str = Field(..., description="Address label of the first result")

    def to_text(self) -> str:
        coords = f"{format_number(self.lat)}, {format_number(self.lng)}"
        return f"🌐 좌표: {coords}\n📍 주소: {self.address}"


class StaticMapResponse(BaseModel):
    """Static map rendering parameters and where the image went."""

    model_config = ConfigDict(extra="forbid")

    center: str = Field(..., description="Resolved map center (lng,lat)")
    level: int = Field(..., description="Zoom level", ge=1)
    width: int = Field(..., description="Image width in px", ge=1)
    height: int = Field(..., description="Image height in px", ge=1)
    format: str = Field(..., description="Image format")
    mime_type: str = Field(..., description="Image MIME type")
    delivery: str = Field(..., description="inline, url or file")
    url: str | None = Field(None, description="Raster URL (url delivery)")
    path: str | None = Field(None, description="Saved file path (file delivery)")
    size_bytes: int | None = Field(None, description="Image size in bytes", ge=0)

    def to_text(self) -> str:
        lines = [
            SuccessMessages.STATIC_MAP,
            "",
            f"📍 중심 좌표: {self.center}",
            f"📏 크기: {self.width}x{self.height}px",
            f"🔍 레벨: {self.level}",
            "",
        ]
        if self.url is not None:
            lines.append(SuccessMessages.STATIC_MAP_URL.format(self.url))
        elif self.path is not None:
            lines.append(SuccessMessages.STATIC_MAP_FILE.format(self.path))
        else:
            lines.append(SuccessMessages.STATIC_MAP_INLINE)
        return "\n".join(lines)

