"""
Directions tool registration for chuk-mcp-naver-maps.

Registers the driving directions tool.
"""

import logging
from typing import Literal

from ...constants import ROUTE_OPTION_LABELS, SuccessMessages
from ...core.coordinates import distance_km, duration_minutes, format_won
from ...core.maps import Failed, RouteSummary
from ...models.responses import DirectionsResponse
from ..render import render_outcome

logger = logging.getLogger(__name__)


def _build_directions_response(summary: RouteSummary) -> DirectionsResponse:
    return DirectionsResponse(
        option=summary.option.value,
        option_label=ROUTE_OPTION_LABELS[summary.option],
        start=summary.start,
        goal=summary.goal,
        distance=distance_km(summary.distance_m),
        duration=f"{duration_minutes(summary.duration_ms)}분",
        toll_fare=format_won(summary.toll_fare),
        fuel_price=format_won(summary.fuel_price),
        taxi_fare=format_won(summary.taxi_fare) if summary.taxi_fare else None,
        message=SuccessMessages.DIRECTIONS,
    )


def register_directions_tools(mcp, service):
    """Register directions tools with the MCP server."""

    @mcp.tool()
    async def directions(
        start: str,
        goal: str,
        option: Literal["trafast", "tracomfort", "traoptimal", "trainormal"] = "trafast",
        waypoints: str | None = None,
        output_mode: Literal["text", "json"] = "text",
    ) -> str:
        """Driving directions between two places using Naver Maps.

        Addresses are geocoded first; "longitude,latitude" pairs are used
        as-is. Returns distance, travel time, tolls and estimated fuel cost.

        Args:
            start: Start address or "longitude,latitude" (e.g. "127.0276,37.4979")
            goal: Goal address or "longitude,latitude"
            option: Route profile: trafast (real-time fastest, default),
                tracomfort (comfortable), traoptimal (optimal), trainormal (no expressways)
            waypoints: Optional via points "lng1,lat1:lng2,lat2"
            output_mode: "text" (default) or "json"

        Returns:
            Route summary: start/goal, distance (km), duration (min), toll, fuel cost
        """
        try:
            outcome = await service.directions(start, goal, option=option, waypoints=waypoints)
        except Exception as e:
            logger.error("directions failed: %s", e)
            outcome = Failed(str(e))
        return render_outcome(outcome, _build_directions_response, output_mode)
