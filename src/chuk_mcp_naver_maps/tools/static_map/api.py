"""
Static map tool registration for chuk-mcp-naver-maps.

Registers the static map tool, which returns MCP content
(a text caption, plus the image itself for inline delivery).
"""

import logging
from typing import Literal

from chuk_mcp_server.types import ImageContent, TextContent

from ...constants import MapDelivery, StaticMapLimits
from ...core.maps import Failed, Found, StaticMapImage
from ...models.responses import StaticMapResponse
from ..render import render_outcome

logger = logging.getLogger(__name__)


def _build_static_map_response(image: StaticMapImage) -> StaticMapResponse:
    return StaticMapResponse(
        center=image.center,
        level=image.level,
        width=image.width,
        height=image.height,
        format=image.format.value,
        mime_type=image.mime_type,
        delivery=image.delivery.value,
        url=image.url,
        path=image.path,
        size_bytes=len(image.data) if image.data is not None else None,
    )


def register_static_map_tools(mcp, service):
    """Register static map tools with the MCP server."""

    @mcp.tool()
    async def static_map(
        center: str,
        level: int = StaticMapLimits.DEFAULT_LEVEL,
        w: int = StaticMapLimits.DEFAULT_SIZE,
        h: int = StaticMapLimits.DEFAULT_SIZE,
        format: Literal["png", "jpeg"] = "png",
        delivery: Literal["inline", "url", "file"] = "inline",
        output_mode: Literal["text", "json"] = "text",
    ) -> list:
        """Render a static Naver map image around a place.

        Args:
            center: Map center as "longitude,latitude" or an address
            level: Zoom level (1-20, default 6)
            w: Image width in pixels (1-1280, default 400)
            h: Image height in pixels (1-1280, default 400)
            format: "png" (default) or "jpeg"
            delivery: "inline" (default, base64 image in the result),
                "url" (raster URL only, not fetched) or "file" (saved on the server)
            output_mode: Caption as "text" (default) or "json"

        Returns:
            Caption text content, followed by image content for inline delivery
        """
        try:
            outcome = await service.static_map(
                center, level=level, w=w, h=h, format=format, delivery=delivery
            )
        except Exception as e:
            logger.error("static_map failed: %s", e)
            outcome = Failed(str(e))

        caption = render_outcome(outcome, _build_static_map_response, output_mode)
        content = [TextContent(type="text", text=caption)]
        if isinstance(outcome, Found) and outcome.data.delivery is MapDelivery.INLINE:
            image = outcome.data
            content.append(
                ImageContent(type="image", data=image.to_base64(), mimeType=image.mime_type)
            )
        return content
