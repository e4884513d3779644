"""Tests for static map tool registration and execution."""

import base64
import json
from unittest.mock import AsyncMock

import pytest
from chuk_mcp_server.types import format_content

from chuk_mcp_naver_maps.core.naver import NaverAPIError
from chuk_mcp_naver_maps.tools.static_map.api import register_static_map_tools

from .conftest import SAMPLE_PNG


@pytest.fixture
def static_map_tools(capture_tools, mock_service):
    return capture_tools(register_static_map_tools, mock_service)


class TestRegistration:
    def test_registers_static_map(self, static_map_tools):
        assert list(static_map_tools) == ["static_map"]


class TestInline:
    async def test_caption_and_image(self, static_map_tools):
        content = await static_map_tools["static_map"](center="127.0,37.5", level=10, w=300, h=200)
        assert [c.type for c in content] == ["text", "image"]
        caption = content[0].text
        assert "📍 중심 좌표: 127.0,37.5" in caption
        assert "📏 크기: 300x200px" in caption
        assert "🔍 레벨: 10" in caption

    async def test_image_roundtrip(self, static_map_tools):
        content = await static_map_tools["static_map"](center="127.0,37.5")
        image = content[1]
        assert image.mimeType == "image/png"
        assert base64.b64decode(image.data) == SAMPLE_PNG

    async def test_jpeg_mime(self, static_map_tools):
        content = await static_map_tools["static_map"](center="127.0,37.5", format="jpeg")
        assert content[1].mimeType == "image/jpeg"

    async def test_defaults(self, static_map_tools, mock_naver_client):
        await static_map_tools["static_map"](center="127.0,37.5")
        mock_naver_client.static_map.assert_awaited_once_with("127.0,37.5", 6, 400, 400, "png")

    async def test_json_caption(self, static_map_tools):
        content = await static_map_tools["static_map"](center="127.0,37.5", output_mode="json")
        data = json.loads(content[0].text)
        assert data["size_bytes"] == len(SAMPLE_PNG)
        assert data["delivery"] == "inline"


class TestOtherDelivery:
    async def test_url_delivery_text_only(self, static_map_tools):
        content = await static_map_tools["static_map"](center="127.0,37.5", delivery="url")
        assert len(content) == 1
        assert "https://maps.apigw.ntruss.com/map-static/v2/raster" in content[0].text

    async def test_file_delivery_text_only(self, static_map_tools, tmp_path):
        content = await static_map_tools["static_map"](center="127.0,37.5", delivery="file")
        assert len(content) == 1
        assert str(tmp_path) in content[0].text


class TestErrors:
    async def test_api_error_single_text_block(self, static_map_tools, mock_naver_client):
        mock_naver_client.static_map = AsyncMock(side_effect=NaverAPIError(403, "Forbidden"))
        content = await static_map_tools["static_map"](center="127.0,37.5")
        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text == "오류 발생: 네이버 API 오류: 403 Forbidden"

    async def test_level_out_of_range(self, static_map_tools):
        content = await static_map_tools["static_map"](center="127.0,37.5", level=25)
        assert len(content) == 1
        assert content[0].text.startswith("오류 발생:")


class TestServerContent:
    """Content as the MCP server formats it for the client."""

    async def test_inline_reaches_client_as_image(self, registered_mcp):
        result = await registered_mcp.protocol.tools["static_map"].execute({"center": "127.0,37.5"})
        content = format_content(result)
        assert [c["type"] for c in content] == ["text", "image"]
        assert content[1]["mimeType"] == "image/png"
        assert base64.b64decode(content[1]["data"]) == SAMPLE_PNG

    async def test_url_delivery_reaches_client_as_text(self, registered_mcp):
        result = await registered_mcp.protocol.tools["static_map"].execute(
            {"center": "127.0,37.5", "delivery": "url"}
        )
        content = format_content(result)
        assert [c["type"] for c in content] == ["text"]

    def test_schema_declares_format_and_delivery(self, registered_mcp):
        schema = registered_mcp.protocol.tools["static_map"].to_mcp_format()["inputSchema"]
        assert set(schema["properties"]["format"]["enum"]) == {"png", "jpeg"}
        assert set(schema["properties"]["delivery"]["enum"]) == {"inline", "url", "file"}
