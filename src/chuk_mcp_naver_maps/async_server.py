#!/usr/bin/env python3
"""
Async Naver Maps MCP Server using chuk-mcp-server

Driving directions, forward/reverse geocoding, and static map rendering
via the Naver Cloud Platform Maps API.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .config import load_settings
from .constants import ServerConfig
from .core.maps import MapService
from .core.naver import NaverMapsClient
from .tools.directions import register_directions_tools
from .tools.geocoding import register_geocoding_tools
from .tools.static_map import register_static_map_tools

settings = load_settings()

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(ServerConfig.NAME)

# Create the Naver client and map service from startup configuration
client = NaverMapsClient(
    settings.credentials,
    base_url=settings.base_url,
    debug=settings.debug,
)
service = MapService(client, output_dir=settings.output_dir)

# Register all tool modules
register_directions_tools(mcp, service)
register_geocoding_tools(mcp, service)
register_static_map_tools(mcp, service)

# Run the server
if __name__ == "__main__":
    logger.info("Starting Naver Maps MCP Server...")
    mcp.run(stdio=True)
