"""chuk-mcp-naver-maps: Naver Maps directions, geocoding and static maps over MCP."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION
