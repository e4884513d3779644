"""Core client and service layer for chuk-mcp-naver-maps."""
