from .api import register_directions_tools

__all__ = ["register_directions_tools"]
