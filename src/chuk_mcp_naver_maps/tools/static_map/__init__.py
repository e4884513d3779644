from .api import register_static_map_tools

__all__ = ["register_static_map_tools"]
