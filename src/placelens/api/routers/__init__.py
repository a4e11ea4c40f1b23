"""API routers."""

from placelens.api.routers import links, places

__all__ = ["places", "links"]
