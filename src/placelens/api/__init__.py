from placelens.api.app import app

__all__ = ["app"]
