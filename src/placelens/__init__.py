"""PlaceLens: extract distinct places from short-form video and article signals."""

__version__ = "0.1.0"
