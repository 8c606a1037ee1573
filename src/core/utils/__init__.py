"""Small helpers shared across SmartTrip."""

from core.utils.names import concat_name

__all__ = ["concat_name"]
