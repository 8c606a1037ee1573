"""
Core business logic package for SmartTrip.

Itinerary derivation, trip persistence, config and errors live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
