"""Service layer for the 4CAST screening package."""
from fourcast.services.screening import ScreeningService

__all__ = ["ScreeningService"]
