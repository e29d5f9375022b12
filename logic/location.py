"""
One-shot device location lookup.

The screen asks the platform location service for foreground permission
once, then fetches a single position. The outcome is returned as an explicit
LocationResult instead of being pushed into screen state as a side effect.

Author: SafeSteps Team
Date: 2026-10-16
"""

import logging
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)

PERMISSION_GRANTED = "granted"


class LocationStatus(Enum):
    """Lifecycle of the location task."""

    PENDING = "pending"
    GRANTED = "granted"
    DENIED = "denied"
    ERROR = "error"


class Position:
    """A latitude/longitude pair. Read-only once created."""

    __slots__ = ("_latitude", "_longitude")

    def __init__(self, latitude: float, longitude: float):
        self._latitude = float(latitude)
        self._longitude = float(longitude)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @classmethod
    def from_reading(cls, reading: Any) -> "Position":
        """Build a Position from whatever the provider handed back.

        Accepts a (lat, lon) pair, a dict with latitude/longitude keys
        (optionally nested under "coords"), or an object with latitude and
        longitude attributes (optionally under .coords).
        """
        if isinstance(reading, Position):
            return reading
        if isinstance(reading, dict):
            coords = reading.get("coords", reading)
            return cls(coords["latitude"], coords["longitude"])
        if isinstance(reading, (tuple, list)):
            latitude, longitude = reading
            return cls(latitude, longitude)

        coords = getattr(reading, "coords", reading)
        return cls(coords.latitude, coords.longitude)

    def to_dict(self):
        return {"latitude": self.latitude, "longitude": self.longitude}

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return (self.latitude, self.longitude) == (other.latitude, other.longitude)

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f"Position(latitude={self.latitude}, longitude={self.longitude})"


class LocationResult:
    """Observable outcome of the location task.

    Attributes:
        status: Where the task ended up.
        position: The device position, only set when status is GRANTED.
        error: Provider error message, only set when status is ERROR.
    """

    def __init__(
        self,
        status: LocationStatus,
        position: Optional[Position] = None,
        error: Optional[str] = None,
    ):
        self.status = status
        self.position = position
        self.error = error

    @classmethod
    def pending(cls) -> "LocationResult":
        return cls(LocationStatus.PENDING)

    @property
    def is_pending(self) -> bool:
        return self.status is LocationStatus.PENDING

    def __repr__(self):
        return f"LocationResult(status={self.status.value}, position={self.position!r}, error={self.error!r})"


async def fetch_current_position(provider) -> LocationResult:
    """Request permission and read the device position once.

    There is no timeout or retry: if the provider never answers, neither
    does this coroutine.

    Args:
        provider: Object with async request_permission() returning a status
            string and async get_current_position() returning a reading.

    Returns:
        LocationResult with status GRANTED, DENIED or ERROR.
    """
    try:
        status = await provider.request_permission()
        if status != PERMISSION_GRANTED:
            logger.info("Location permission not granted: %s", status)
            return LocationResult(LocationStatus.DENIED)

        reading = await provider.get_current_position()
        position = Position.from_reading(reading)
    except Exception as e:
        logger.error("Location lookup failed: %s", e)
        return LocationResult(LocationStatus.ERROR, error=str(e))

    logger.info("Device position: %s, %s", position.latitude, position.longitude)
    return LocationResult(LocationStatus.GRANTED, position=position)
