"""Room availability states."""

from enum import Enum


class RoomStatus(str, Enum):
    """Availability of a room.

    A room starts AVAILABLE; reserve and check-in move it to OCCUPIED,
    check-out moves it back.
    """
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
