"""Business services package."""

from src.services.hotel_repository import (
    DuplicateRoomError,
    HotelError,
    HotelRepository,
    RoomNotFoundError,
    RoomStateError,
)

__all__ = [
    "HotelRepository",
    "HotelError",
    "RoomNotFoundError",
    "RoomStateError",
    "DuplicateRoomError",
]
