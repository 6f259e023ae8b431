"""Hotel record models."""

from src.models.commands import (
    AddRoomCommand,
    CheckInCommand,
    CheckOutCommand,
    Command,
    CommandResult,
    ExitCommand,
    MakeReservationCommand,
    ViewRoomsCommand,
)
from src.models.fields import FIELD_DELIMITER, ensure_single_field
from src.models.guest import Guest
from src.models.room import Room
from src.models.room_status import RoomStatus

__all__ = [
    "Room",
    "RoomStatus",
    "Guest",
    "FIELD_DELIMITER",
    "ensure_single_field",
    "Command",
    "CommandResult",
    "AddRoomCommand",
    "ViewRoomsCommand",
    "MakeReservationCommand",
    "CheckInCommand",
    "CheckOutCommand",
    "ExitCommand",
]
