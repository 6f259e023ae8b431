"""Typed commands accepted by the command service.

Each menu option maps to one command model, so the same operations can be
issued from the interactive console or from scripts and tests.
"""

from typing import Union

from pydantic import BaseModel, Field


class AddRoomCommand(BaseModel):
    """Add a new available room."""

    room_number: int
    room_type: str
    price: float = Field(ge=0)


class ViewRoomsCommand(BaseModel):
    """List every room in insertion order."""


class MakeReservationCommand(BaseModel):
    """Reserve an available room for a guest."""

    room_number: int
    guest_name: str


class CheckInCommand(BaseModel):
    """Check a guest into a reserved room."""

    room_number: int
    guest_name: str


class CheckOutCommand(BaseModel):
    """Release an occupied room and drop its guest records."""

    room_number: int


class ExitCommand(BaseModel):
    """Persist state and end the session."""


Command = Union[
    AddRoomCommand,
    ViewRoomsCommand,
    MakeReservationCommand,
    CheckInCommand,
    CheckOutCommand,
    ExitCommand,
]


class CommandResult(BaseModel):
    """Outcome of a command, ready to be shown to the operator."""

    success: bool
    lines: list[str] = Field(default_factory=list)
    should_exit: bool = False
