"""Pydantic model for a hotel room."""

from pydantic import BaseModel, Field, field_validator

from src.models.fields import ensure_single_field
from src.models.room_status import RoomStatus


class Room(BaseModel):
    """Inventory unit with availability state.

    The state methods do not check preconditions; callers decide
    whether a transition is allowed.
    """

    room_number: int
    room_type: str
    price: float = Field(ge=0)
    is_available: bool = True

    @field_validator("room_type")
    @classmethod
    def _room_type_is_single_field(cls, value: str) -> str:
        return ensure_single_field(value)

    @property
    def status(self) -> RoomStatus:
        """Current availability as a RoomStatus."""
        return RoomStatus.AVAILABLE if self.is_available else RoomStatus.OCCUPIED

    def reserve(self) -> None:
        self.is_available = False

    def check_in(self) -> None:
        self.is_available = False

    def check_out(self) -> None:
        self.is_available = True

    def __str__(self) -> str:
        return (
            f"Room {self.room_number} ({self.room_type}) - "
            f"Price: ${self.price} - {self.status.value}"
        )
