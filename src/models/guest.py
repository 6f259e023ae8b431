"""Pydantic model for a guest occupancy record."""

from pydantic import BaseModel, ConfigDict, field_validator

from src.models.fields import ensure_single_field


class Guest(BaseModel):
    """Links a guest name to a room number (looked up by value)."""

    name: str
    room_number: int

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _name_is_single_field(cls, value: str) -> str:
        return ensure_single_field(value)

    def __str__(self) -> str:
        return f"{self.name} (Room {self.room_number})"
