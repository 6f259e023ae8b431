"""Unit tests for the room and guest models."""

import pytest
from pydantic import ValidationError

from src.models import Guest, Room, RoomStatus


class TestRoom:
    """Tests for Room."""

    def test_new_room_is_available(self):
        """A room starts available."""
        room = Room(room_number=101, room_type="Single", price=50.0)

        assert room.is_available is True
        assert room.status == RoomStatus.AVAILABLE

    def test_str_available(self):
        """Test the display line of an available room."""
        room = Room(room_number=101, room_type="Single", price=50.0)

        assert str(room) == "Room 101 (Single) - Price: $50.0 - Available"

    def test_str_occupied(self):
        """Test the display line of an occupied room."""
        room = Room(room_number=7, room_type="Suite", price=199.99, is_available=False)

        assert str(room) == "Room 7 (Suite) - Price: $199.99 - Occupied"

    def test_transitions(self):
        """Reserve and check-in occupy the room, check-out frees it."""
        room = Room(room_number=101, room_type="Single", price=50.0)

        room.reserve()
        assert room.status == RoomStatus.OCCUPIED

        room.check_in()
        assert room.is_available is False

        room.check_out()
        assert room.is_available is True

    def test_transitions_do_not_check_state(self):
        """Entity methods are unconditional."""
        room = Room(room_number=101, room_type="Single", price=50.0)

        room.check_out()
        room.check_out()
        assert room.is_available is True

        room.check_in()
        assert room.is_available is False

    def test_negative_price_rejected(self):
        """Test that prices below zero fail validation."""
        with pytest.raises(ValidationError):
            Room(room_number=101, room_type="Single", price=-1)

    def test_room_type_with_delimiter_rejected(self):
        """Test that a room type cannot contain the field delimiter."""
        with pytest.raises(ValidationError):
            Room(room_number=101, room_type="Single, sea view", price=50.0)

    def test_numeric_strings_are_coerced(self):
        """Values read from the data files arrive as strings."""
        room = Room(room_number="101", room_type="Single", price="50.0")

        assert room.room_number == 101
        assert room.price == 50.0


class TestGuest:
    """Tests for Guest."""

    def test_str(self):
        """Test the display line of a guest."""
        guest = Guest(name="Alice", room_number=101)

        assert str(guest) == "Alice (Room 101)"

    def test_guest_is_immutable(self):
        """Test that guest records cannot be changed after creation."""
        guest = Guest(name="Alice", room_number=101)

        with pytest.raises(ValidationError):
            guest.name = "Bob"

    def test_equality_by_fields(self):
        """Test that guests with the same fields are equal."""
        assert Guest(name="Alice", room_number=101) == Guest(name="Alice", room_number=101)
        assert Guest(name="Alice", room_number=101) != Guest(name="Alice", room_number=102)

    def test_name_with_line_break_rejected(self):
        """Test that a guest name cannot span lines."""
        with pytest.raises(ValidationError):
            Guest(name="Alice\nBob", room_number=101)
