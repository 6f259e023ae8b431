"""In-memory store of rooms and guest records."""

from typing import Iterable, Optional

from structlog import get_logger

from src.models import Guest, Room

logger = get_logger(__name__)


class HotelError(Exception):
    """Base class for rejected hotel operations.

    The message is meant to be shown to the operator as-is.
    """

    pass


class RoomNotFoundError(HotelError):
    """Raised when a room number is not on record."""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} does not exist.")


class RoomStateError(HotelError):
    """Raised when a room is in the wrong state for the requested operation."""

    def __init__(self, room_number: int, message: str):
        self.room_number = room_number
        super().__init__(message)


class DuplicateRoomError(HotelError):
    """Raised when adding a room whose number is already on record."""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} already exists.")


class HotelRepository:
    """Owns the room and guest collections and the transitions between room states.

    Rooms keep their insertion order for display; a mapping from room number
    to the first room with that number serves lookups.
    """

    def __init__(
        self,
        allow_duplicate_rooms: bool = False,
        check_in_appends_guest: bool = False,
    ):
        """Initialize an empty repository.

        Args:
            allow_duplicate_rooms: Accept rooms whose number is already on record
            check_in_appends_guest: Append a new guest record on check-in even
                when the room already has one from its reservation
        """
        self.allow_duplicate_rooms = allow_duplicate_rooms
        self.check_in_appends_guest = check_in_appends_guest
        self._rooms: list[Room] = []
        self._rooms_by_number: dict[int, Room] = {}
        self._guests: list[Guest] = []

    def _append_room(self, room: Room) -> None:
        if room.room_number in self._rooms_by_number and not self.allow_duplicate_rooms:
            raise DuplicateRoomError(room.room_number)
        self._rooms.append(room)
        self._rooms_by_number.setdefault(room.room_number, room)

    def _require_room(self, room_number: int) -> Room:
        room = self._rooms_by_number.get(room_number)
        if room is None:
            logger.info("Room not found", room_number=room_number)
            raise RoomNotFoundError(room_number)
        return room

    def add_room(self, room_number: int, room_type: str, price: float) -> Room:
        """Add a new available room.

        Args:
            room_number: Room number
            room_type: Free-text room label
            price: Non-negative price

        Returns:
            The created room

        Raises:
            DuplicateRoomError: If the number is taken and duplicates are not allowed
        """
        room = Room(room_number=room_number, room_type=room_type, price=price)
        self._append_room(room)
        logger.info("Room added", room_number=room_number, room_type=room_type, price=price)
        return room.model_copy()

    def list_rooms(self) -> list[Room]:
        """Copies of all rooms in insertion order."""
        return [room.model_copy() for room in self._rooms]

    def list_guests(self) -> list[Guest]:
        """All guest records in insertion order."""
        return list(self._guests)

    def find_room_by_number(self, room_number: int) -> Optional[Room]:
        """Copy of the first room with the number, or None."""
        room = self._rooms_by_number.get(room_number)
        return room.model_copy() if room is not None else None

    def make_reservation(self, room_number: int, guest_name: str) -> Guest:
        """Reserve an available room.

        Args:
            room_number: Room to reserve
            guest_name: Name of the guest

        Returns:
            The new guest record

        Raises:
            RoomNotFoundError: If the room does not exist
            RoomStateError: If the room is already occupied
        """
        room = self._require_room(room_number)
        if not room.is_available:
            logger.info("Reservation rejected, room occupied", room_number=room_number)
            raise RoomStateError(room_number, f"Room {room_number} is not available.")

        guest = Guest(name=guest_name, room_number=room_number)
        room.reserve()
        self._guests.append(guest)
        logger.info("Reservation made", room_number=room_number, guest_name=guest_name)
        return guest

    def check_in(self, room_number: int, guest_name: str) -> Guest:
        """Check a guest into a reserved room.

        The room's existing guest record, if any, is replaced by the
        checked-in guest unless the repository appends on check-in.

        Args:
            room_number: Reserved room
            guest_name: Name of the guest checking in

        Returns:
            The guest record now on file for the room

        Raises:
            RoomNotFoundError: If the room does not exist
            RoomStateError: If the room has not been reserved
        """
        room = self._require_room(room_number)
        if room.is_available:
            logger.info("Check-in rejected, room not reserved", room_number=room_number)
            raise RoomStateError(
                room_number, f"Room {room_number} has not been reserved."
            )

        guest = Guest(name=guest_name, room_number=room_number)
        room.check_in()

        existing_index = None
        if not self.check_in_appends_guest:
            existing_index = next(
                (
                    index
                    for index, record in enumerate(self._guests)
                    if record.room_number == room_number
                ),
                None,
            )

        if existing_index is None:
            self._guests.append(guest)
        else:
            self._guests[existing_index] = guest

        logger.info(
            "Guest checked in",
            room_number=room_number,
            guest_name=guest_name,
            replaced_reservation=existing_index is not None,
        )
        return guest

    def check_out(self, room_number: int) -> list[Guest]:
        """Release an occupied room.

        Args:
            room_number: Occupied room

        Returns:
            Guest records removed for the room (possibly empty)

        Raises:
            RoomNotFoundError: If the room does not exist
            RoomStateError: If the room is already available
        """
        room = self._require_room(room_number)
        if room.is_available:
            logger.info("Check-out rejected, room not occupied", room_number=room_number)
            raise RoomStateError(room_number, f"Room {room_number} is not checked in.")

        room.check_out()
        removed = [guest for guest in self._guests if guest.room_number == room_number]
        self._guests = [guest for guest in self._guests if guest.room_number != room_number]
        logger.info("Room checked out", room_number=room_number, removed_guests=len(removed))
        return removed

    def restore(self, rooms: Iterable[Room], guests: Iterable[Guest]) -> None:
        """Replace the repository contents with persisted records.

        Availability is not stored on disk: a room referenced by any guest
        record comes back occupied.

        Args:
            rooms: Rooms in file order
            guests: Guest records in file order

        Raises:
            DuplicateRoomError: If a room number repeats and duplicates are not allowed
        """
        previous = (self._rooms, self._rooms_by_number, self._guests)
        self._rooms = []
        self._rooms_by_number = {}
        self._guests = list(guests)

        occupied = {guest.room_number for guest in self._guests}
        try:
            for room in rooms:
                # Only the first room with a number is reachable, so only it holds the guests
                first_with_number = room.room_number not in self._rooms_by_number
                room.is_available = not (first_with_number and room.room_number in occupied)
                self._append_room(room)
        except DuplicateRoomError:
            self._rooms, self._rooms_by_number, self._guests = previous
            raise

        orphans = [guest for guest in self._guests if guest.room_number not in self._rooms_by_number]
        for guest in orphans:
            logger.warning(
                "Guest record references unknown room",
                room_number=guest.room_number,
                guest_name=guest.name,
            )

        logger.info("Repository restored", room_count=len(self._rooms), guest_count=len(self._guests))
