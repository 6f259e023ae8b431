"""Runs typed commands against the repository and renders their outcome."""

from pydantic import ValidationError
from structlog import get_logger

from src.models import (
    AddRoomCommand,
    CheckInCommand,
    CheckOutCommand,
    Command,
    CommandResult,
    ExitCommand,
    MakeReservationCommand,
    ViewRoomsCommand,
)
from src.services.hotel_repository import HotelError, HotelRepository
from src.storage.text_store import StorageError, TextFileStore

logger = get_logger(__name__)


class CommandService:
    """Executes menu commands.

    Rejected operations come back as failed results carrying the reason;
    only storage failures on exit propagate.
    """

    def __init__(self, repository: HotelRepository, store: TextFileStore):
        """Initialize the service.

        Args:
            repository: Repository the commands operate on
            store: Store used to persist the repository on exit
        """
        self.repository = repository
        self.store = store

    def execute(self, command: Command) -> CommandResult:
        """Execute a single command.

        Args:
            command: Command to run

        Returns:
            Result with the lines to display

        Raises:
            StorageError: If saving fails while executing ExitCommand
            TypeError: If the command type is unknown
        """
        logger.debug("Executing command", command=type(command).__name__)

        try:
            if isinstance(command, AddRoomCommand):
                return self._add_room(command)
            if isinstance(command, ViewRoomsCommand):
                return self._view_rooms()
            if isinstance(command, MakeReservationCommand):
                return self._make_reservation(command)
            if isinstance(command, CheckInCommand):
                return self._check_in(command)
            if isinstance(command, CheckOutCommand):
                return self._check_out(command)
            if isinstance(command, ExitCommand):
                return self._exit()
        except HotelError as e:
            return CommandResult(success=False, lines=[str(e)])
        except ValidationError as e:
            reasons = "; ".join(error["msg"] for error in e.errors())
            return CommandResult(success=False, lines=[f"Invalid input: {reasons}"])

        raise TypeError(f"Unsupported command: {type(command).__name__}")

    def _add_room(self, command: AddRoomCommand) -> CommandResult:
        self.repository.add_room(command.room_number, command.room_type, command.price)
        return CommandResult(success=True, lines=["Room added successfully."])

    def _view_rooms(self) -> CommandResult:
        rooms = self.repository.list_rooms()
        if not rooms:
            return CommandResult(success=True, lines=["--- Rooms ---", "No rooms on record."])
        return CommandResult(
            success=True,
            lines=["--- Rooms ---"] + [str(room) for room in rooms],
        )

    def _make_reservation(self, command: MakeReservationCommand) -> CommandResult:
        self.repository.make_reservation(command.room_number, command.guest_name)
        return CommandResult(
            success=True,
            lines=[
                f"Reservation made successfully for {command.guest_name} "
                f"in Room {command.room_number}"
            ],
        )

    def _check_in(self, command: CheckInCommand) -> CommandResult:
        self.repository.check_in(command.room_number, command.guest_name)
        return CommandResult(
            success=True,
            lines=[f"Check-in successful for {command.guest_name}"],
        )

    def _check_out(self, command: CheckOutCommand) -> CommandResult:
        self.repository.check_out(command.room_number)
        return CommandResult(
            success=True,
            lines=[f"Check-out successful for Room {command.room_number}"],
        )

    def _exit(self) -> CommandResult:
        try:
            self.store.save(self.repository)
        except StorageError as e:
            logger.error("Failed to save data on exit", error=str(e))
            raise
        return CommandResult(success=True, lines=["Exiting... Goodbye!"], should_exit=True)
