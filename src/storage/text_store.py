"""Flat text file persistence for rooms and guests."""

from pathlib import Path
from typing import Callable, TypeVar

from pydantic import ValidationError
from structlog import get_logger

from src.models import FIELD_DELIMITER, Guest, Room
from src.services.hotel_repository import DuplicateRoomError, HotelRepository

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")

ROOM_FIELDS = ("room_number", "room_type", "price")
GUEST_FIELDS = ("name", "room_number")


class StorageError(Exception):
    """Raised when a data file cannot be read or written."""

    pass


class DataFileError(StorageError):
    """Raised when a data file contains a record that cannot be parsed."""

    def __init__(self, path: Path, line_number: int | None, reason: str):
        self.path = path
        self.line_number = line_number
        location = f"{path}:{line_number}" if line_number is not None else str(path)
        super().__init__(f"Malformed data file {location}: {reason}")


class TextFileStore:
    """Reads and writes the repository as two comma-separated text files.

    Rooms file, one line per room:   <room_number>,<room_type>,<price>
    Guests file, one line per guest: <name>,<room_number>

    Availability is not written; it is rebuilt from the guest records on load.
    """

    def __init__(self, rooms_path: Path, guests_path: Path, encoding: str = "utf-8"):
        """Initialize the store.

        Args:
            rooms_path: Path of the rooms data file
            guests_path: Path of the guests data file
            encoding: Text encoding of both files
        """
        self.rooms_path = Path(rooms_path)
        self.guests_path = Path(guests_path)
        self.encoding = encoding

    def _read_records(
        self,
        path: Path,
        field_names: tuple[str, ...],
        build: Callable[..., RecordT],
    ) -> list[RecordT]:
        """Parse every non-blank line of a data file.

        A missing file yields no records.

        Raises:
            DataFileError: If a line has the wrong field count or invalid values
            StorageError: If the file exists but cannot be read
        """
        if not path.exists():
            logger.info("Data file not found, starting empty", path=str(path))
            return []

        # Records end at "\n" only; other Unicode line breaks are field text
        try:
            with open(path, encoding=self.encoding) as f:
                lines = [line.rstrip("\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {path}: {e}") from e

        records = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            values = line.split(FIELD_DELIMITER)
            if len(values) != len(field_names):
                raise DataFileError(
                    path,
                    line_number,
                    f"expected {len(field_names)} fields, found {len(values)}",
                )

            try:
                records.append(build(**dict(zip(field_names, values))))
            except ValidationError as e:
                fields = ", ".join(
                    str(error["loc"][0]) for error in e.errors() if error["loc"]
                )
                raise DataFileError(path, line_number, f"invalid {fields}") from e

        logger.info("Data file loaded", path=str(path), record_count=len(records))
        return records

    def _write_lines(self, path: Path, lines: list[str]) -> None:
        """Overwrite a data file with the given lines.

        Text mode translates each newline to the platform line terminator.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=self.encoding) as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e

        logger.info("Data file saved", path=str(path), record_count=len(lines))

    def load(self, repository: HotelRepository) -> None:
        """Populate the repository from the data files.

        Args:
            repository: Repository to fill; its current contents are replaced

        Raises:
            DataFileError: If either file holds a malformed record or the rooms
                file repeats a room number
            StorageError: If a file exists but cannot be read
        """
        rooms = self._read_records(self.rooms_path, ROOM_FIELDS, Room)
        guests = self._read_records(self.guests_path, GUEST_FIELDS, Guest)

        try:
            repository.restore(rooms, guests)
        except DuplicateRoomError as e:
            raise DataFileError(self.rooms_path, None, str(e)) from e

    def save(self, repository: HotelRepository) -> None:
        """Overwrite both data files with the repository contents.

        Args:
            repository: Repository to persist

        Raises:
            StorageError: If a file cannot be written
        """
        room_lines = [
            FIELD_DELIMITER.join(
                [str(room.room_number), room.room_type, str(room.price)]
            )
            for room in repository.list_rooms()
        ]
        guest_lines = [
            FIELD_DELIMITER.join([guest.name, str(guest.room_number)])
            for guest in repository.list_guests()
        ]

        self._write_lines(self.rooms_path, room_lines)
        self._write_lines(self.guests_path, guest_lines)
