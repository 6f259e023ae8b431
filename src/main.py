"""Main entry point for the hotel reservation system."""

import sys

from src.cli import HotelConsole
from src.config import configure_logging, get_logger, settings
from src.services import HotelRepository
from src.services.command_service import CommandService
from src.storage import StorageError, TextFileStore

logger = get_logger(__name__)


def build_store() -> TextFileStore:
    """Create the text file store from the storage settings."""
    return TextFileStore(
        rooms_path=settings.storage.rooms_path,
        guests_path=settings.storage.guests_path,
        encoding=settings.storage.encoding,
    )


def build_repository() -> HotelRepository:
    """Create an empty repository with the configured reservation policies."""
    return HotelRepository(
        allow_duplicate_rooms=settings.reservations.allow_duplicate_rooms,
        check_in_appends_guest=settings.reservations.check_in_appends_guest,
    )


def main() -> int:
    """Load saved data, run the interactive menu and return the exit code.

    A data file that cannot be loaded stops the program before the menu
    is shown, so records are never silently dropped.
    """
    logger.info(
        "Starting hotel reservation system",
        rooms_path=str(settings.storage.rooms_path),
        guests_path=str(settings.storage.guests_path),
    )

    repository = build_repository()
    store = build_store()

    try:
        store.load(repository)
    except StorageError as e:
        logger.error("Could not load data files", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    console = HotelConsole(CommandService(repository, store))

    try:
        return console.run()
    except Exception as e:
        logger.error(
            "Fatal error in main application",
            error=str(e),
            exc_info=True,
        )
        return 1


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
