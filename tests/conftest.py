from pathlib import Path

import pytest

from src.services import HotelRepository
from src.services.command_service import CommandService
from src.storage import TextFileStore


@pytest.fixture
def repository():
    """Empty repository with the default policies."""
    return HotelRepository()


@pytest.fixture
def seeded_repository():
    """Repository with three rooms, one of them reserved."""
    repo = HotelRepository()
    repo.add_room(101, "Single", 50.0)
    repo.add_room(102, "Double", 80.0)
    repo.add_room(201, "Suite", 150.5)
    repo.make_reservation(102, "Alice")
    return repo


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the data files for a test."""
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path):
    """Text file store writing under the test data directory."""
    return TextFileStore(
        rooms_path=data_dir / "rooms.txt",
        guests_path=data_dir / "guests.txt",
    )


@pytest.fixture
def service(repository, store):
    """Command service over an empty repository."""
    return CommandService(repository, store)
