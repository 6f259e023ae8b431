"""Application settings and configuration management."""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Location of the flat text data files."""

    directory: Path = Path(".")
    rooms_file: str = "rooms.txt"
    guests_file: str = "guests.txt"
    encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_DATA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def rooms_path(self) -> Path:
        """Full path of the rooms data file."""
        return self.directory / self.rooms_file

    @property
    def guests_path(self) -> Path:
        """Full path of the guests data file."""
        return self.directory / self.guests_file


class ReservationSettings(BaseSettings):
    """Policies for the reservation workflow."""

    # Accept rooms whose number is already on record (lookups return the first one)
    allow_duplicate_rooms: bool = False
    # Check-in after a reservation appends a second guest record instead of replacing it
    check_in_appends_guest: bool = False

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"

    model_config = SettingsConfigDict(
        env_prefix="LOG_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class Settings(BaseSettings):
    """Main application settings."""

    debug: bool = False

    # Sub-settings
    storage: StorageSettings = StorageSettings()
    reservations: ReservationSettings = ReservationSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
