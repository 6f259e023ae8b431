"""Interactive command-line interface."""

from src.cli.console import HotelConsole, MenuOption

__all__ = ["HotelConsole", "MenuOption"]
