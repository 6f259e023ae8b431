"""Menu-driven console for the hotel reservation system."""

import math
from enum import IntEnum
from typing import Callable, Optional

from structlog import get_logger

from src.models import (
    AddRoomCommand,
    CheckInCommand,
    CheckOutCommand,
    Command,
    ExitCommand,
    MakeReservationCommand,
    ViewRoomsCommand,
    ensure_single_field,
)
from src.services.command_service import CommandService
from src.storage.text_store import StorageError

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SAVE_FAILED = 1
EXIT_INTERRUPTED = 130


class MenuOption(IntEnum):
    """Numbered menu entries."""
    ADD_ROOM = 1
    VIEW_ROOMS = 2
    MAKE_RESERVATION = 3
    CHECK_IN = 4
    CHECK_OUT = 5
    EXIT = 6


MENU_LABELS = {
    MenuOption.ADD_ROOM: "Add Room",
    MenuOption.VIEW_ROOMS: "View Rooms",
    MenuOption.MAKE_RESERVATION: "Make Reservation",
    MenuOption.CHECK_IN: "Check-In",
    MenuOption.CHECK_OUT: "Check-Out",
    MenuOption.EXIT: "Exit",
}


class HotelConsole:
    """Reads menu selections, prompts for their fields and runs the resulting command.

    Input and output are injected so the console can be driven by a script.
    End of input is treated like the exit option.
    """

    def __init__(
        self,
        service: CommandService,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.service = service
        self.input = input_func
        self.output = output_func

    def show_menu(self) -> None:
        self.output("")
        self.output("--- Hotel Reservation System ---")
        for option in MenuOption:
            self.output(f"{option.value}. {MENU_LABELS[option]}")

    def read_int(self, prompt: str) -> int:
        """Prompt until the operator enters a whole number."""
        while True:
            raw = self.input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self.output("Please enter a whole number.")

    def read_price(self, prompt: str) -> float:
        """Prompt until the operator enters a finite, non-negative number."""
        while True:
            raw = self.input(prompt).strip()
            try:
                price = float(raw)
            except ValueError:
                self.output("Please enter a number.")
                continue
            if not math.isfinite(price) or price < 0:
                self.output("Price must be zero or more.")
                continue
            return price

    def read_text(self, prompt: str) -> str:
        """Prompt until the operator enters non-empty text that fits in one data field."""
        while True:
            text = self.input(prompt).strip()
            if not text:
                self.output("A value is required.")
                continue
            try:
                return ensure_single_field(text)
            except ValueError as e:
                self.output(f"Value {e}.")

    def build_command(self, choice: int) -> Optional[Command]:
        """Collect the fields for a menu choice.

        Returns:
            The command to run, or None when the choice is not on the menu
        """
        if choice == MenuOption.ADD_ROOM:
            return AddRoomCommand(
                room_number=self.read_int("Enter room number: "),
                room_type=self.read_text("Enter room type (Single/Double/Suite): "),
                price=self.read_price("Enter room price: "),
            )
        if choice == MenuOption.VIEW_ROOMS:
            return ViewRoomsCommand()
        if choice == MenuOption.MAKE_RESERVATION:
            return MakeReservationCommand(
                room_number=self.read_int("Enter room number to reserve: "),
                guest_name=self.read_text("Enter guest name: "),
            )
        if choice == MenuOption.CHECK_IN:
            return CheckInCommand(
                room_number=self.read_int("Enter room number to check-in: "),
                guest_name=self.read_text("Enter guest name: "),
            )
        if choice == MenuOption.CHECK_OUT:
            return CheckOutCommand(
                room_number=self.read_int("Enter room number to check-out: "),
            )
        if choice == MenuOption.EXIT:
            return ExitCommand()
        return None

    def _run_command(self, command: Command) -> Optional[int]:
        """Run a command and print its result.

        Returns:
            Exit code when the session should end, otherwise None
        """
        try:
            result = self.service.execute(command)
        except StorageError as e:
            self.output(f"Error: {e}")
            return EXIT_SAVE_FAILED
        except KeyboardInterrupt:
            logger.warning("Command interrupted", command=type(command).__name__)
            self.output("")
            self.output("Interrupted. Changes since the last save may not have been saved.")
            return EXIT_INTERRUPTED

        for line in result.lines:
            self.output(line)
        return EXIT_OK if result.should_exit else None

    def run(self) -> int:
        """Run the menu loop until the operator exits.

        Returns:
            Process exit code
        """
        logger.info("Console session started")

        while True:
            self.show_menu()
            try:
                choice = self.read_int("Enter your choice: ")
                command = self.build_command(choice)
            except EOFError:
                logger.info("End of input, exiting")
                self.output("")
                command = ExitCommand()
            except KeyboardInterrupt:
                logger.warning("Session interrupted, changes not saved")
                self.output("")
                self.output("Interrupted. Changes since the last save were not saved.")
                return EXIT_INTERRUPTED

            if command is None:
                logger.debug("Invalid menu choice", choice=choice)
                self.output("Invalid choice. Please try again.")
                continue

            exit_code = self._run_command(command)
            if exit_code is not None:
                logger.info("Console session ended", exit_code=exit_code)
                return exit_code
