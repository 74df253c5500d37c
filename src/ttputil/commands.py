"""
TTP Printer Command Definitions.

This module provides the frame builders for every TTP command.
Commands that expect a reply are built from the protocol module's
enquiry table; everything else is a short fixed frame.
"""

from enum import Enum

from .errors import InvalidCommandError
from .protocol import ENQ, ESC, NUL, RS, Enquiry


class ControlCommand(Enum):
    """Zero-argument commands. The printer does not reply to these."""

    SAVE_PARAMS = ("save-params", bytes([ESC, ord("&"), 0x04]))
    RESET = ("reset", bytes([ESC, ord("@")]))
    RESET_FULL = ("reset-full", bytes([ESC, ord("?")]))
    PRINT_TEST = ("print-test", bytes([ESC, ord("P"), 0x00]))
    PRINT_FONT = ("print-font", bytes([ESC, ord("P"), 0x01]))
    CUT = ("cut", bytes([ESC, RS]))
    CUT_EJECT = ("cut-eject", bytes([RS]))
    ERASE_FONTS_ALL = ("erase-fonts-all", bytes([ESC, ord("&"), ord("C")]))
    ERASE_FONTS_4_7 = ("erase-fonts-4-7", bytes([ESC, ord("&"), ord("D")]))
    ERASE_LOGOTYPES_ALL = ("erase-logotypes-all", bytes([ESC, ord("&"), ord("L")]))

    def __init__(self, label: str, frame: bytes):
        self.label = label
        self.frame = frame

    @classmethod
    def from_name(cls, name: str) -> "ControlCommand":
        """Look up a control command by its command-line name."""
        for member in cls:
            if member.label == name:
                return member
        raise InvalidCommandError(f"Invalid command: '{name}'")


class UploadCommand(Enum):
    """
    Bulk-load commands.

    The initiating frame is followed by the raw contents of a file. The
    printer sends no acknowledgement.
    """

    LOAD_FONT = ("load-font", bytes([ESC, ord("&"), 0x00]), "font")
    LOAD_LOGOTYPE = ("load-logotype", bytes([ESC, ord("&"), 0x01]), "logotype")
    LOAD_FIRMWARE = ("load-firmware", bytes([ESC, NUL]), "firmware")

    def __init__(self, label: str, frame: bytes, resource: str):
        self.label = label
        self.frame = frame
        self.resource = resource


def _check_byte(name: str, value: int) -> int:
    """Return value if it fits in one byte, else raise ValueError."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")
    return value


class Commands:
    """Command builders for TTP printers."""

    @staticmethod
    def enquiry(enquiry: Enquiry) -> bytes:
        """Build an enquiry frame."""
        return enquiry.encode()

    @staticmethod
    def get_param(number: int) -> bytes:
        """
        Request the current value of a parameter.

        Args:
            number: Parameter number (0-255)
        """
        return bytes([ESC, ENQ, ord("P"), _check_byte("parameter number", number)])

    @staticmethod
    def set_param(number: int, value: int) -> bytes:
        """
        Set a parameter. The change is lost on reset unless saved.

        Args:
            number: Parameter number (0-255)
            value: New value (0-255)
        """
        return bytes([
            ESC, ord("&"), ord("P"),
            _check_byte("parameter number", number),
            _check_byte("parameter value", value),
        ])

    @staticmethod
    def control(command: ControlCommand) -> bytes:
        """Build a zero-argument control frame."""
        return command.frame

    @staticmethod
    def upload(command: UploadCommand) -> bytes:
        """Build the frame that starts a font, logotype or firmware load."""
        return command.frame
