"""
High-Level TTP Printer Interface.

Provides a simple API over the TTP command set. Every method performs
one transaction: a single frame is written and, for enquiries, a single
reply is read and decoded.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from .commands import Commands, ControlCommand, UploadCommand
from .connection import DeviceConnection
from .errors import FileOpenError
from .protocol import MAX_REPLY_SIZE, Enquiry
from .responses import decode_reply, parse_parameter


class TTPPrinter:
    """
    High-level interface to a Swecoin/Zebra TTP series printer.

    Usage:
        with TTPPrinter("/dev/lp0") as printer:
            print(printer.enquiry(Enquiry.FW_VER))
    """

    def __init__(self, device: str, baudrate: Optional[int] = None):
        """
        Initialize printer interface.

        Args:
            device: Path of the printer device
            baudrate: Serial speed, or None for a plain character device
        """
        self.connection = DeviceConnection(device, baudrate=baudrate)
        self._debug = False

    def set_debug(self, enabled: bool):
        """Enable/disable debug output."""
        self._debug = enabled

    def _log(self, message: str):
        """Print debug message if enabled."""
        if self._debug:
            print(f"[TTP] {message}", file=sys.stderr)

    def open(self):
        """
        Open the printer device.

        Raises:
            DeviceOpenError: If the device cannot be opened
        """
        self._log(f"Opening {self.connection.path}...")
        self.connection.open()

    def close(self):
        """Close the printer device."""
        self.connection.close()
        self._log("Closed")

    def __enter__(self) -> "TTPPrinter":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _send(self, frame: bytes):
        self._log(f"Sending: {frame.hex()}")
        self.connection.write(frame)

    def _transact(self, frame: bytes) -> bytes:
        """Write one frame and return the bytes of the single reply read."""
        self._send(frame)
        reply = self.connection.read(MAX_REPLY_SIZE)
        self._log(f"Received {len(reply)} bytes: {reply.hex()}")
        return reply

    def enquiry(self, enquiry: Union[Enquiry, str]) -> str:
        """
        Send an enquiry and decode the reply.

        Args:
            enquiry: Enquiry member or its command-line name (e.g., "fw-ver")

        Returns:
            Human-readable reply (e.g., "5.2" or "Paper present")

        Raises:
            InvalidCommandError: If the enquiry name is unknown
            ReplyTooShortError: If the reply is shorter than the enquiry needs
            UnrecognizedReplyError: If the reply value is not one the enquiry allows
        """
        if isinstance(enquiry, str):
            enquiry = Enquiry.from_name(enquiry)

        reply = self._transact(Commands.enquiry(enquiry))
        return decode_reply(enquiry, reply)

    def get_param(self, number: int) -> int:
        """Read the current value of a parameter."""
        reply = self._transact(Commands.get_param(number))
        return parse_parameter(reply)

    def set_param(self, number: int, value: int):
        """Set a parameter (use save_params to keep it across resets)."""
        self._send(Commands.set_param(number, value))

    def save_params(self):
        """Save the current parameters to EEPROM."""
        self.control(ControlCommand.SAVE_PARAMS)

    def reset(self, full: bool = False):
        """Initialize the printer, or fully reset it when ``full`` is set."""
        self.control(ControlCommand.RESET_FULL if full else ControlCommand.RESET)

    def cut(self, eject: bool = False):
        """Cut the paper, optionally ejecting the ticket."""
        self.control(ControlCommand.CUT_EJECT if eject else ControlCommand.CUT)

    def control(self, command: Union[ControlCommand, str]):
        """Send a zero-argument control command."""
        if isinstance(command, str):
            command = ControlCommand.from_name(command)
        self._log(f"Command: {command.label}")
        self._send(Commands.control(command))

    def upload(self, command: UploadCommand, path: Union[str, Path]) -> int:
        """
        Start a bulk load and stream a file to the printer.

        The file is opened before anything is sent, so a missing file
        leaves the printer untouched.

        Returns:
            Number of file bytes written

        Raises:
            FileOpenError: If the file cannot be opened
        """
        try:
            source = open(path, "rb")
        except OSError as e:
            raise FileOpenError(str(path), e.strerror or str(e), kind=command.resource) from e

        try:
            self._send(Commands.upload(command))
        except Exception:
            source.close()
            raise

        self._log(f"Uploading {command.resource} {path}...")
        total = self.connection.upload(source)
        self._log(f"Uploaded {total} bytes")
        return total

    def load_font(self, path: Union[str, Path]) -> int:
        """Load a font file."""
        return self.upload(UploadCommand.LOAD_FONT, path)

    def load_logotype(self, path: Union[str, Path]) -> int:
        """Load a logotype file."""
        return self.upload(UploadCommand.LOAD_LOGOTYPE, path)

    def load_firmware(self, path: Union[str, Path]) -> int:
        """Load a firmware image (firmware upgrade)."""
        return self.upload(UploadCommand.LOAD_FIRMWARE, path)
