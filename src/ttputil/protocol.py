"""
TTP Printer Protocol Definitions.

This module holds the wire constants and the enquiry table for the
Swecoin/Zebra TTP series printers.

Enquiry frame structure:
    ESC:      0x1B (constant)
    ENQ:      0x05 (constant)
    Subtype:  0x00-0xFF (what is being asked for)

The printer answers an enquiry with a single reply whose shape depends
only on the subtype. There is no header, length field or checksum.
"""

from enum import Enum

from .errors import InvalidCommandError

# Control characters used to build and interpret frames
NUL = 0x00
ENQ = 0x05
ACK = 0x06
NAK = 0x15
ESC = 0x1B
RS = 0x1E

# Largest reply accepted from a single read
MAX_REPLY_SIZE = 1024


class ReplyFormat(Enum):
    """How a reply should be interpreted."""
    ACK_NAK = "ack-nak"
    PAPER = "paper"
    STRING = "string"
    HEX = "hex"
    VERSION = "version"
    TEMPERATURE = "temperature"
    DEVICE_ID = "device-id"


class Enquiry(Enum):
    """
    Known enquiries.

    Each member carries its command-line name, subtype byte, reply format
    and the minimum reply length needed before the reply is decoded.
    """

    STATUS_ENQ = ("status-enq", 0x01, ReplyFormat.ACK_NAK, 1)
    PAPER = ("paper", 0x02, ReplyFormat.PAPER, 1)
    FONTS = ("fonts", 0x04, ReplyFormat.STRING, 0)
    SENSOR = ("sensor", 0x05, ReplyFormat.HEX, 2)
    STATUS = ("status", 0x06, ReplyFormat.HEX, 2)
    FW_VER = ("fw-ver", 0x07, ReplyFormat.VERSION, 2)
    BOARD_SN = ("board-sn", 0x09, ReplyFormat.HEX, 6)
    BOARD_REV = ("board-rev", 0x0A, ReplyFormat.STRING, 1)
    HEAD_TEMP = ("head-temp", 0x0B, ReplyFormat.TEMPERATURE, 1)
    BOOT_VER = ("boot-ver", 0x0C, ReplyFormat.VERSION, 2)
    DEVICE_ID = ("device-id", 0x63, ReplyFormat.DEVICE_ID, 2)
    EXT_STATUS = ("ext-status", ord("E"), ReplyFormat.HEX, 4)

    def __init__(self, label: str, subtype: int, reply_format: ReplyFormat,
                 min_length: int):
        self.label = label
        self.subtype = subtype
        self.reply_format = reply_format
        self.min_length = min_length

    def encode(self) -> bytes:
        """Encode the enquiry frame for transmission."""
        return bytes([ESC, ENQ, self.subtype])

    @classmethod
    def names(cls) -> list[str]:
        """Return the command-line names of all enquiries."""
        return [member.label for member in cls]

    @classmethod
    def from_name(cls, name: str) -> "Enquiry":
        """
        Look up an enquiry by its command-line name.

        Raises:
            InvalidCommandError: If no enquiry has that name
        """
        for member in cls:
            if member.label == name:
                return member

        raise InvalidCommandError(f"Invalid enquiry command: '{name}'")

    def __repr__(self) -> str:
        return f"Enquiry({self.label}, subtype=0x{self.subtype:02X})"
