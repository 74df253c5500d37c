"""Swecoin/Zebra TTP Printer Control Utility for Linux."""

__version__ = "0.1.0"

from .printer import TTPPrinter
from .connection import DeviceConnection
from .protocol import Enquiry, ReplyFormat
from .commands import Commands, ControlCommand, UploadCommand
from .responses import AckNakReply, decode_reply, status_text
from .errors import (
    PrinterError,
    DeviceOpenError,
    FileOpenError,
    TransmitError,
    InvalidCommandError,
    ReplyError,
    ReplyTooShortError,
    UnrecognizedReplyError,
)

__all__ = [
    "TTPPrinter",
    "DeviceConnection",
    "Enquiry",
    "ReplyFormat",
    "Commands",
    "ControlCommand",
    "UploadCommand",
    "AckNakReply",
    "decode_reply",
    "status_text",
    "PrinterError",
    "DeviceOpenError",
    "FileOpenError",
    "TransmitError",
    "InvalidCommandError",
    "ReplyError",
    "ReplyTooShortError",
    "UnrecognizedReplyError",
]
