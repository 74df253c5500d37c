"""
Reply Parsers for TTP Printer Enquiries.

Replies carry no framing of their own: how the bytes are read depends
only on the enquiry that produced them. Every parser runs the length
guard before touching a byte, so a short reply raises
ReplyTooShortError instead of being read past its end.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ReplyTooShortError, UnrecognizedReplyError
from .protocol import ACK, NAK, Enquiry, ReplyFormat

# Status codes carried in the byte following a NAK
STATUS_CODES = {
    0x00: "OK",
    0x01: "Paper left in presenter module. Attempt to clear the paper path failed",
    0x02: "Cutter jammed",
    0x03: "Out of paper",
    0x04: "Print Head lifted",
    0x05: "Paper-feed error. No paper in presenter although 10cm has been printed",
    0x06: "Temperature error. Print head temperature exceeded 60°C limit",
    0x07: "Presenter not running",
    0x08: "Paper jam during retract",
    0x0A: "Black mark not found",
    0x0B: "Black mark calibration error",
    0x0C: "Index error",
    0x0D: "Checksum error",
    0x0E: "Wrong firmware type or target for firmware loading",
    0x0F: "Firmware cannot start because no firmware is loaded or firmware checksum is wrong",
    0x10: "Retract function timed out",
}

UNKNOWN_STATUS = "unknown"

# Paper sensor values
PAPER_PRESENT = 0
PAPER_LOW = 1


def status_text(code: int) -> str:
    """Return the description of a NAK status code."""
    return STATUS_CODES.get(code, UNKNOWN_STATUS)


def check_length(data: bytes, expected: int) -> None:
    """
    Length guard run before a reply is decoded.

    Raises:
        ReplyTooShortError: If fewer than ``expected`` bytes were received
    """
    if len(data) < expected:
        raise ReplyTooShortError(len(data), expected)


@dataclass
class AckNakReply:
    """
    Parsed ACK/NAK reply.

    Response structure:
        Offset  Length  Field
        0       1       ACK (0x06) or NAK (0x15)
        1       1       Status code (NAK only)
    """

    ok: bool
    status: Optional[int] = None
    raw_data: bytes = b""

    @classmethod
    def parse(cls, data: bytes) -> "AckNakReply":
        """
        Parse ACK/NAK reply bytes.

        Raises:
            ReplyTooShortError: If the reply is empty, or a NAK has no status byte
            UnrecognizedReplyError: If the first byte is neither ACK nor NAK
        """
        check_length(data, 1)

        if data[0] == ACK:
            return cls(ok=True, raw_data=bytes(data))
        if data[0] == NAK:
            check_length(data, 2)
            return cls(ok=False, status=data[1], raw_data=bytes(data))

        raise UnrecognizedReplyError(data[0])

    @property
    def description(self) -> str:
        if self.ok:
            return "OK"
        return status_text(self.status)

    def __str__(self) -> str:
        if self.ok:
            return "ACK: OK"
        return f"NAK {self.status:02x}: {self.description}"


def parse_paper(data: bytes) -> str:
    """Parse the paper sensor reply."""
    check_length(data, 1)

    if data[0] == PAPER_PRESENT:
        return "Paper present"
    if data[0] == PAPER_LOW:
        return "Paper low"
    raise UnrecognizedReplyError(data[0])


def parse_string(data: bytes) -> str:
    """Render reply bytes as text, one character per byte."""
    return bytes(data).decode("latin-1")


def parse_hex(data: bytes) -> str:
    """Render reply bytes as a hex dump (e.g., b'\\x01\\xab' -> '0x01AB')."""
    return "0x" + "".join(f"{b:02X}" for b in data)


def parse_version(data: bytes) -> str:
    """Parse a two byte version reply into 'major.minor'."""
    check_length(data, 2)
    return f"{data[0]}.{data[1]}"


def parse_temperature(data: bytes) -> str:
    """Parse the print head temperature (signed byte, degrees Celsius)."""
    check_length(data, 1)
    value = data[0] - 0x100 if data[0] & 0x80 else data[0]
    return f"{value}°C"


def parse_device_id(data: bytes) -> str:
    """
    Parse the device id reply.

    The first two bytes are a length/type prefix and are skipped whatever
    their value; the rest is text.
    """
    check_length(data, 2)
    return parse_string(data[2:])


def parse_parameter(data: bytes) -> int:
    """Parse a get-param reply (one unsigned byte)."""
    check_length(data, 1)
    return data[0]


_PARSERS = {
    ReplyFormat.ACK_NAK: lambda data: str(AckNakReply.parse(data)),
    ReplyFormat.PAPER: parse_paper,
    ReplyFormat.STRING: parse_string,
    ReplyFormat.HEX: parse_hex,
    ReplyFormat.VERSION: parse_version,
    ReplyFormat.TEMPERATURE: parse_temperature,
    ReplyFormat.DEVICE_ID: parse_device_id,
}


def decode_reply(enquiry: Enquiry, data: bytes) -> str:
    """
    Decode the reply to an enquiry into human-readable text.

    The enquiry's minimum length is checked first, so formats that accept
    any length (hex dumps) still refuse replies the printer cut short.

    Raises:
        ReplyTooShortError: If the reply is shorter than the enquiry needs
        UnrecognizedReplyError: If an ACK/NAK or paper reply has an unknown value
    """
    check_length(data, enquiry.min_length)
    return _PARSERS[enquiry.reply_format](data)
