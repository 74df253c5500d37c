"""Exceptions raised by the TTP printer driver."""


class PrinterError(Exception):
    """Base exception for all printer errors."""

    pass


class DeviceOpenError(PrinterError):
    """The printer device could not be opened."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot open device {path}: {reason}")


class FileOpenError(PrinterError):
    """A font, logotype or firmware file could not be opened."""

    def __init__(self, path: str, reason: str, kind: str = "file"):
        self.path = path
        self.reason = reason
        self.kind = kind
        super().__init__(f"cannot open {kind} {path}: {reason}")


class TransmitError(PrinterError):
    """Writing a frame to the device failed or was cut short."""

    def __init__(self, message: str, sent: int = 0, expected: int = 0):
        self.sent = sent
        self.expected = expected
        super().__init__(message)


class InvalidCommandError(PrinterError):
    """Unknown command or enquiry name."""

    pass


class ReplyError(PrinterError):
    """Base class for replies that cannot be interpreted."""

    pass


class ReplyTooShortError(ReplyError):
    """Fewer bytes were received than the reply format needs."""

    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(f"only {actual} bytes received, expected {expected}")


class UnrecognizedReplyError(ReplyError):
    """The first reply byte is not one of the values the format allows."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"invalid reply {value}")
