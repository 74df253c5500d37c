"""
Device Connection Handler for TTP Printers.

The printer is reached through a character device. Parallel and USB
printer ports (/dev/lp0, /dev/usb/lp0) are opened directly; serial ports
are opened with pyserial when a baud rate is given.
"""

import os
from typing import BinaryIO, Optional

import serial

from .errors import DeviceOpenError, TransmitError
from .protocol import MAX_REPLY_SIZE


class DeviceConnection:
    """Manages the device handle for a single printer transaction."""

    # Bulk upload chunk size (bytes per write call)
    UPLOAD_CHUNK_SIZE = 1024

    def __init__(self, path: str, baudrate: Optional[int] = None):
        """
        Initialize a connection.

        Args:
            path: Device path (e.g., /dev/lp0 or /dev/ttyS0)
            baudrate: Open the device as a serial port at this speed.
                If None, the device is opened as a plain character device.
        """
        self.path = path
        self.baudrate = baudrate
        self._fd: Optional[int] = None
        self._serial: Optional[serial.Serial] = None

    def open(self):
        """
        Open the device read-write.

        Raises:
            DeviceOpenError: If the device cannot be opened
        """
        if self.is_open:
            return

        if self.baudrate is not None:
            try:
                # No timeout: a read blocks until the printer answers
                self._serial = serial.Serial(self.path, self.baudrate, timeout=None)
            except (serial.SerialException, ValueError) as e:
                raise DeviceOpenError(self.path, str(e)) from e
            return

        try:
            self._fd = os.open(self.path, os.O_RDWR)
        except OSError as e:
            raise DeviceOpenError(self.path, e.strerror or str(e)) from e

    def close(self):
        """Close the device."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> "DeviceConnection":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def is_open(self) -> bool:
        """Check if the device is currently open."""
        return self._fd is not None or self._serial is not None

    def write(self, data: bytes) -> int:
        """
        Write data to the printer in one write call.

        Returns:
            Number of bytes written

        Raises:
            TransmitError: If the device is not open, the write fails, or
                the device accepts fewer bytes than were sent
        """
        if not self.is_open:
            raise TransmitError(f"device {self.path} is not open")

        try:
            if self._serial is not None:
                written = self._serial.write(data)
            else:
                written = os.write(self._fd, data)
        except (OSError, serial.SerialException) as e:
            raise TransmitError(f"write to {self.path} failed: {e}",
                                expected=len(data)) from e

        if written is None:
            written = len(data)
        if written < len(data):
            raise TransmitError(
                f"short write to {self.path}: {written} of {len(data)} bytes",
                sent=written,
                expected=len(data),
            )
        return written

    def read(self, size: int = MAX_REPLY_SIZE) -> bytes:
        """
        Perform a single blocking read of at most ``size`` bytes.

        On a serial port this waits for the first byte and then takes
        whatever else is already buffered.
        """
        if not self.is_open:
            raise TransmitError(f"device {self.path} is not open")

        size = min(size, MAX_REPLY_SIZE)
        if size <= 0:
            return b""

        if self._serial is not None:
            data = self._serial.read(1)
            waiting = self._serial.in_waiting
            if data and waiting:
                data += self._serial.read(min(waiting, size - len(data)))
            return bytes(data)

        return os.read(self._fd, size)

    def upload(self, source: BinaryIO) -> int:
        """
        Stream a file to the printer and close it.

        The file is read in UPLOAD_CHUNK_SIZE chunks and each chunk is sent
        with its own write call. No acknowledgement is awaited between
        chunks.

        Args:
            source: File opened in binary mode

        Returns:
            Total number of bytes written
        """
        total = 0
        try:
            while True:
                chunk = source.read(self.UPLOAD_CHUNK_SIZE)
                if not chunk:
                    break
                total += self.write(chunk)
        finally:
            source.close()
        return total
