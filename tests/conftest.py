"""
Pytest configuration for TTP printer tests.

Provides fixtures and command-line options for hardware tests.
"""

import pytest


def pytest_addoption(parser):
    """Add command-line options for hardware tests."""
    parser.addoption(
        "--device",
        action="store",
        default=None,
        help="Printer device path for hardware tests (e.g. /dev/lp0)",
    )


@pytest.fixture
def printer_device(request):
    """Get the printer device path from command line."""
    device = request.config.getoption("--device")
    if device is None:
        pytest.skip("No printer device provided (use --device=/dev/lp0)")
    return device


@pytest.fixture
def fake_device(tmp_path):
    """
    Build a regular file that stands in for the printer device.

    A read-write file descriptor reads from where the last write ended,
    so the file is laid out as ``frame_length`` placeholder bytes followed
    by the reply. The command frame overwrites the placeholder and the
    single read then returns the reply.
    """

    def _make(reply: bytes = b"", frame_length: int = 3):
        path = tmp_path / "lp0"
        path.write_bytes(b"\x00" * frame_length + reply)
        return path

    return _make
