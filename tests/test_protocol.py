"""Tests for TTP protocol and command encoding."""

import pytest

from ttputil.commands import Commands, ControlCommand, UploadCommand
from ttputil.errors import InvalidCommandError
from ttputil.protocol import ACK, ENQ, ESC, NAK, NUL, RS, Enquiry, ReplyFormat


class TestWireConstants:
    """Test protocol control characters."""

    def test_constants(self):
        """Control characters must match the printer firmware."""
        assert ESC == 0x1B
        assert ENQ == 0x05
        assert ACK == 0x06
        assert NAK == 0x15
        assert RS == 0x1E
        assert NUL == 0x00


class TestEnquiry:
    """Test enquiry frame encoding."""

    @pytest.mark.parametrize(
        "name,subtype",
        [
            ("status-enq", 0x01),
            ("paper", 0x02),
            ("fonts", 0x04),
            ("sensor", 0x05),
            ("status", 0x06),
            ("fw-ver", 0x07),
            ("board-sn", 0x09),
            ("board-rev", 0x0A),
            ("head-temp", 0x0B),
            ("boot-ver", 0x0C),
            ("device-id", 0x63),
            ("ext-status", 0x45),
        ],
    )
    def test_encode(self, name, subtype):
        """Each enquiry encodes to ESC ENQ subtype."""
        assert Enquiry.from_name(name).encode() == bytes([0x1B, 0x05, subtype])

    def test_fw_ver_frame(self):
        """Test the firmware version enquiry frame."""
        assert Commands.enquiry(Enquiry.FW_VER) == bytes([0x1B, 0x05, 0x07])

    def test_encoding_is_deterministic(self):
        """The same enquiry always produces the same bytes."""
        assert Enquiry.HEAD_TEMP.encode() == Enquiry.HEAD_TEMP.encode()

    def test_ext_status_uses_ascii_e(self):
        """Extended status subtype is the ASCII letter E."""
        assert Enquiry.EXT_STATUS.subtype == ord("E")

    def test_unknown_name_raises(self):
        """Unknown enquiry names raise InvalidCommandError."""
        with pytest.raises(InvalidCommandError, match="Invalid enquiry command: 'bogus'"):
            Enquiry.from_name("bogus")

    def test_names(self):
        """All twelve enquiries are listed."""
        names = Enquiry.names()
        assert len(names) == 12
        assert names[0] == "status-enq"
        assert "ext-status" in names

    def test_reply_formats(self):
        """Test enquiries are bound to the right reply format."""
        assert Enquiry.STATUS_ENQ.reply_format == ReplyFormat.ACK_NAK
        assert Enquiry.PAPER.reply_format == ReplyFormat.PAPER
        assert Enquiry.FW_VER.reply_format == ReplyFormat.VERSION
        assert Enquiry.BOOT_VER.reply_format == ReplyFormat.VERSION
        assert Enquiry.HEAD_TEMP.reply_format == ReplyFormat.TEMPERATURE
        assert Enquiry.DEVICE_ID.reply_format == ReplyFormat.DEVICE_ID
        assert Enquiry.BOARD_REV.reply_format == ReplyFormat.STRING

    def test_minimum_lengths(self):
        """Test minimum reply lengths."""
        assert Enquiry.FONTS.min_length == 0
        assert Enquiry.BOARD_SN.min_length == 6
        assert Enquiry.EXT_STATUS.min_length == 4
        assert Enquiry.SENSOR.min_length == 2


class TestParameterCommands:
    """Test get-param/set-param frames."""

    def test_get_param(self):
        """get-param is ESC ENQ 'P' n."""
        assert Commands.get_param(3) == bytes([0x1B, 0x05, 0x50, 0x03])

    def test_set_param(self):
        """set-param is ESC '&' 'P' n v."""
        assert Commands.set_param(7, 200) == bytes([0x1B, 0x26, 0x50, 0x07, 0xC8])

    def test_param_number_out_of_range(self):
        """Parameter numbers must fit in one byte."""
        with pytest.raises(ValueError, match="parameter number"):
            Commands.get_param(256)

    def test_param_value_out_of_range(self):
        """Parameter values must fit in one byte."""
        with pytest.raises(ValueError, match="parameter value"):
            Commands.set_param(1, -1)


class TestControlCommands:
    """Test fixed control frames."""

    @pytest.mark.parametrize(
        "name,frame",
        [
            ("save-params", bytes([0x1B, 0x26, 0x04])),
            ("reset", bytes([0x1B, 0x40])),
            ("reset-full", bytes([0x1B, 0x3F])),
            ("print-test", bytes([0x1B, 0x50, 0x00])),
            ("print-font", bytes([0x1B, 0x50, 0x01])),
            ("cut", bytes([0x1B, 0x1E])),
            ("cut-eject", bytes([0x1E])),
            ("erase-fonts-all", bytes([0x1B, 0x26, 0x43])),
            ("erase-fonts-4-7", bytes([0x1B, 0x26, 0x44])),
            ("erase-logotypes-all", bytes([0x1B, 0x26, 0x4C])),
        ],
    )
    def test_frames(self, name, frame):
        """Test each control command frame."""
        assert Commands.control(ControlCommand.from_name(name)) == frame

    def test_unknown_name_raises(self):
        """Unknown control command names raise InvalidCommandError."""
        with pytest.raises(InvalidCommandError):
            ControlCommand.from_name("feed")


class TestUploadCommands:
    """Test bulk-load initiating frames."""

    def test_load_font(self):
        """Test load-font initiating frame."""
        assert Commands.upload(UploadCommand.LOAD_FONT) == bytes([0x1B, 0x26, 0x00])

    def test_load_logotype(self):
        """Test load-logotype initiating frame."""
        assert Commands.upload(UploadCommand.LOAD_LOGOTYPE) == bytes([0x1B, 0x26, 0x01])

    def test_load_firmware(self):
        """Test load-firmware initiating frame."""
        assert Commands.upload(UploadCommand.LOAD_FIRMWARE) == bytes([0x1B, 0x00])

    def test_resource_names(self):
        """Resource names are used in error messages."""
        assert [c.resource for c in UploadCommand] == ["font", "logotype", "firmware"]
