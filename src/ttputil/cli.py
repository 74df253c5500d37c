"""
Command-Line Interface for TTP Printers.

Usage:
    ttputil enquiry TYPE DEVICE        - Query the printer
    ttputil get-param N DEVICE         - Read a parameter
    ttputil set-param N VALUE DEVICE   - Set a parameter
    ttputil load-font FILE DEVICE      - Load a font
    ttputil cut DEVICE                 - Cut the paper

e.g. ttputil enquiry fw-ver /dev/lp0
"""

import sys
from typing import Callable

import click

from .commands import ControlCommand, UploadCommand
from .errors import (
    DeviceOpenError,
    FileOpenError,
    InvalidCommandError,
    ReplyError,
    TransmitError,
)
from .printer import TTPPrinter
from .protocol import Enquiry


# Exit codes
EXIT_USAGE = 1
EXIT_OPEN_FAILED = 2

CONTROL_HELP = {
    ControlCommand.SAVE_PARAMS: "Save current parameters to EEPROM.",
    ControlCommand.RESET: "Reset (initialize) the printer.",
    ControlCommand.RESET_FULL: "Full reset of the printer.",
    ControlCommand.PRINT_TEST: "Print the self-test page.",
    ControlCommand.PRINT_FONT: "Print the character set.",
    ControlCommand.CUT: "Cut the paper.",
    ControlCommand.CUT_EJECT: "Cut and eject the ticket.",
    ControlCommand.ERASE_FONTS_ALL: "Erase all fonts.",
    ControlCommand.ERASE_FONTS_4_7: "Erase fonts 4-7.",
    ControlCommand.ERASE_LOGOTYPES_ALL: "Erase all logotypes.",
}

UPLOAD_HELP = {
    UploadCommand.LOAD_FONT: "Load a font from FILENAME.",
    UploadCommand.LOAD_LOGOTYPE: "Load a logotype from FILENAME.",
    UploadCommand.LOAD_FIRMWARE: "Load firmware from FILENAME (firmware upgrade).",
}


class TTPGroup(click.Group):
    """Command group that exits with EXIT_USAGE on any usage error."""

    def parse_args(self, ctx, args):
        if not args and self.no_args_is_help and not ctx.resilient_parsing:
            click.echo(ctx.get_help(), err=True)
            ctx.exit(EXIT_USAGE)
        return super().parse_args(ctx, args)

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = EXIT_USAGE
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = EXIT_USAGE
            raise


def run_transaction(ctx: click.Context, device: str, action: Callable[[TTPPrinter], None]):
    """Open the device, run one transaction and report errors.

    Reply errors are reported but are not fatal. Open and write failures
    exit with EXIT_OPEN_FAILED.
    """
    printer = TTPPrinter(device, baudrate=ctx.obj["baudrate"])
    printer.set_debug(ctx.obj["debug"])

    try:
        printer.open()
    except DeviceOpenError as e:
        click.echo(f"Error opening device: {e.reason}", err=True)
        sys.exit(EXIT_OPEN_FAILED)

    try:
        action(printer)
    except FileOpenError as e:
        click.echo(f"Error opening {e.kind}: {e.reason}", err=True)
        sys.exit(EXIT_OPEN_FAILED)
    except TransmitError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_OPEN_FAILED)
    except ReplyError as e:
        click.echo(f"Error: {e}", err=True)
    finally:
        printer.close()


@click.group(cls=TTPGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--debug/--no-debug", default=False, help="Enable debug output")
@click.option(
    "--baudrate",
    type=click.IntRange(min=1),
    default=None,
    help="Open DEVICE as a serial port at this speed",
)
@click.pass_context
def main(ctx, debug, baudrate):
    """Control utility for Swecoin/Zebra TTP series printers.

    The printer device is always the last argument.

    \b
    Examples:
        ttputil enquiry fw-ver /dev/lp0
        ttputil --baudrate 9600 get-param 3 /dev/ttyS0
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["baudrate"] = baudrate


@main.command()
@click.argument("enquiry_type", metavar="TYPE")
@click.argument("device")
@click.pass_context
def enquiry(ctx, enquiry_type, device):
    """Query the printer.

    TYPE is one of: status-enq, paper, fonts, sensor, status, fw-ver,
    board-sn, board-rev, head-temp, boot-ver, device-id, ext-status.
    """
    try:
        selected = Enquiry.from_name(enquiry_type)
    except InvalidCommandError as e:
        click.echo(str(e), err=True)
        click.echo(f"Valid types: {', '.join(Enquiry.names())}", err=True)
        sys.exit(EXIT_USAGE)

    run_transaction(ctx, device, lambda printer: click.echo(printer.enquiry(selected)))


@main.command("get-param")
@click.argument("number", type=click.IntRange(0, 255))
@click.argument("device")
@click.pass_context
def get_param(ctx, number, device):
    """Get the value of parameter NUMBER."""
    run_transaction(ctx, device, lambda printer: click.echo(printer.get_param(number)))


@main.command("set-param")
@click.argument("number", type=click.IntRange(0, 255))
@click.argument("value", type=click.IntRange(0, 255))
@click.argument("device")
@click.pass_context
def set_param(ctx, number, value, device):
    """Set parameter NUMBER to VALUE."""
    run_transaction(ctx, device, lambda printer: printer.set_param(number, value))


def _control_command(command: ControlCommand):
    @click.argument("device")
    @click.pass_context
    def _command(ctx, device):
        run_transaction(ctx, device, lambda printer: printer.control(command))

    return main.command(command.label, help=CONTROL_HELP[command])(_command)


def _upload_command(command: UploadCommand):
    @click.argument("filename")
    @click.argument("device")
    @click.pass_context
    def _command(ctx, filename, device):
        run_transaction(ctx, device, lambda printer: printer.upload(command, filename))

    return main.command(command.label, help=UPLOAD_HELP[command])(_command)


for _control in ControlCommand:
    _control_command(_control)

for _upload in UploadCommand:
    _upload_command(_upload)


if __name__ == "__main__":
    main()
