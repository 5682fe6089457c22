"""
CLI Error Handling
==================

Maps exceptions to messages and exit codes for the binenc tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the binenc tool."""
    SUCCESS = 0
    ENCODE_ERROR = 1     # Input cannot be encoded
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from binencode.errors import EncoderError

    if isinstance(error, EncoderError):
        click.echo(f"Encoding error: {error}", err=True)
        sys.exit(ExitCode.ENCODE_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error.format_message()}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
