"""
binenc - Binary to S-Record / DC.B Listing Command-Line Interface
=================================================================

This module implements the command-line interface for the encoders. It
reads a binary file (or standard input) and writes it out as Motorola
S-Records or as assembler DC.B directives.

Usage Examples
--------------
Encode a file as a DC.B listing (writes rom.bin.asm):
    $ binenc -i rom.bin

Encode a file as S-Records (writes rom.bin.srec):
    $ binenc -i rom.bin -s rec

Choose the output file:
    $ binenc -i rom.bin -s rec -o rom.s19

Filter standard input to standard output:
    $ cat rom.bin | binenc -s rec

Input is read into a fixed-size buffer (4096 bytes unless --max-size or
BINENCODE_MAX_SIZE says otherwise); longer input is truncated with a
warning.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

import click

from binencode import __version__
from binencode.assembly import AssemblyEncoder
from binencode.cli.errors import handle_cli_exception
from binencode.config import MAX_FILENAME_LEN, OUTPUT_FORMATS, EncoderConfig
from binencode.srec import SrecEncoder

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def check_filename(path: Path, option: str) -> Path:
    """Reject paths longer than MAX_FILENAME_LEN characters."""
    if len(str(path)) > MAX_FILENAME_LEN:
        raise click.BadParameter(
            f"filename is longer than {MAX_FILENAME_LEN} characters",
            param_hint=option,
        )
    return path


def derive_output_filename(input_file: Path, output_format: str) -> Path:
    """
    Build the default output path for an input file.

    The format's extension is appended to the full input name, so
    rom.bin becomes rom.bin.srec or rom.bin.asm.

    Raises:
        click.BadParameter: If the result would exceed MAX_FILENAME_LEN
    """
    extension = OUTPUT_FORMATS[output_format]
    if len(str(input_file)) + len(extension) > MAX_FILENAME_LEN:
        raise click.BadParameter(
            "input filename is too long to append the output extension",
            param_hint="'-i' / '--input'",
        )
    return input_file.with_name(input_file.name + extension)


def read_input(stream: BinaryIO, max_size: int) -> bytes:
    """
    Read up to max_size bytes from a binary stream.

    Longer input is truncated and a warning is logged.
    """
    data = stream.read(max_size + 1)
    if len(data) > max_size:
        logger.warning(f"Input exceeds {max_size} bytes; truncated to {max_size} bytes")
        data = data[:max_size]
    return data


def encode(data: bytes, config: EncoderConfig) -> str:
    """Run the encoder selected by the configuration."""
    if config.output_format == "rec":
        return SrecEncoder(header=config.header).encode(data)
    return AssemblyEncoder(directive=config.directive).encode(data)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-i", "--input", "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Input file (default: stdin)",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: input name plus extension, or stdout)",
)
@click.option(
    "-s", "--format", "output_format",
    type=click.Choice(sorted(OUTPUT_FORMATS)),
    default=None,
    help="Output format: rec (S-Record) or asm (DC.B listing, default)",
)
@click.option(
    "--header",
    type=str,
    default=None,
    help="ASCII label for the S0 header record",
)
@click.option(
    "--max-size",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of input bytes to read (default: 4096)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(__version__, "--version", "-V", prog_name="binenc")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    output_format: Optional[str],
    header: Optional[str],
    max_size: Optional[int],
    verbose: bool,
) -> None:
    """
    Encode binary data as Motorola S-Records or assembler DC.B lines.

    Reads INPUT (or stdin) and writes the encoded text to OUTPUT. When an
    input file is given without -o, the output goes to the input name
    with .srec or .asm appended. Without either, it goes to stdout.

    \b
    Examples:
      binenc -i rom.bin
      binenc -i rom.bin -s rec -o rom.s19
      cat rom.bin | binenc -s rec
    """
    setup_logging(verbose)

    try:
        config = EncoderConfig.from_env()
        if output_format is not None:
            config.output_format = output_format
        if max_size is not None:
            config.max_input_size = max_size
        if header is not None:
            try:
                config.header = header.encode("ascii")
            except UnicodeEncodeError:
                raise click.BadParameter("header must be ASCII", param_hint="'--header'") from None

        if input_file is not None:
            check_filename(input_file, "'-i' / '--input'")
        if output is not None:
            check_filename(output, "'-o' / '--output'")
        elif input_file is not None:
            output = derive_output_filename(input_file, config.output_format)

        # Read input
        if input_file is not None:
            with input_file.open("rb") as stream:
                data = read_input(stream, config.max_input_size)
            source = str(input_file)
        else:
            data = read_input(sys.stdin.buffer, config.max_input_size)
            source = "<stdin>"

        if verbose:
            click.echo(f"Input: {source} ({len(data)} bytes)", err=True)
            click.echo(f"Format: {config.output_format}", err=True)

        result = encode(data, config)

        # Write output
        if output is not None:
            output.write_bytes(result.encode("ascii"))
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
