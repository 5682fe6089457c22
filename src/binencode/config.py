"""
Encoder Configuration
=====================

Default settings for the binenc tool. Configuration can come from:
- Default values (defined here)
- Environment variables (EncoderConfig.from_env)
- Command-line options, which override both

Environment variables (all optional):
    BINENCODE_FORMAT: Output format, "rec" or "asm"
    BINENCODE_MAX_SIZE: Maximum number of input bytes read
    BINENCODE_HEADER: ASCII label for the S0 header record
    BINENCODE_DIRECTIVE: Directive starting each listing line
"""

from dataclasses import dataclass
import logging
import os

from binencode.assembly.encoder import DEFAULT_DIRECTIVE
from binencode.srec.encoder import DEFAULT_HEADER

logger = logging.getLogger(__name__)


# Input is read into a buffer of this many bytes; anything longer is dropped
DEFAULT_MAX_INPUT_SIZE = 4096

# Longest input or output path accepted
MAX_FILENAME_LEN = 255

# Output format names and the file extension used for derived output names
OUTPUT_FORMATS = {
    "rec": ".srec",
    "asm": ".asm",
}


@dataclass
class EncoderConfig:
    """
    Settings for one binenc run.

    Attributes:
        output_format: "rec" for S-Records, "asm" for a DC.B listing
        max_input_size: Input bytes read before truncating
        header: Label carried by the S0 record
        directive: Directive starting each listing line
    """
    output_format: str = "asm"
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    header: bytes = DEFAULT_HEADER
    directive: str = DEFAULT_DIRECTIVE

    @classmethod
    def from_env(cls) -> "EncoderConfig":
        """
        Create EncoderConfig from environment variables.

        Invalid values are logged and the default is kept.
        """
        config = cls()

        if output_format := os.environ.get("BINENCODE_FORMAT"):
            if output_format in OUTPUT_FORMATS:
                config.output_format = output_format
            else:
                logger.warning(f"Ignoring BINENCODE_FORMAT={output_format!r}")

        if max_size := os.environ.get("BINENCODE_MAX_SIZE"):
            try:
                value = int(max_size, 0)
            except ValueError:
                value = -1
            if value > 0:
                config.max_input_size = value
            else:
                logger.warning(f"Ignoring BINENCODE_MAX_SIZE={max_size!r}")

        if header := os.environ.get("BINENCODE_HEADER"):
            try:
                config.header = header.encode("ascii")
            except UnicodeEncodeError:
                logger.warning(f"Ignoring non-ASCII BINENCODE_HEADER={header!r}")

        if directive := os.environ.get("BINENCODE_DIRECTIVE", "").strip():
            config.directive = directive

        return config

    def get_extension(self) -> str:
        """File extension for the configured output format."""
        return OUTPUT_FORMATS[self.output_format]
