"""
binencode Command-Line Interface
================================

- **binenc**: Encode a binary file as S-Records or a DC.B listing

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["binenc"]
