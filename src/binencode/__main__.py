"""Allow running the encoder as `python -m binencode`."""

from binencode.cli.binenc import main

if __name__ == "__main__":
    main()
