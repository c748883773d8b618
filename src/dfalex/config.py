"""
Scanner Configuration
=====================

Options controlling how a Scanner reports positions and what it does once
the input is exhausted. Configuration can come from:
- Default values (defined here)
- Keyword arguments
- Environment variables (ScannerOptions.from_env)

Copyright (c) 2026 dfalex Contributors
"""

from dataclasses import dataclass
import os


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        filename: Source name used in tokens and error locations.
                  None means use the stream's own name.
        line_number: Row of the first code unit (useful when scanning a
                     fragment of a larger file)
        strict_eof: If False (default), every call after the EOF token
                    returns the EOF token again. If True, such calls raise
                    ScannerExhaustedError.
    """
    filename: str | None = None
    line_number: int = 1
    strict_eof: bool = False

    def __post_init__(self):
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            DFALEX_FILENAME: Source name for error messages
            DFALEX_LINE_NUMBER: Starting row (positive integer)
            DFALEX_STRICT_EOF: "1", "true" or "yes" to enable strict EOF

        Returns:
            ScannerOptions with values from environment variables
        """
        options = cls()

        if filename := os.environ.get("DFALEX_FILENAME"):
            options.filename = filename

        if line_number := os.environ.get("DFALEX_LINE_NUMBER"):
            try:
                if int(line_number) >= 1:
                    options.line_number = int(line_number)
            except ValueError:
                pass  # Ignore invalid values

        if strict_eof := os.environ.get("DFALEX_STRICT_EOF"):
            options.strict_eof = strict_eof.strip().lower() in ("1", "true", "yes")

        return options
