"""Exception classes for hss.

Provides standardized exceptions for error handling throughout hss.
Every failure of a transpile call is a TranspileError carrying the source
identifier and the 1-indexed line where the problem was detected.
"""

from __future__ import annotations


class HssError(Exception):
    """Base exception for all hss errors.

    Subclass this for specific error categories.
    """

    pass


class TranspileError(HssError):
    """Error during transpilation.

    Raised when the scanner encounters input it cannot turn into valid
    host-language source. Callers should treat it as input rejection.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize transpile error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Source identifier, usually a file path (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnterminatedStringError(TranspileError):
    """A quoted literal was never closed.

    Raised at end of input before the closing delimiter, or on a raw
    newline inside a single- or double-quoted string.
    """

    pass


class UnterminatedRegionError(TranspileError):
    """A stylesheet or host expression region was still open at end of input."""

    def __init__(
        self,
        region: str,
        end_delimiter: str,
        starting_line: int,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unterminated region error.

        Args:
            region: Human-readable region name (e.g., "stylesheet expression")
            end_delimiter: The delimiter that would have closed the region
            starting_line: Line on which the region was opened
            lineno: Line where end of input was reached
            source_file: Source identifier (optional)
        """
        self.region = region
        self.end_delimiter = end_delimiter
        self.starting_line = starting_line
        super().__init__(
            "Unexpected end of file. It looks like you forgot the closing "
            f'"{end_delimiter}" of the {region} beginning on line {starting_line}.',
            lineno=lineno,
            source_file=source_file,
        )
