"""Error types raised by the transpiler

All of them are terminal: the CLI reports the message and exits non-zero.
"""

from typing import Optional


class TranspileError(Exception):
    """Base class for every transpiler failure"""


class InputNotFoundError(TranspileError, FileNotFoundError):
    """Input file does not exist"""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f'Input file "{path}" does not exist.')


class UnsupportedFormatError(TranspileError, ValueError):
    """Input file extension has no front-end"""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f'Unsupported file extension "{extension}"')


class ScriptParseError(TranspileError, ValueError):
    """Script content could not be parsed

    Attributes:
        line: 1-based line of the first syntax error (if known)
        column: 1-based column of the first syntax error (if known)
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} ({line}:{column})"
        super().__init__(f"Error parsing input file: {message}")
