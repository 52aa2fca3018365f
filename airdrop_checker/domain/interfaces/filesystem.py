"""Interface for interacting with the file system.

Defines the contract for reading the address list and writing the result
file, allowing the core application to be independent of the specific
file system implementation.
"""

import abc
from typing import List

# Import relevant domain models
from ..models.common import FilePath
from ..models.airdrop import ErrorKind


class InputReadError(IOError):
    """Raised when the address list cannot be read. Fatal to the whole run."""
    kind = ErrorKind.INPUT_READ


class OutputWriteError(IOError):
    """Raised when the result file cannot be written."""
    kind = ErrorKind.TERMINAL_REQUEST


class FileSystem(abc.ABC):
    """Abstract Base Class for file system operations."""

    @abc.abstractmethod
    async def read_lines(self, file_path: FilePath) -> List[str]:
        """Reads a newline-delimited file asynchronously.

        Args:
            file_path: The path to the file to read.

        Returns:
            One entry per line, surrounding whitespace stripped. A trailing
            newline does not produce an extra empty entry.

        Raises:
            InputReadError: If the file cannot be read for any reason.
        """
        pass

    @abc.abstractmethod
    async def write_file(self, file_path: FilePath, content: str) -> None:
        """Writes content to a file asynchronously, overwriting if it exists.

        Args:
            file_path: The path to the file to write.
            content: The string content to write.

        Raises:
            OutputWriteError: If the file cannot be written.
        """
        pass
