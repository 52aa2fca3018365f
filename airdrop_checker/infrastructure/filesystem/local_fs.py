"""Concrete implementation of the FileSystem interface for the local disk.

Uses `pathlib` for paths and `aiofiles` for async I/O.
"""

import logging
import re
from pathlib import Path
from typing import List

import aiofiles

# Domain Layer Imports
from airdrop_checker.domain.interfaces.filesystem import FileSystem, InputReadError, OutputWriteError
from airdrop_checker.domain.models.common import FilePath

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r?\n")

class LocalFileSystem(FileSystem):
    """Implementation of FileSystem for the local disk."""

    def __init__(self):
        """Initializes the LocalFileSystem adapter."""
        logger.info("LocalFileSystem initialized.")

    async def read_lines(self, file_path: FilePath) -> List[str]:
        """Reads the file asynchronously and splits it into stripped lines."""
        path = Path(file_path)
        logger.debug(f"Attempting to read file: {path}")
        try:
            async with aiofiles.open(path, mode='r', encoding='utf-8', newline='') as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file {path}: {e}")
            raise InputReadError(f"Failed to read file {file_path}: {e}") from e

        # Only LF and CRLF separate lines; a final line break ends the last line
        raw_lines = LINE_BREAK.split(content)
        if raw_lines[-1] == "":
            raw_lines.pop()
        lines = [line.strip() for line in raw_lines]
        logger.debug(f"Read {len(lines)} lines from {path}")
        return lines

    async def write_file(self, file_path: FilePath, content: str) -> None:
        """Writes content to a file asynchronously, overwriting it."""
        path = Path(file_path)
        logger.debug(f"Attempting to write {len(content)} characters to file: {path}")
        try:
            # Ensure parent directory exists
            path.parent.mkdir(parents=True, exist_ok=True)
            # newline='' keeps the "\n" row separators as written on every platform
            async with aiofiles.open(path, mode='w', encoding='utf-8', newline='') as f:
                await f.write(content)
            logger.debug(f"Successfully wrote to {path}")
        except OSError as e:
            logger.error(f"Error writing file {path}: {e}", exc_info=True)
            raise OutputWriteError(f"Failed to write file {file_path}: {e}") from e
