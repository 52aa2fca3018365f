"""Interface for interacting with the user (output only).

Defines the contract for displaying information, errors, warnings,
batch progress and the final results table, allowing different UI
implementations (e.g., console, GUI).
"""

import abc
from typing import Any, Sequence

# Import relevant domain models
from ..models.common import TableRows


class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user.

        Args:
            info_message: The informational message string.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user.

        Args:
            warning_message: The warning message string.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user.

        Args:
            error_message: The error message string.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_results(self, header: Sequence[str], rows: TableRows) -> None:
        """Displays the collected airdrop rows as a table.

        Args:
            header: Column names.
            rows: Data rows, header excluded.
        """
        pass

    def start_progress(self, total: int) -> None:
        """Starts a progress indicator over `total` input lines."""
        pass

    def advance_progress(self, steps: int = 1) -> None:
        """Advances the progress indicator."""
        pass

    def stop_progress(self) -> None:
        """Stops and removes the progress indicator."""
        pass
