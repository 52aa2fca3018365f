"""Command Handler: Orchestrates CLI command execution.

Receives the command from the main entry point (main.py), delegates the
work to the BatchService and maps the outcome to user-facing messages and
a process exit code.
"""

import logging

# Core Services Imports
from airdrop_checker.core.services.batch_service import BatchService, BatchSummary

# Domain Layer Imports
from airdrop_checker.domain.interfaces.airdrop_api import AirdropApi
from airdrop_checker.domain.interfaces.filesystem import InputReadError
from airdrop_checker.domain.interfaces.user_interface import UserInterface
from airdrop_checker.domain.models.common import FilePath

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1

class CommandHandler:
    """Handles incoming commands and delegates to the batch service."""

    def __init__(
        self,
        batch_service: BatchService,
        api: AirdropApi,
        ui: UserInterface,
    ):
        """Initializes the CommandHandler with required services."""
        self.batch_service = batch_service
        self.api = api
        self.ui = ui
        self.last_summary: BatchSummary = BatchSummary()

    async def handle_check(self, input_path: str, output_path: str) -> int:
        """Handles the airdrop check over the address list in `input_path`.

        Per-wallet failures never change the exit code; only an unreadable
        address list does.
        """
        logger.info(f"Handling airdrop check: input={input_path}, output={output_path}")
        try:
            self.last_summary = await self.batch_service.run(FilePath(input_path), FilePath(output_path))
        except InputReadError as e:
            logger.error(f"Cannot read wallet list: {e}")
            self.ui.display_error(f"Cannot read wallet list: {e}")
            return EXIT_INPUT_ERROR
        finally:
            await self.api.aclose()
        return EXIT_OK
