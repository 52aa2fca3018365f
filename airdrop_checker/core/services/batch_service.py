"""Application service running one batch of wallet lookups.

Reads the address list, validates each line, drives every valid wallet
through the retry orchestrator one after another, collects the records of
successful wallets and finally writes the whole table as delimited text.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

# Domain Layer Imports
from airdrop_checker.domain.interfaces.filesystem import FileSystem, OutputWriteError
from airdrop_checker.domain.interfaces.user_interface import UserInterface
from airdrop_checker.domain.models.airdrop import ErrorKind, WalletState
from airdrop_checker.domain.models.common import FilePath, WalletAddress
from airdrop_checker.domain.models.result_table import HEADER, ResultTable
from airdrop_checker.domain.models.wallet import validate_address

# Infrastructure Layer Imports
from airdrop_checker.infrastructure.export.delimited_text import to_delimited_text
from airdrop_checker.infrastructure.resilience.api_retry import RetryOrchestrator

logger = logging.getLogger(__name__)

@dataclass
class BatchSummary:
    """Counts describing what one batch run did."""
    lines_read: int = 0
    invalid: int = 0
    succeeded: int = 0
    failed: int = 0
    records: int = 0
    output_path: Optional[str] = None
    output_written: bool = False
    errors: Dict[ErrorKind, int] = field(default_factory=dict)

    def count_error(self, kind: ErrorKind) -> None:
        """Tallies one error by kind; VALIDATION lines count as invalid, TERMINAL_REQUEST wallets as failed."""
        self.errors[kind] = self.errors.get(kind, 0) + 1
        if kind is ErrorKind.VALIDATION:
            self.invalid += 1
        elif kind is ErrorKind.TERMINAL_REQUEST:
            self.failed += 1


class BatchService:
    """Runs the single control loop over a fixed list of addresses."""

    def __init__(
        self,
        orchestrator: RetryOrchestrator,
        file_system: FileSystem,
        ui: UserInterface,
    ):
        self.orchestrator = orchestrator
        self.file_system = file_system
        self.ui = ui

    async def run(self, input_path: FilePath, output_path: FilePath) -> BatchSummary:
        """Processes every line of `input_path` and writes `output_path`.

        Raises:
            InputReadError: If the address list cannot be read. Nothing is
                written in that case.
        """
        summary = BatchSummary()
        lines = await self.file_system.read_lines(input_path)
        summary.lines_read = len(lines)
        if not lines:
            logger.info(f"No wallets found in {input_path}")
            self.ui.display_info("No wallets found")
            return summary

        logger.info(f"Loaded {len(lines)} lines from {input_path}")
        table = ResultTable()

        self.ui.start_progress(len(lines))
        try:
            for line_number, line in enumerate(lines, start=1):
                try:
                    if not line:
                        logger.warning(f"Skipping blank line {line_number}")
                        summary.count_error(ErrorKind.VALIDATION)
                        continue
                    if not validate_address(line):
                        logger.warning(f"Invalid Ethereum address: {line}")
                        summary.count_error(ErrorKind.VALIDATION)
                        continue

                    run = await self.orchestrator.process(WalletAddress(line))
                    if run.state is WalletState.SUCCEEDED:
                        summary.succeeded += 1
                        table.append_records(run.records)
                    else:
                        summary.count_error(ErrorKind.TERMINAL_REQUEST)
                finally:
                    self.ui.advance_progress()
        finally:
            self.ui.stop_progress()

        if summary.invalid:
            self.ui.display_warning(f"Skipped {summary.invalid} blank or invalid line(s) in {input_path}")

        summary.records = table.record_count
        summary.output_path = output_path
        logger.info(
            f"Batch finished: {summary.succeeded} succeeded, {summary.failed} failed, "
            f"{summary.invalid} skipped, {summary.records} records"
        )

        try:
            await self.file_system.write_file(output_path, to_delimited_text(table.rows))
            summary.output_written = True
            logger.info(f"File {output_path} is written successfully.")
            self.ui.display_info(f"File {output_path} is written successfully.")
        except OutputWriteError as e:
            logger.error(f"Error writing file {output_path}: {e}")
            self.ui.display_error(f"Error writing file {output_path}: {e}")

        self.ui.display_results(HEADER, table.data_rows)
        return summary
