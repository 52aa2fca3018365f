"""Append-only result table built from successful wallet lookups."""

import logging
from typing import Iterable, List, Tuple

from .airdrop import AirdropRecord

logger = logging.getLogger(__name__)

HEADER: Tuple[str, ...] = ("Wallet", "Token", "Amount", "ClaimURL")


class ResultTable:
    """Ordered rows with a fixed header; rows are only ever appended."""

    def __init__(self):
        self._rows: List[Tuple] = [HEADER]

    def append_records(self, records: Iterable[AirdropRecord]) -> int:
        """Appends one row per record in the given order.

        No deduplication is done across wallets or tokens.

        Returns:
            The number of rows appended.
        """
        added = 0
        for record in records:
            self._rows.append(tuple(record.to_row()))
            added += 1
        logger.debug(f"Appended {added} rows, table now holds {self.record_count} records")
        return added

    @property
    def rows(self) -> Tuple[Tuple, ...]:
        """Read-only snapshot of all rows, header first."""
        return tuple(self._rows)

    @property
    def data_rows(self) -> Tuple[Tuple, ...]:
        return tuple(self._rows[1:])

    @property
    def record_count(self) -> int:
        return len(self._rows) - 1

    def __len__(self) -> int:
        return len(self._rows)
