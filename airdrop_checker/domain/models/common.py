"""Defines common Value Objects used across different domain contexts.

These objects represent simple values like wallet addresses, file paths
and rendered output, keeping signatures readable across layers.
"""

from typing import List, NewType, Sequence, Any

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are strings at runtime.
WalletAddress = NewType("WalletAddress", str)   # 0x + 40 hex characters
FilePath = NewType("FilePath", str)             # Path to an input or output file
DelimitedText = NewType("DelimitedText", str)   # Rendered result table

# === Result Table Context ===
TableRow = List[Any]                    # One row of the result table
TableRows = Sequence[Sequence[Any]]     # Read-only view of a whole table

# === Scheduling Context ===
TicketKey = NewType("TicketKey", str)   # Identity of a queued call (the wallet)


def format_value(value: Any) -> str:
    """Spells a JSON-decoded value the way existing result files do.

    null and booleans keep their JSON spelling, and whole-number floats are
    written without a trailing ".0" (100.0 becomes "100").
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
