"""Wallet address validation."""

import re
from typing import Any

ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")


def validate_address(address: Any) -> bool:
    """Returns True iff `address` is `0x` followed by exactly 40 hex characters.

    Never raises; anything that is not a string is simply invalid.
    """
    if not isinstance(address, str):
        return False
    # fullmatch, so a trailing newline does not slip through like `$` would allow
    return ADDRESS_PATTERN.fullmatch(address) is not None
