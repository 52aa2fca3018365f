"""Domain models for airdrop lookups.

Covers the parsed API records, the tagged outcome of a single API call and
the per-wallet retry state machine.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .common import TableRow, WalletAddress, format_value


class ErrorKind(enum.Enum):
    """Classifies every error the batch can run into."""
    VALIDATION = "validation"              # malformed address, skipped
    THROTTLE = "throttle"                  # rate limited, drives a retry
    TERMINAL_REQUEST = "terminal_request"  # bad status, transport or parse failure
    INPUT_READ = "input_read"              # address list unreadable, fatal


class OutcomeKind(enum.Enum):
    """Tag of a single API call result."""
    SUCCEEDED = "succeeded"
    THROTTLED = "throttled"
    FAILED = "failed"


class WalletState(enum.Enum):
    """States of the per-wallet retry state machine."""
    PENDING = "pending"
    IN_FLIGHT = "in_flight"
    THROTTLED = "throttled"   # transient, always followed by PENDING
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (WalletState.SUCCEEDED, WalletState.FAILED)


@dataclass(frozen=True)
class AirdropRecord:
    """One airdrop entry returned by the API for a wallet."""
    wallet: str
    token_name: str
    token_symbol: str
    amount: Any
    claim_url: str

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "AirdropRecord":
        """Builds a record from one element of the API response array.

        Raises:
            KeyError, TypeError: If the element does not have the expected shape.
        """
        token = item["Token"]
        return cls(
            wallet=item["walletAddress"],
            token_name=token["name"],
            token_symbol=token["symbol"],
            amount=item["amount"],
            claim_url=token["claimUrl"],
        )

    def to_row(self) -> TableRow:
        """Projects the record onto the Wallet, Token, Amount, ClaimURL columns."""
        return [
            self.wallet,
            f"{format_value(self.token_name)} ({format_value(self.token_symbol)})",
            self.amount,
            self.claim_url,
        ]


@dataclass(frozen=True)
class FetchOutcome:
    """Tagged result of one API call.

    Callers branch on `kind`; `records` is only meaningful for SUCCEEDED and
    `error` only for THROTTLED and FAILED.
    """
    kind: OutcomeKind
    records: List[AirdropRecord] = field(default_factory=list)
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def succeeded(cls, records: List[AirdropRecord], status_code: Optional[int] = None) -> "FetchOutcome":
        return cls(kind=OutcomeKind.SUCCEEDED, records=list(records), status_code=status_code)

    @classmethod
    def throttled(cls, error: str, status_code: Optional[int] = None) -> "FetchOutcome":
        return cls(kind=OutcomeKind.THROTTLED, error=error, status_code=status_code)

    @classmethod
    def failed(cls, error: str, status_code: Optional[int] = None) -> "FetchOutcome":
        return cls(kind=OutcomeKind.FAILED, error=error, status_code=status_code)

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        if self.kind is OutcomeKind.THROTTLED:
            return ErrorKind.THROTTLE
        if self.kind is OutcomeKind.FAILED:
            return ErrorKind.TERMINAL_REQUEST
        return None


@dataclass
class WalletRun:
    """Observable progress of one wallet through the retry state machine."""
    wallet: WalletAddress
    state: WalletState = WalletState.PENDING
    attempts: int = 0
    history: List[WalletState] = field(default_factory=lambda: [WalletState.PENDING])
    records: List[AirdropRecord] = field(default_factory=list)
    last_error: Optional[str] = None

    def transition(self, new_state: WalletState) -> WalletState:
        """Moves to `new_state`, returning the previous state."""
        previous = self.state
        self.state = new_state
        self.history.append(new_state)
        return previous

    @property
    def throttle_count(self) -> int:
        return self.history.count(WalletState.THROTTLED)
