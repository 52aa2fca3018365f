"""Domain Events related to API calls, pacing and retries.

Examples include events for when calls are deferred by the scheduler,
retried after throttling, fail, or succeed, and for every change of a
wallet's retry state.
"""

from dataclasses import dataclass, field
import time
from typing import Callable, Optional

# Base Event Class
@dataclass
class DomainEvent:
    """Base class for domain events."""
    pass

# Anything that accepts events (a list's append works fine in tests)
EventSink = Callable[[DomainEvent], None]

# --- Specific API Events ---

@dataclass
class ApiCallInitiated(DomainEvent):
    """Event triggered when an API call is about to be made."""
    wallet: str
    attempt_number: int
    timestamp: float = field(default_factory=time.time)

@dataclass
class ApiCallSucceeded(DomainEvent):
    """Event triggered when an API call succeeds."""
    wallet: str
    latency_ms: float
    record_count: int
    timestamp: float = field(default_factory=time.time)

@dataclass
class ApiCallFailed(DomainEvent):
    """Event triggered when a wallet lookup fails terminally."""
    wallet: str
    error_type: str
    error_message: str
    status_code: Optional[int] = None
    timestamp: float = field(default_factory=time.time)

@dataclass
class ApiCallDeferred(DomainEvent):
    """Event triggered when a queued call waits for the minimum interval."""
    key: str
    wait_time_seconds: float
    timestamp: float = field(default_factory=time.time)

@dataclass
class RetryScheduled(DomainEvent):
    """Event triggered when a throttled wallet is scheduled for another attempt."""
    wallet: str
    attempt_number: int
    delay_seconds: float
    timestamp: float = field(default_factory=time.time)

@dataclass
class WalletStateChanged(DomainEvent):
    """Event triggered on every transition of a wallet's retry state."""
    wallet: str
    previous_state: str
    new_state: str
    timestamp: float = field(default_factory=time.time)
