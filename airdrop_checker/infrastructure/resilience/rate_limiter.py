"""Implementation of a rate-limited request scheduler.

Controls the frequency of outgoing requests to stay under the API's rate
limit. Calls run one at a time, in submission order, and the start of each
call is at least `min_interval` seconds after the start of the previous one,
regardless of which wallet submitted it.
"""

import asyncio
import logging
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Deque, Optional, Tuple

from airdrop_checker.domain.events.api_events import ApiCallDeferred, DomainEvent, EventSink
from airdrop_checker.domain.models.common import TicketKey

logger = logging.getLogger(__name__)

DEFAULT_MIN_INTERVAL_SECONDS = 2.001


def _log_event(event: DomainEvent) -> None:
    logger.debug(f"EVENT: {event}")


@dataclass(eq=False)
class SchedulerTicket:
    """One queued call waiting for its turn."""
    key: TicketKey
    submitted_at: float = field(default_factory=time.monotonic)
    started_at: Optional[float] = None


class RateLimitedScheduler:
    """Single-lane scheduler with a fixed minimum spacing between call starts."""

    def __init__(
        self,
        min_interval: float = DEFAULT_MIN_INTERVAL_SECONDS,
        event_sink: Optional[EventSink] = None,
    ):
        """Initializes the scheduler.

        Args:
            min_interval: Minimum seconds between the starts of two calls.
            event_sink: Optional callable receiving ApiCallDeferred events.
        """
        if min_interval <= 0:
            raise ValueError(f"min_interval must be positive, got {min_interval}")
        self.min_interval = min_interval
        self._event_sink = event_sink or _log_event
        self._tickets: Deque[SchedulerTicket] = deque()
        # Created on first use so it belongs to the loop that runs the batch
        self._lock: Optional[asyncio.Lock] = None
        self._last_start: Optional[float] = None
        logger.info(f"RateLimitedScheduler initialized: min_interval={min_interval:.3f}s")

    @property
    def pending_tickets(self) -> Tuple[SchedulerTicket, ...]:
        """Tickets submitted but not yet settled, oldest first."""
        return tuple(self._tickets)

    @property
    def last_start(self) -> Optional[float]:
        """Monotonic start time of the most recent call, None before the first."""
        return self._last_start

    def _remaining_wait(self) -> float:
        if self._last_start is None:
            return 0.0
        return max(0.0, self._last_start + self.min_interval - time.monotonic())

    async def get_wait_time(self) -> float:
        """Estimates the time needed before the next call may start."""
        return self._remaining_wait()

    async def _wait_for_slot(self, ticket: SchedulerTicket) -> None:
        wait_time = self._remaining_wait()
        if wait_time > 0:
            logger.debug(f"Ticket {ticket.key} waiting {wait_time:.3f}s for the minimum interval.")
            self._event_sink(ApiCallDeferred(key=ticket.key, wait_time_seconds=wait_time))
        # Loop since the event loop timer may fire marginally early
        while wait_time > 0:
            await asyncio.sleep(wait_time)
            wait_time = self._remaining_wait()

    async def schedule(self, task: Callable[[], Awaitable[Any]], key: str) -> Any:
        """Runs `task` once its turn comes and returns whatever it returns.

        The scheduler never retries. A throttled outcome returned by the task
        is handed back to the caller as is, and any exception raised by the
        task propagates unchanged.

        Args:
            task: Zero-argument coroutine function performing one call.
            key: Identity of the submitter (the wallet address).
        """
        if self._lock is None:
            # asyncio.Lock wakes waiters in acquisition order, which gives FIFO tickets
            self._lock = asyncio.Lock()
        ticket = SchedulerTicket(key=TicketKey(key))
        self._tickets.append(ticket)
        try:
            async with self._lock:
                await self._wait_for_slot(ticket)
                ticket.started_at = time.monotonic()
                self._last_start = ticket.started_at
                logger.debug(f"Ticket {ticket.key} started after {ticket.started_at - ticket.submitted_at:.3f}s in queue.")
                return await task()
        finally:
            self._tickets.remove(ticket)
