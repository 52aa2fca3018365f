"""Service driving each wallet lookup through the scheduler with retries.

Implements the per-wallet state machine:

    PENDING -> IN_FLIGHT -> SUCCEEDED
                         -> FAILED
                         -> THROTTLED -> (fixed backoff) -> PENDING -> ...

Throttled wallets are resubmitted after a fixed delay with no attempt cap and
no backoff growth. A wallet stuck behind a permanently throttling API keeps
retrying forever; that is the intended policy.
"""

import asyncio
import logging
import time
from typing import Optional

from airdrop_checker.domain.events.api_events import (
    ApiCallFailed, ApiCallInitiated, ApiCallSucceeded, DomainEvent,
    EventSink, RetryScheduled, WalletStateChanged,
)
from airdrop_checker.domain.interfaces.airdrop_api import AirdropApi
from airdrop_checker.domain.models.airdrop import FetchOutcome, OutcomeKind, WalletRun, WalletState
from airdrop_checker.domain.models.common import WalletAddress
from airdrop_checker.infrastructure.resilience.rate_limiter import RateLimitedScheduler

logger = logging.getLogger(__name__)

DEFAULT_THROTTLE_BACKOFF_SECONDS = 3.0


def _log_event(event: DomainEvent) -> None:
    logger.debug(f"EVENT: {event}")


class RetryOrchestrator:
    """Runs wallet lookups through a shared scheduler and decides on retries."""

    def __init__(
        self,
        api: AirdropApi,
        scheduler: RateLimitedScheduler,
        throttle_backoff_s: float = DEFAULT_THROTTLE_BACKOFF_SECONDS,
        event_sink: Optional[EventSink] = None,
    ):
        """Initializes the RetryOrchestrator.

        Args:
            api: The airdrop API adapter performing single requests.
            scheduler: The scheduler shared by every wallet of the batch.
            throttle_backoff_s: Fixed delay before resubmitting a throttled wallet.
            event_sink: Optional callable receiving domain events.
        """
        self.api = api
        self.scheduler = scheduler
        self.throttle_backoff_s = throttle_backoff_s
        self._event_sink = event_sink or _log_event

        logger.info(
            f"RetryOrchestrator initialized: throttle_backoff={throttle_backoff_s}s, "
            f"min_interval={scheduler.min_interval}s, retry cap=none"
        )

    def _transition(self, run: WalletRun, new_state: WalletState) -> None:
        previous = run.transition(new_state)
        logger.debug(f"Wallet {run.wallet}: {previous.value} -> {new_state.value}")
        self._event_sink(WalletStateChanged(wallet=run.wallet, previous_state=previous.value, new_state=new_state.value))

    async def _attempt(self, run: WalletRun) -> FetchOutcome:
        """Submits one attempt to the scheduler and returns its tagged outcome."""
        run.attempts += 1
        attempt_number = run.attempts

        async def task() -> FetchOutcome:
            # Runs only once the scheduler grants the slot
            self._transition(run, WalletState.IN_FLIGHT)
            self._event_sink(ApiCallInitiated(wallet=run.wallet, attempt_number=attempt_number))
            return await self.api.fetch_airdrops(run.wallet)

        try:
            return await self.scheduler.schedule(task, key=run.wallet)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # Errors escaping the adapter are terminal for this wallet only
            logger.error(f"Unexpected error fetching wallet {run.wallet}: {e}", exc_info=True)
            return FetchOutcome.failed(f"{type(e).__name__}: {e}")

    async def process(self, wallet: WalletAddress) -> WalletRun:
        """Drives one wallet until it succeeds or fails terminally.

        Never raises for per-wallet errors; the outcome is reported on the
        returned WalletRun. Does not return while the API keeps throttling.
        """
        run = WalletRun(wallet=wallet)

        while not run.state.is_terminal:
            start_time = time.perf_counter()
            outcome = await self._attempt(run)
            latency_ms = (time.perf_counter() - start_time) * 1000

            if outcome.kind is OutcomeKind.SUCCEEDED:
                run.records = list(outcome.records)
                self._transition(run, WalletState.SUCCEEDED)
                logger.info(f"Wallet {wallet}: {len(run.records)} airdrop(s) found on attempt {run.attempts}")
                self._event_sink(ApiCallSucceeded(wallet=wallet, latency_ms=latency_ms, record_count=len(run.records)))

            elif outcome.kind is OutcomeKind.THROTTLED:
                run.last_error = outcome.error
                self._transition(run, WalletState.THROTTLED)
                logger.warning(
                    f"Failed due to rate limiting, will retry. Wallet {wallet}: {outcome.error}. "
                    f"Waiting {self.throttle_backoff_s:.2f}s..."
                )
                self._event_sink(RetryScheduled(wallet=wallet, attempt_number=run.attempts + 1, delay_seconds=self.throttle_backoff_s))
                await asyncio.sleep(self.throttle_backoff_s)
                self._transition(run, WalletState.PENDING)

            else:
                run.last_error = outcome.error
                self._transition(run, WalletState.FAILED)
                logger.error(f"Failed to fetch or parse data for wallet {wallet}: {outcome.error}")
                self._event_sink(ApiCallFailed(
                    wallet=wallet,
                    error_type=outcome.error_kind.value if outcome.error_kind else "unknown",
                    error_message=outcome.error or "",
                    status_code=outcome.status_code,
                ))

        return run
