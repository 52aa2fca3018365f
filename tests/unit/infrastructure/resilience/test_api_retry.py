import asyncio
import math
import time

import pytest

from airdrop_checker.domain.events.api_events import (
    ApiCallFailed, ApiCallInitiated, ApiCallSucceeded, RetryScheduled, WalletStateChanged,
)
from airdrop_checker.domain.models.airdrop import AirdropRecord, FetchOutcome, WalletState
from airdrop_checker.infrastructure.resilience.api_retry import RetryOrchestrator
from airdrop_checker.infrastructure.resilience.rate_limiter import RateLimitedScheduler
from tests.conftest import WALLET_A, WALLET_B, ScriptedApi

BACKOFF = 0.05

P, IF, T, S, F = (WalletState.PENDING, WalletState.IN_FLIGHT, WalletState.THROTTLED,
                  WalletState.SUCCEEDED, WalletState.FAILED)


def _record(name):
    return AirdropRecord(wallet=WALLET_A, token_name=name, token_symbol=name[:3].upper(), amount=1, claim_url="u")


def _orchestrator(api, events=None, interval=0.01, backoff=BACKOFF):
    scheduler = RateLimitedScheduler(min_interval=interval)
    api.scheduler = scheduler
    sink = events.append if events is not None else None
    return RetryOrchestrator(api=api, scheduler=scheduler, throttle_backoff_s=backoff, event_sink=sink)


@pytest.mark.asyncio
async def test_success_on_first_attempt(events):
    records = [_record("alpha"), _record("beta")]
    api = ScriptedApi([FetchOutcome.succeeded(records)])
    orchestrator = _orchestrator(api, events)

    run = await orchestrator.process(WALLET_A)

    assert run.state is S
    assert run.history == [P, IF, S]
    assert run.attempts == 1
    assert run.records == records
    assert [type(e) for e in events if not isinstance(e, WalletStateChanged)] == [ApiCallInitiated, ApiCallSucceeded]
    assert events[-1].record_count == 2


@pytest.mark.asyncio
async def test_empty_result_is_a_success():
    api = ScriptedApi([FetchOutcome.succeeded([])])
    run = await _orchestrator(api).process(WALLET_A)

    assert run.state is S
    assert run.records == []
    assert run.last_error is None


@pytest.mark.asyncio
async def test_throttled_then_success_waits_fixed_backoff(events):
    api = ScriptedApi([
        FetchOutcome.throttled("Rate limited, will retry", status_code=429),
        FetchOutcome.throttled("Rate limited, will retry", status_code=429),
        FetchOutcome.succeeded([_record("alpha")]),
    ])
    orchestrator = _orchestrator(api, events)

    run = await orchestrator.process(WALLET_A)

    assert run.state is S
    assert run.history == [P, IF, T, P, IF, T, P, IF, S]
    assert run.attempts == 3
    assert run.throttle_count == 2
    starts = api.start_times
    assert all(later - earlier >= BACKOFF for earlier, later in zip(starts, starts[1:]))

    retries = [e for e in events if isinstance(e, RetryScheduled)]
    assert [e.attempt_number for e in retries] == [2, 3]
    assert all(e.delay_seconds == BACKOFF for e in retries)


@pytest.mark.asyncio
async def test_terminal_failure_is_not_retried(events):
    api = ScriptedApi([
        FetchOutcome.failed("Error fetching data for wallet: Internal Server Error", status_code=500),
        FetchOutcome.succeeded([_record("never")]),
    ])
    run = await _orchestrator(api, events).process(WALLET_A)

    assert run.state is F
    assert run.history == [P, IF, F]
    assert len(api.calls) == 1
    assert "Internal Server Error" in run.last_error
    failed = [e for e in events if isinstance(e, ApiCallFailed)]
    assert len(failed) == 1
    assert failed[0].status_code == 500
    assert failed[0].error_type == "terminal_request"


@pytest.mark.asyncio
async def test_unexpected_exception_fails_the_wallet_only(caplog):
    api = ScriptedApi([RuntimeError("socket exploded")])
    orchestrator = _orchestrator(api)

    run = await orchestrator.process(WALLET_A)

    assert run.state is F
    assert "socket exploded" in run.last_error
    assert any("Unexpected error fetching wallet" in r.message for r in caplog.records)


@pytest.mark.asyncio
async def test_state_change_events_mirror_history(events):
    api = ScriptedApi([FetchOutcome.throttled("slow"), FetchOutcome.succeeded([])])
    run = await _orchestrator(api, events).process(WALLET_A)

    changes = [(e.previous_state, e.new_state) for e in events if isinstance(e, WalletStateChanged)]
    expected = [(a.value, b.value) for a, b in zip(run.history, run.history[1:])]
    assert changes == expected


@pytest.mark.asyncio
async def test_permanent_throttling_retries_indefinitely(events):
    api = ScriptedApi([FetchOutcome.throttled("Rate limited, will retry", status_code=429)])
    orchestrator = _orchestrator(api, events, interval=0.005, backoff=BACKOFF)
    budget = 0.6

    started = time.monotonic()
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(orchestrator.process(WALLET_A), timeout=budget)
    elapsed = time.monotonic() - started

    reached = {e.new_state for e in events if isinstance(e, WalletStateChanged)}
    assert WalletState.SUCCEEDED.value not in reached
    assert WalletState.FAILED.value not in reached
    # One attempt per backoff period, allowing for event loop overhead
    assert len(api.calls) >= math.floor(elapsed / (BACKOFF * 1.5))
    starts = api.start_times
    assert all(later - earlier >= BACKOFF for earlier, later in zip(starts, starts[1:]))


@pytest.mark.asyncio
async def test_retries_keep_global_spacing_with_other_wallets():
    interval = 0.03
    scheduler = RateLimitedScheduler(min_interval=interval)
    starts = []

    class SharedApi(ScriptedApi):
        async def fetch_airdrops(self, wallet):
            starts.append(scheduler.last_start)
            return await super().fetch_airdrops(wallet)

    throttling = SharedApi([FetchOutcome.throttled("slow"), FetchOutcome.succeeded([])])
    steady = SharedApi([FetchOutcome.succeeded([])])
    first = RetryOrchestrator(api=throttling, scheduler=scheduler, throttle_backoff_s=0.01)
    second = RetryOrchestrator(api=steady, scheduler=scheduler, throttle_backoff_s=0.01)

    runs = await asyncio.gather(first.process(WALLET_A), second.process(WALLET_B))

    assert [r.state for r in runs] == [S, S]
    assert len(starts) == 3
    starts.sort()
    assert all(later - earlier >= interval for earlier, later in zip(starts, starts[1:]))
