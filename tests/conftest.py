import json
from typing import Callable, Dict, List, Optional

import httpx
import pytest
from typer.testing import CliRunner

from airdrop_checker.domain.interfaces.airdrop_api import AirdropApi
from airdrop_checker.domain.models.airdrop import FetchOutcome
from airdrop_checker.infrastructure.api.airdrops_client import AirdropsApiClient
from airdrop_checker.infrastructure.config.settings import clear_test_config

WALLET_A = "0x" + "a1" * 20
WALLET_B = "0x" + "B2" * 20
WALLET_C = "0x" + "3c" * 20


def airdrop_item(wallet: str, name: str = "Token", symbol: str = "TKN", amount=100, claim_url: str = "https://claim.example") -> Dict:
    """Builds one element of the API's success body."""
    return {
        "walletAddress": wallet,
        "Token": {"name": name, "symbol": symbol, "claimUrl": claim_url},
        "amount": amount,
    }


def mock_api_client(handler: Callable[[httpx.Request], httpx.Response]) -> AirdropsApiClient:
    """AirdropsApiClient whose requests are answered by `handler`."""
    return AirdropsApiClient(transport=httpx.MockTransport(handler))


def routes(responses: Dict[str, List[httpx.Response]]) -> Callable[[httpx.Request], httpx.Response]:
    """Handler replaying the listed responses per wallet, the last one repeating."""
    calls: Dict[str, int] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        wallet = request.url.path.rsplit("/", 1)[-1]
        index = calls.get(wallet, 0)
        calls[wallet] = index + 1
        scripted = responses[wallet]
        return scripted[min(index, len(scripted) - 1)]

    handler.calls = calls
    return handler


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"),
                          headers={"Content-Type": "application/json"})


class ScriptedApi(AirdropApi):
    """AirdropApi returning pre-scripted outcomes, the last one repeating."""

    def __init__(self, outcomes: List[FetchOutcome], scheduler=None):
        self.outcomes = outcomes
        self.scheduler = scheduler
        self.calls: List[str] = []
        self.start_times: List[Optional[float]] = []
        self.closed = False

    async def fetch_airdrops(self, wallet):
        index = len(self.calls)
        self.calls.append(wallet)
        if self.scheduler is not None:
            self.start_times.append(self.scheduler.last_start)
        outcome = self.outcomes[min(index, len(self.outcomes) - 1)]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def aclose(self):
        self.closed = True


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_test_config():
    """Keeps configuration overrides from leaking between tests."""
    clear_test_config()
    yield
    clear_test_config()


@pytest.fixture
def events():
    """A list usable as an event sink."""
    return []
