"""Concrete implementation of the AirdropApi interface over HTTP.

Hides the specifics of httpx and translates responses of
`GET {base_url}{walletAddress}` into tagged FetchOutcome values.
"""

import logging
from typing import Any, List, Optional

import httpx

# Domain Layer Imports
from airdrop_checker.domain.interfaces.airdrop_api import AirdropApi
from airdrop_checker.domain.models.airdrop import AirdropRecord, FetchOutcome
from airdrop_checker.domain.models.common import WalletAddress

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://airdrops.fyi/backend/airdrops/"
DEFAULT_TIMEOUT_SECONDS = 30.0
THROTTLE_REASON = "Too Many Requests"


def is_throttle_response(response: httpx.Response) -> bool:
    """True when the API reports that the caller exceeded its request rate."""
    return response.status_code == httpx.codes.TOO_MANY_REQUESTS or response.reason_phrase == THROTTLE_REASON


def parse_airdrops(payload: Any) -> List[AirdropRecord]:
    """Parses a success body into records, keeping the API's order.

    Raises:
        ValueError: If the body is not a JSON array of airdrop objects.
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
    records = []
    for index, item in enumerate(payload):
        try:
            records.append(AirdropRecord.from_api(item))
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed airdrop entry at index {index}: {e!r}") from e
    return records


class AirdropsApiClient(AirdropApi):
    """httpx implementation of the AirdropApi interface."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initializes the API client.

        Args:
            base_url: URL prefix the wallet address is appended to.
            timeout: Per-request timeout in seconds.
            client: Pre-built httpx client, used as is.
            transport: Transport for the default client (e.g. a mock transport).
        """
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        # 3xx responses are followed to the final body
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport)
        logger.info(f"AirdropsApiClient initialized for: {self.base_url}")

    async def fetch_airdrops(self, wallet: WalletAddress) -> FetchOutcome:
        url = f"{self.base_url}{wallet}"
        logger.debug(f"GET {url}")
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.debug(f"Transport error for {wallet}: {e!r}")
            return FetchOutcome.failed(f"{type(e).__name__}: {e}")

        if not response.is_success:
            if is_throttle_response(response):
                return FetchOutcome.throttled("Rate limited, will retry", status_code=response.status_code)
            return FetchOutcome.failed(
                f"Error fetching data for wallet {wallet}: {response.reason_phrase or response.status_code}",
                status_code=response.status_code,
            )

        try:
            records = parse_airdrops(response.json())
        except ValueError as e:
            # json.JSONDecodeError is a ValueError as well
            return FetchOutcome.failed(f"Invalid response body: {e}", status_code=response.status_code)

        logger.debug(f"Parsed {len(records)} airdrop(s) for {wallet}")
        return FetchOutcome.succeeded(records, status_code=response.status_code)

    async def aclose(self) -> None:
        await self._client.aclose()
