"""Interface for the airdrop eligibility API.

Implementations perform exactly one HTTP request per call and translate
the response into a tagged FetchOutcome. They never retry on their own;
pacing and retries belong to the scheduler and the retry orchestrator.
"""

import abc

from ..models.airdrop import FetchOutcome
from ..models.common import WalletAddress


class AirdropApi(abc.ABC):
    """Abstract Base Class for airdrop lookups."""

    @abc.abstractmethod
    async def fetch_airdrops(self, wallet: WalletAddress) -> FetchOutcome:
        """Looks up the airdrops of a single wallet.

        Args:
            wallet: A syntactically valid wallet address.

        Returns:
            SUCCEEDED with the parsed records (possibly none), THROTTLED when
            the API reports rate limiting, FAILED for anything else.
        """
        pass

    async def aclose(self) -> None:
        """Releases any underlying connections."""
        pass
