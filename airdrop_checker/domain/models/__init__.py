"""Domain models: wallets, airdrop records, fetch outcomes and the result table."""
