"""Airdrop checker: looks up airdrop eligibility for a list of wallets."""

__version__ = "0.1.0"
