"""Main entry point when executing airdrop_checker as a package.

This allows running the package using python -m airdrop_checker.
"""

from airdrop_checker.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
