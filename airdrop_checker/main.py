"""Main entry point for the airdrop checker.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines the CLI command, and delegates execution to the CommandHandler.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

# --- Core Layer ---
from airdrop_checker.core.command_handler import CommandHandler
from airdrop_checker.core.services.batch_service import BatchService

# --- Infrastructure Layer ---
# Config
from airdrop_checker.infrastructure.config.settings import (
    get_api_base_url, get_input_file, get_log_file, get_log_level, get_min_interval_seconds,
    get_output_file, get_request_timeout_seconds, get_throttle_backoff_seconds, load_configuration,
)
# UI
from airdrop_checker.infrastructure.cli.display import ConsoleDisplay
# FileSystem
from airdrop_checker.infrastructure.filesystem.local_fs import LocalFileSystem
# HTTP API
from airdrop_checker.infrastructure.api.airdrops_client import AirdropsApiClient
# Resilience
from airdrop_checker.infrastructure.resilience.rate_limiter import RateLimitedScheduler
from airdrop_checker.infrastructure.resilience.api_retry import RetryOrchestrator
# Monitoring
from airdrop_checker.infrastructure.monitoring.logger_setup import resolve_log_level, setup_logging

logger = logging.getLogger(__name__)

# --- Dependency Injection Container (Manual) ---

def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for one run.

    This acts as the Composition Root. The scheduler is created exactly once
    here and shared by reference; nothing else constructs one.
    """
    dependencies: Dict[str, Any] = {}

    # 1. Load Configuration First, then logging based on it
    load_configuration()
    setup_logging(log_level=resolve_log_level(get_log_level()), log_file=get_log_file())
    logger.info("Configuration and logging initialized.")

    # 2. Instantiate Infrastructure Adapters & Services
    dependencies['ui'] = ConsoleDisplay()
    dependencies['file_system'] = LocalFileSystem()
    dependencies['api'] = AirdropsApiClient(
        base_url=get_api_base_url(),
        timeout=get_request_timeout_seconds(),
    )
    dependencies['scheduler'] = RateLimitedScheduler(min_interval=get_min_interval_seconds())

    # 3. Instantiate Resilience Services
    dependencies['orchestrator'] = RetryOrchestrator(
        api=dependencies['api'],
        scheduler=dependencies['scheduler'],
        throttle_backoff_s=get_throttle_backoff_seconds(),
    )

    # 4. Instantiate Core Services (injecting dependencies)
    dependencies['batch_service'] = BatchService(
        orchestrator=dependencies['orchestrator'],
        file_system=dependencies['file_system'],
        ui=dependencies['ui'],
    )
    dependencies['command_handler'] = CommandHandler(
        batch_service=dependencies['batch_service'],
        api=dependencies['api'],
        ui=dependencies['ui'],
    )
    logger.info("All dependencies initialized successfully.")
    return dependencies

# --- Typer App Definition ---
app = typer.Typer(
    name="airdrop-checker",
    help="Check airdrop eligibility for a list of wallet addresses, one rate-limited request at a time.",
    add_completion=False,
)

@app.command()
def check(
    input_file: Annotated[
        Optional[str],
        typer.Option("--input", "-i", help="Address list, one wallet per line. Defaults to wallets.txt.")
    ] = None,
    output_file: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Result file, overwritten on every run. Defaults to result.csv.")
    ] = None,
):
    """Look up airdrops for every wallet in the input list and write the results."""
    dependencies = create_dependencies()
    handler: CommandHandler = dependencies['command_handler']
    exit_code = asyncio.run(handler.handle_check(
        input_file or get_input_file(),
        output_file or get_output_file(),
    ))
    if exit_code:
        raise typer.Exit(code=exit_code)

# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()

if __name__ == "__main__":
    cli_entry_point()
