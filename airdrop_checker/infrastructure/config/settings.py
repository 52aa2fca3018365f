"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and an optional
YAML configuration file (~/.airdrop_checker/config.yaml). With nothing
configured every setting falls back to its built-in default.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Dict

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".airdrop_checker"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"

DEFAULTS: Dict[str, Any] = {
    'airdrop_api_base_url': "https://airdrops.fyi/backend/airdrops/",
    'airdrop_min_interval_ms': 2001,
    'airdrop_throttle_backoff_ms': 3000,
    'airdrop_request_timeout_s': 30,
    'airdrop_input_file': "wallets.txt",
    'airdrop_output_file': "result.csv",
    'airdrop_log_level': "INFO",
    'airdrop_log_file': None,
}

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False

def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Built-in defaults

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. Load from YAML file (Lowest priority)
    if config_file.exists():
        try:
            with open(config_file, 'r') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(yaml_config)
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. Load from .env file (Medium priority)
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        # override=False: real environment variables take precedence
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("No .env file found at or above current directory.")

    # 3. Environment Variables (Highest priority) are handled in get_config

    _loaded = True
    logger.debug("Configuration loading process completed.")

def _coerce(value: str) -> Any:
    if value.lower() == 'true':
        return True
    elif value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except (ValueError, TypeError):
        return value

def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by key.

    Priority:
    1. Test configuration (if in testing mode)
    2. Environment variable (the key uppercased)
    3. YAML config
    4. Default value

    Args:
        key: The configuration key
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = key.upper()
    if env_key in os.environ:
        return _coerce(os.environ[env_key])

    if key in _config:
        return _config[key]

    return default

def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None

def _setting(key: str) -> Any:
    return get_config(key, DEFAULTS[key])

# --- Convenience Functions ---

def get_api_base_url() -> str:
    return str(_setting('airdrop_api_base_url'))

def get_min_interval_seconds() -> float:
    """Minimum spacing between request starts, in seconds."""
    return float(_setting('airdrop_min_interval_ms')) / 1000.0

def get_throttle_backoff_seconds() -> float:
    """Fixed delay before a throttled wallet is resubmitted, in seconds."""
    return float(_setting('airdrop_throttle_backoff_ms')) / 1000.0

def get_request_timeout_seconds() -> float:
    return float(_setting('airdrop_request_timeout_s'))

def get_input_file() -> str:
    return str(_setting('airdrop_input_file'))

def get_output_file() -> str:
    return str(_setting('airdrop_output_file'))

def get_log_level() -> str:
    return str(_setting('airdrop_log_level'))

def get_log_file() -> Optional[str]:
    log_file = _setting('airdrop_log_file')
    return str(log_file) if log_file else None

def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")

def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
