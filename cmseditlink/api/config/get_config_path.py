"""Get path to the cmseditlink config file."""

import os
from pathlib import Path

CONFIG_ENV_VAR = "CMSEDITLINK_CONFIG"
DEFAULT_CONFIG_FILENAME = "cmseditlink.json"


def get_config_path() -> Path:
    """Get config path from CMSEDITLINK_CONFIG, or default to ./cmseditlink.json."""
    config_env = os.environ.get(CONFIG_ENV_VAR)
    if config_env:
        return Path(config_env).expanduser().resolve()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME
