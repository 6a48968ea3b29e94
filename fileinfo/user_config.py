"""
User configuration lookup.

Pipeline preferences are read from ~/.fileinfo/config.json, a file the user
edits by hand. Environment variables always take priority. Nothing stored
here changes how the result model renders values.
"""
import os
import json
import logging

from pathlib import Path
from typing import Optional, Dict, Any, List

logger = logging.getLogger("fileinfo")

CONFIG_DIR = Path.home() / ".fileinfo"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Maps config keys to their corresponding environment variable names
_ENV_VAR_MAP = {
    "log_level": "FILEINFO_LOG_LEVEL",
    "skip_analyses": "FILEINFO_SKIP_ANALYSES",
    "max_tls_callbacks": "FILEINFO_MAX_TLS_CALLBACKS",
    "min_string_length": "FILEINFO_MIN_STRING_LENGTH",
}


def load_user_config() -> Dict[str, Any]:
    """Read ~/.fileinfo/config.json and return its contents as a dict."""
    if not CONFIG_FILE.exists():
        return {}
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            logger.warning(f"User config at {CONFIG_FILE} is not a JSON object, ignoring.")
            return {}
        return data
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to read user config from {CONFIG_FILE}: {e}")
        return {}


def get_config_value(key: str) -> Optional[str]:
    """
    Retrieve a config value with environment variable priority.

    Resolution order:
      1. Environment variable (e.g. FILEINFO_LOG_LEVEL)
      2. ~/.fileinfo/config.json
      3. None
    """
    env_var = _ENV_VAR_MAP.get(key)
    if env_var:
        env_val = os.getenv(env_var)
        if env_val:
            return env_val

    config = load_user_config()
    val = config.get(key)
    return str(val) if val is not None else None


def get_skipped_analyses() -> List[str]:
    """Analyzer names listed in ``skip_analyses``, lower-cased."""
    raw = get_config_value("skip_analyses")
    if not raw:
        return []
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


def get_int_config_value(key: str, default: int) -> int:
    """Integer config value, falling back to *default* when unset or malformed."""
    raw = get_config_value(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Config key '{key}' is not an integer ({raw!r}), using {default}.")
        return default
