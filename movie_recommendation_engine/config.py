"""Application configuration"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _get_config_value(key: str, default: str | None = None) -> str | None:
    """
    Get configuration value from environment or local.settings.json.

    Priority:
    1. Environment variable
    2. local.settings.json (Values.key)
    3. Default value

    Args:
        key: Configuration key name
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # Try environment variable first
    value = os.getenv(key)
    if value:
        return value

    # Try local.settings.json
    project_root = Path(__file__).resolve().parent.parent
    local_settings_path = project_root / "local.settings.json"

    if local_settings_path.exists():
        try:
            with open(local_settings_path) as f:
                settings = json.load(f)
                value = settings.get("Values", {}).get(key)
                if value:
                    return str(value)
        except (json.JSONDecodeError, AttributeError):
            logger.warning(f"Ignoring malformed {local_settings_path}")

    # Return default
    return default


def _get_number(key: str, default: float, cast=float, minimum: float | None = None):
    """Read a numeric setting, falling back to the default when it does not parse or is below minimum."""
    raw = _get_config_value(key)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Invalid value for {key}: {raw!r}, using default {default}")
        return default
    if minimum is not None and value < minimum:
        logger.warning(f"{key} must be at least {minimum}, got {value}, using default {default}")
        return default
    return value


def get_liked_threshold() -> int:
    """
    Minimum rating that counts as "liked".

    Returns:
        Threshold (default: 4)
    """
    return _get_number("LIKED_RATING_THRESHOLD", 4, cast=int)


def get_hybrid_weights() -> dict[str, float]:
    """
    Get the hybrid combiner weights per strategy.

    Returns:
        Dict with user_based, item_based and content_based weights
        (default: 0.4, 0.4, 0.2)
    """
    return {
        "user_based": _get_number("HYBRID_USER_WEIGHT", 0.4),
        "item_based": _get_number("HYBRID_ITEM_WEIGHT", 0.4),
        "content_based": _get_number("HYBRID_CONTENT_WEIGHT", 0.2),
    }


def get_hybrid_candidate_limit() -> int:
    """
    Number of results fetched from each strategy before merging.

    Returns:
        Candidate limit (default: 5)
    """
    return _get_number("HYBRID_CANDIDATE_LIMIT", 5, cast=int, minimum=1)


def get_default_limit() -> int:
    """
    Get the default number of recommendations returned per call.

    Returns:
        Default limit (default: 10)
    """
    return _get_number("DEFAULT_RECOMMENDATION_LIMIT", 10, cast=int, minimum=1)


def get_data_dir() -> Path:
    """
    Get the directory holding catalog and ratings files.

    Returns:
        Data directory (default: <project root>/data)
    """
    value = _get_config_value("DATA_DIR")
    if value:
        return Path(value)
    return Path(__file__).resolve().parent.parent / "data"
