# Area: Shared
"""
salad_bowl._config — Configuration loading
==========================================

Merges an optional JSON config file with environment variable
overrides and validates the result into ``GameSettings``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from .errors import SettingsError
from .settings import GameSettings

logger = logging.getLogger("salad_bowl")

# Environment variable -> config key
ENV_MAPPINGS = {
    "SALAD_BOWL_PLAYERS": "players",
    "SALAD_BOWL_TIMER_SECONDS": "timer_seconds",
    "SALAD_BOWL_PICKS_PER_PLAYER": "picks_per_player",
    "SALAD_BOWL_CANDIDATES_PER_PLAYER": "candidates_per_player",
    "SALAD_BOWL_MANUAL_WORDS_PER_PLAYER": "manual_words_per_player",
    "SALAD_BOWL_STARTING_TEAM": "starting_team",
    "SALAD_BOWL_LOG_FILE": "log_file",
    "SALAD_BOWL_SEED": "seed",
}

INT_KEYS = {
    "players",
    "timer_seconds",
    "picks_per_player",
    "candidates_per_player",
    "manual_words_per_player",
    "seed",
}

# Keys consumed by the runner, not by GameSettings
RUNNER_KEYS = {"log_file", "seed", "demo_mode"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from file, then apply environment overrides.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        Merged config dict (not yet validated)

    Raises:
        SettingsError: If an integer environment variable does not parse
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            logger.warning("Config file not found: %s", config_path)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in INT_KEYS:
                try:
                    value = int(value)
                except ValueError as e:
                    raise SettingsError(
                        [f"{env_key}: not an integer ({value!r})"],
                        config=config,
                    ) from e
            config[config_key] = value

    return config


def build_settings(config: Dict[str, Any]) -> GameSettings:
    """
    Validate a config dict into GameSettings.

    Raises:
        SettingsError: If any value fails validation
    """
    settings_input = {k: v for k, v in config.items() if k not in RUNNER_KEYS}
    try:
        return GameSettings.model_validate(settings_input)
    except PydanticValidationError as e:
        messages = [
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        ]
        raise SettingsError(messages, config=settings_input) from e
