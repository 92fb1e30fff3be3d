"""Settings loaded from config.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


class DiceSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    strict: bool = False
    max_rolls: int = Field(default=100, ge=1)
    max_dice: int = Field(default=1000, ge=1)
    max_sides: int = Field(default=1000, ge=1)


def _load_config(path: Path) -> dict[str, Any]:
    if path.exists():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def load_settings(path: Optional[Path] = None) -> DiceSettings:
    """Read the [dice] table of a config file into DiceSettings.

    A missing file or missing keys fall back to the model defaults.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH
    config = _load_config(config_path)
    settings = DiceSettings(**config.get("dice", {}))
    logger.debug("Loaded dice settings from %s: %s", config_path, settings)
    return settings


_settings: DiceSettings | None = None


def get_settings() -> DiceSettings:
    """Return the project settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
