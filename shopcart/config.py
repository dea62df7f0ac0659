"""
Environment-driven settings.

    CART_BASE_ADD_URL     base for catalog "add to cart" links (default "")
    CART_BASE_REMOVE_URL  base for cart "remove item" links (default "")
    CART_TOTALS_MODE      "legacy" or "strict" running-total behaviour
"""
import os
from dataclasses import dataclass
from typing import Optional

from shopcart.logging import get_logger

logger = get_logger(__name__)

TOTALS_MODES = ("legacy", "strict")
DEFAULT_TOTALS_MODE = "legacy"


@dataclass(frozen=True)
class Settings:
    """Link bases and cart totals behaviour."""
    base_add_url: str = ""
    base_remove_url: str = ""
    totals_mode: str = DEFAULT_TOTALS_MODE

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        mode = os.environ.get("CART_TOTALS_MODE", DEFAULT_TOTALS_MODE).strip().lower()
        if mode not in TOTALS_MODES:
            logger.warning(f"Unknown CART_TOTALS_MODE {mode!r}, falling back to {DEFAULT_TOTALS_MODE!r}")
            mode = DEFAULT_TOTALS_MODE
        return cls(
            base_add_url=os.environ.get("CART_BASE_ADD_URL", ""),
            base_remove_url=os.environ.get("CART_BASE_REMOVE_URL", ""),
            totals_mode=mode,
        )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get Settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
