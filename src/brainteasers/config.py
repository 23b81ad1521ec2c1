"""
Lab Configuration.

Display limits and color settings for execution reports.
All values configurable via BRAINTEASERS_* environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from brainteasers.exceptions import ConfigError


DEFAULT_MAX_COLLECTION_ITEMS = 10   # Elements shown for non-array collections
DEFAULT_MAX_TRACE_LINES = 3         # Stack trace lines shown on failure


def _env_int(key: str, default: int) -> int:
    """Read integer from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_tristate(key: str) -> Optional[bool]:
    """Read true/false/auto from environment variable (auto -> None)."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes", "always"):
        return True
    if value in ("false", "0", "no", "never"):
        return False
    return None


@dataclass
class LabConfig:
    """
    Execution report configuration.

    Environment Variables:
        BRAINTEASERS_MAX_COLLECTION_ITEMS: Elements rendered before "..." (default: 10)
        BRAINTEASERS_MAX_TRACE_LINES: Stack trace lines rendered (default: 3)
        BRAINTEASERS_COLOR: "true", "false" or "auto" (default: auto)
    """

    max_collection_items: int = field(default_factory=lambda: _env_int(
        "BRAINTEASERS_MAX_COLLECTION_ITEMS", DEFAULT_MAX_COLLECTION_ITEMS
    ))
    max_trace_lines: int = field(default_factory=lambda: _env_int(
        "BRAINTEASERS_MAX_TRACE_LINES", DEFAULT_MAX_TRACE_LINES
    ))

    # None means auto-detect (color only when writing to a terminal)
    color: Optional[bool] = field(default_factory=lambda: _env_tristate(
        "BRAINTEASERS_COLOR"
    ))

    def __post_init__(self) -> None:
        if self.max_collection_items < 1:
            raise ConfigError(
                "max_collection_items", self.max_collection_items, "Must be at least 1."
            )
        if self.max_trace_lines < 0:
            raise ConfigError(
                "max_trace_lines", self.max_trace_lines, "Must not be negative."
            )

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "max_collection_items": self.max_collection_items,
            "max_trace_lines": self.max_trace_lines,
            "color": "auto" if self.color is None else self.color,
        }


# Global instance for convenience
_default_config: Optional[LabConfig] = None


def get_lab_config() -> LabConfig:
    """Get the global lab configuration."""
    global _default_config
    if _default_config is None:
        _default_config = LabConfig()
    return _default_config


def reset_lab_config() -> None:
    """Reset global config (useful after env var changes or for testing)."""
    global _default_config
    _default_config = None
