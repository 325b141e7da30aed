"""
Scanner Configuration
=====================

Settings for the run scanner and the ``peekscan`` tool. Configuration can
come from:
- Default values (defined here)
- Environment variables (ScanConfig.from_env)
- Command-line flags, which override both

Environment variables (all optional):
    PEEKCURSOR_ENCODING: Text encoding used to read input files
    PEEKCURSOR_MAX_RUNS: Stop after this many runs (0 = no limit)
    PEEKCURSOR_SHOW_WHITESPACE: "1"/"true"/"yes"/"on" to report whitespace runs

Copyright (c) 2025-2026 peekcursor contributors
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ScanConfig:
    """
    Configuration for scanning text into runs.

    Attributes:
        encoding: Codec used to decode input files (default: "utf-8")
        show_whitespace: Report WHITESPACE runs (default: False)
        max_runs: Maximum runs to report, 0 for all (default: 0)
    """

    encoding: str = "utf-8"
    show_whitespace: bool = False
    max_runs: int = 0

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """
        Create ScanConfig from environment variables.

        Invalid values are logged and ignored.

        Returns:
            ScanConfig with values from environment variables
        """
        config = cls()

        if encoding := os.environ.get("PEEKCURSOR_ENCODING"):
            config.encoding = encoding

        if max_runs := os.environ.get("PEEKCURSOR_MAX_RUNS"):
            try:
                value = int(max_runs)
            except ValueError:
                logger.warning(f"Ignoring PEEKCURSOR_MAX_RUNS={max_runs!r}: not an integer")
            else:
                if value >= 0:
                    config.max_runs = value
                else:
                    logger.warning(f"Ignoring PEEKCURSOR_MAX_RUNS={max_runs!r}: negative")

        if show_whitespace := os.environ.get("PEEKCURSOR_SHOW_WHITESPACE"):
            config.show_whitespace = show_whitespace.strip().lower() in _TRUE_VALUES

        return config


# Global default configuration (can be overridden in tests)
_default_config: Optional[ScanConfig] = None


def get_default_config() -> ScanConfig:
    """
    Get the default scan configuration.

    Creates from environment variables on first access.
    Can be overridden by calling set_default_config().
    """
    global _default_config
    if _default_config is None:
        _default_config = ScanConfig.from_env()
    return _default_config


def set_default_config(config: Optional[ScanConfig]) -> None:
    """
    Set the default scan configuration.

    Passing None makes the next get_default_config() re-read the environment.
    """
    global _default_config
    _default_config = config
