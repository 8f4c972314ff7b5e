"""Exception types raised outside the case boundary."""
from __future__ import annotations


class LivetestError(Exception):
    """Base class for livetest configuration and loading errors."""


class ConfigError(LivetestError, ValueError):
    """Raised when a run configuration file is malformed."""


class LoadError(LivetestError, ImportError):
    """Raised when a suite, subject or reporter path cannot be resolved."""
