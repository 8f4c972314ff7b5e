"""Run configuration loading."""

from .loader import load_config, parse_config
from .models import ReportConfig, RunConfig

__all__ = [
    "ReportConfig",
    "RunConfig",
    "load_config",
    "parse_config",
]
