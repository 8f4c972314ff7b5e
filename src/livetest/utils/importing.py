"""Utility helpers for dynamic imports."""
from __future__ import annotations

import importlib
from typing import Any

from livetest.errors import LoadError


def import_string(path: str) -> Any:
    """Return the attribute at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax. Nested attributes are
    allowed after the colon (``pkg.mod:Holder.suites``).
    """

    if not path:
        raise LoadError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
    if not module_name or not attr:
        raise LoadError(f"Invalid import path '{path}'")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise LoadError(f"Cannot import module '{module_name}': {exc}") from exc
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise LoadError(f"Module '{module_name}' has no attribute '{attr}'") from exc
    return target
