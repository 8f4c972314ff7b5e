"""Utility helpers."""
from .awaitables import maybe_await
from .importing import import_string

__all__ = ["import_string", "maybe_await"]
