"""Resolve suites and subjects from ``module:attr`` paths."""
from __future__ import annotations

import inspect
from typing import Any, List, Optional, Sequence

from livetest.errors import LoadError
from livetest.utils import import_string

from .models import Suite
from .subject import NullSubject, SubjectAdapter


def load_suites(paths: Sequence[str]) -> List[Suite]:
    """Load suites in the order the paths are given.

    Each path may point at a :class:`Suite`, a sequence of suites, or a
    zero-argument callable returning either.
    """

    suites: List[Suite] = []
    for path in paths:
        target = import_string(path)
        if callable(target) and not isinstance(target, Suite):
            target = target()
        suites.extend(_coerce_suites(target, path))
    return suites


def _coerce_suites(target: Any, path: str) -> List[Suite]:
    if isinstance(target, Suite):
        return [target]
    if isinstance(target, (list, tuple)):
        invalid = [item for item in target if not isinstance(item, Suite)]
        if invalid:
            raise LoadError(f"'{path}' contains non-suite entries: {invalid[0]!r}")
        return list(target)
    raise LoadError(f"'{path}' does not resolve to a Suite or a sequence of suites")


def load_subject(path: Optional[str]) -> SubjectAdapter:
    """Load the subject adapter; classes and factories are called without arguments."""

    if not path:
        return NullSubject()
    target = import_string(path)
    if inspect.isclass(target) or (callable(target) and not hasattr(target, "clear_async")):
        target = target()
    if not hasattr(target, "clear_async") or not hasattr(target, "re_render"):
        raise LoadError(f"'{path}' must provide clear_async() and re_render()")
    return target
