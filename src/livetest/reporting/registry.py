"""Named reporter factories selectable from the CLI and config files."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional


@dataclass(frozen=True)
class ReporterOptions:
    path: Optional[str] = None
    use_color: bool = True


ReporterFactory = Callable[[ReporterOptions], Any]


class ReporterRegistry:
    """Stores reporter factories keyed by name."""

    def __init__(self) -> None:
        self._factories: Dict[str, ReporterFactory] = {}

    def register(self, name: str, factory: ReporterFactory) -> ReporterFactory:
        if name in self._factories:
            raise ValueError(f"Reporter '{name}' already registered")
        self._factories[name] = factory
        return factory

    def update_or_register(self, name: str, factory: ReporterFactory) -> ReporterFactory:
        self._factories[name] = factory
        return factory

    def create(self, name: str, options: Optional[ReporterOptions] = None) -> Any:
        try:
            factory = self._factories[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._factories)) or "none"
            raise KeyError(f"Reporter '{name}' is not registered (available: {available})") from exc
        return factory(options or ReporterOptions())

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def names(self) -> Iterable[str]:
        return tuple(self._factories.keys())


registry = ReporterRegistry()


def register_reporter(name: str) -> Callable[[ReporterFactory], ReporterFactory]:
    """Decorator registering the decorated factory under ``name``."""

    def decorator(factory: ReporterFactory) -> ReporterFactory:
        return registry.register(name, factory)

    return decorator


def load_builtins() -> None:
    from .json_reporter import JsonReporter
    from .jsonl import JsonLinesReporter
    from .terminal import TerminalReporter

    registry.update_or_register("terminal", lambda options: TerminalReporter(use_color=options.use_color))
    registry.update_or_register("json", lambda options: JsonReporter(path=options.path or "livetest-report.json"))
    registry.update_or_register("jsonl", lambda options: JsonLinesReporter(path=options.path))
