"""A toy todo application standing in for a live UI."""
from __future__ import annotations

import asyncio
from typing import Dict, List


class TodoApp:
    def __init__(self) -> None:
        self.storage: Dict[str, List[str]] = {}
        self.screen: List[str] = []

    def add(self, text: str) -> None:
        self.storage.setdefault("items", []).append(text)

    def render(self) -> None:
        self.screen = [f"[ ] {item}" for item in self.storage.get("items", [])]


APP = TodoApp()


class TodoSubject:
    """Adapter exposing the hooks the runner calls before each case."""

    def __init__(self, app: TodoApp = APP) -> None:
        self.app = app

    async def clear_async(self) -> None:
        await asyncio.sleep(0)
        self.app.storage.clear()

    def re_render(self) -> None:
        self.app.render()
