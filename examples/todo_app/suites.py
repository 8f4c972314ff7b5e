"""Example suites exercising the todo application."""
from __future__ import annotations

from app import APP

from livetest.core import Case, Suite


def _seed(suite: Suite) -> None:
    APP.add("buy milk")
    suite.state["seeded"] = ["buy milk"]


async def shows_seeded_items(suite: Suite) -> None:
    assert APP.screen == [f"[ ] {item}" for item in suite.state["seeded"]]


async def adds_an_item(suite: Suite) -> None:
    APP.add("walk dog")
    APP.render()
    assert "[ ] walk dog" in APP.screen


async def starts_empty(suite: Suite) -> None:
    assert APP.screen == [], f"screen should be empty, found {APP.screen}"


todo_list = Suite(
    cases=[
        Case(label="shows seeded items", describe_label="Todo list", body=shows_seeded_items, tag="smoke"),
        Case(label="adds an item", describe_label="Todo list", body=adds_an_item),
    ],
    before_each=_seed,
)

fresh_start = Suite(
    cases=[Case(label="starts empty", describe_label="Fresh start", body=starts_empty, tag="smoke")],
)

suites = [todo_list, fresh_start]
