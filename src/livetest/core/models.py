"""Core dataclasses describing suites, cases and tag filters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

SuiteCallable = Callable[["Suite"], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class Case:
    """A single named, optionally tagged test operation."""

    label: str
    describe_label: str
    body: SuiteCallable
    tag: Optional[str] = None

    @property
    def description(self) -> str:
        return f"{self.describe_label}: {self.label}"


@dataclass
class Suite:
    """Ordered group of cases sharing an optional ``before_each`` hook.

    ``state`` is scratch space shared by the hook and the case bodies of
    this suite; both receive the suite as their only argument.
    """

    cases: Sequence[Case]
    before_each: Optional[SuiteCallable] = None
    label: str = ""
    state: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.cases = tuple(self.cases)
        if not self.label and self.cases:
            self.label = self.cases[0].describe_label

    def __iter__(self) -> Iterator[Case]:
        return iter(self.cases)

    def __len__(self) -> int:
        return len(self.cases)


@dataclass(frozen=True)
class TagFilter:
    """Set of tags selecting which cases run.

    A case runs iff its tag is a member; untagged cases never match. An
    empty filter matches nothing.
    """

    tags: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_tags(cls, tags: Optional[Iterable[str]]) -> Optional["TagFilter"]:
        if tags is None:
            return None
        if isinstance(tags, TagFilter):
            return tags
        if isinstance(tags, str):
            tags = (tags,)
        return cls(tags=frozenset(str(tag) for tag in tags))

    def matches(self, case: Case) -> bool:
        return case.tag is not None and case.tag in self.tags

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags


def select_cases(
    suites: Sequence[Suite], tag_filter: Optional[TagFilter]
) -> Iterator[Tuple[Suite, Case]]:
    """Yield ``(suite, case)`` pairs in declaration order, honouring the filter."""

    for suite in suites:
        for case in suite.cases:
            if tag_filter is None or tag_filter.matches(case):
                yield suite, case
