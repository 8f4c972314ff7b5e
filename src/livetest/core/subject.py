"""Subject adapter interface: the live application exercised by cases."""
from __future__ import annotations

from typing import Awaitable, Optional, Protocol


class SubjectAdapter(Protocol):
    """Live application hooks invoked before every case.

    ``clear_async`` wipes shared persisted state so cases do not leak into
    each other. ``re_render`` resynchronizes the subject with its live
    representation; it may be synchronous or return an awaitable.
    """

    async def clear_async(self) -> None:
        ...

    def re_render(self) -> Optional[Awaitable[None]]:
        ...


class NullSubject:
    """Subject used when cases drive the application on their own."""

    async def clear_async(self) -> None:
        return None

    def re_render(self) -> None:
        return None
