"""Driver capability interface consumed by the resolver, extractor and automators.

Playwright's async ``Page`` and ``Locator`` satisfy these protocols as-is,
as does ``chatwright.core.snapshot.SnapshotPage`` for saved HTML.
"""

from typing import Literal, Protocol

WaitState = Literal['attached', 'detached', 'visible', 'hidden']


class Locator(Protocol):
    """Handle over zero or more elements matched by a selector."""

    @property
    def first(self) -> 'Locator': ...

    def nth(self, index: int) -> 'Locator': ...

    def locator(self, selector: str) -> 'Locator': ...

    async def count(self) -> int: ...

    async def text_content(self) -> str | None: ...

    async def get_attribute(self, name: str) -> str | None: ...

    async def click(self) -> None: ...

    async def fill(self, value: str) -> None: ...

    async def wait_for(self, *, state: WaitState | None = None, timeout: float | None = None) -> None: ...


class Locatable(Protocol):
    """Anything that can produce a Locator from a selector string (a page or a locator)."""

    def locator(self, selector: str) -> Locator: ...
