"""Static HTML implementation of the locator capability.

Lets automators and extraction run against saved page snapshots (fixtures)
without a browser. Mirrors the subset of Playwright's async Locator API the
core uses, including its exception types.
"""

from pathlib import Path

from bs4 import BeautifulSoup, Tag
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from chatwright.core.locatable import WaitState

HIDDEN_STYLES = ('display:none', 'visibility:hidden')


def _is_visible(tag: Tag) -> bool:
    """Approximate visibility from hidden attributes and inline styles."""
    for node in [tag, *tag.parents]:
        if not isinstance(node, Tag) or node.name == '[document]':
            continue
        if node.has_attr('hidden') or node.get('aria-hidden') == 'true':
            return False
        style = str(node.get('style', '')).replace(' ', '').lower()
        if any(hidden in style for hidden in HIDDEN_STYLES):
            return False
    return True


class SnapshotPage:
    """A saved HTML document queried like a Playwright page.

    Attributes:
        soup: Parsed document
        url: URL the snapshot was taken from
        clicked: Elements clicked, in order

    """

    def __init__(self, html: str, url: str = 'about:blank'):
        """Parse the snapshot.

        Args:
            html: Page HTML
            url: URL the snapshot was taken from

        """
        self.soup = BeautifulSoup(html, 'lxml')
        self.url = url
        self.clicked: list[Tag] = []

    @classmethod
    def from_file(cls, path: str | Path, url: str = 'about:blank') -> 'SnapshotPage':
        """Load a snapshot from an HTML file."""
        return cls(Path(path).read_text(encoding='utf-8'), url=url)

    def locator(self, selector: str) -> 'SnapshotLocator':
        return SnapshotLocator(self, None, selector=selector)

    def click_count(self, selector: str) -> int:
        """Number of recorded clicks on elements matching selector."""
        targets = self.soup.select(selector)
        return sum(1 for tag in self.clicked if any(tag is target for target in targets))


class SnapshotLocator:
    """Lazily evaluated query chain over a SnapshotPage.

    A node either selects descendants of its parent's matches (selector)
    or picks one of its parent's matches (index).
    """

    def __init__(
        self,
        page: SnapshotPage,
        parent: 'SnapshotLocator | None',
        selector: str | None = None,
        index: int | None = None,
    ):
        self._page = page
        self._parent = parent
        self._selector = selector
        self._index = index

    def __repr__(self) -> str:
        prefix = repr(self._parent) + '.' if self._parent else ''
        if self._selector is not None:
            return f'{prefix}locator("{self._selector}")'
        return f'{prefix}nth({self._index})'

    def _resolve(self) -> list[Tag]:
        if self._selector is None:
            matches = self._parent._resolve() if self._parent else []
            index = self._index if self._index >= 0 else len(matches) + self._index
            return [matches[index]] if 0 <= index < len(matches) else []

        scopes = self._parent._resolve() if self._parent else [self._page.soup]
        found: list[Tag] = []
        for scope in scopes:
            for tag in scope.select(self._selector):
                if not any(tag is seen for seen in found):
                    found.append(tag)
        return found

    def _single(self, action: str) -> Tag:
        matches = self._resolve()
        if not matches:
            raise PlaywrightTimeoutError(f'{action}: no element matches {self!r}')
        if len(matches) > 1:
            raise PlaywrightError(f'strict mode violation: {self!r} resolved to {len(matches)} elements')
        return matches[0]

    @property
    def first(self) -> 'SnapshotLocator':
        return self.nth(0)

    def nth(self, index: int) -> 'SnapshotLocator':
        return SnapshotLocator(self._page, self, index=index)

    def locator(self, selector: str) -> 'SnapshotLocator':
        return SnapshotLocator(self._page, self, selector=selector)

    async def count(self) -> int:
        return len(self._resolve())

    async def text_content(self) -> str | None:
        return self._single('text_content').get_text()

    async def get_attribute(self, name: str) -> str | None:
        value = self._single('get_attribute').get(name)
        if isinstance(value, list):
            return ' '.join(value)
        return value

    async def click(self) -> None:
        self._page.clicked.append(self._single('click'))

    async def fill(self, value: str) -> None:
        tag = self._single('fill')
        if tag.name == 'input':
            tag['value'] = value
        else:
            tag.string = value

    async def wait_for(self, *, state: WaitState | None = None, timeout: float | None = None) -> None:
        """Check the state once; a snapshot never changes while waiting."""
        state = state or 'visible'
        matches = self._resolve()
        visible = [tag for tag in matches if _is_visible(tag)]
        satisfied = {
            'attached': bool(matches),
            'detached': not matches,
            'visible': bool(visible),
            'hidden': not visible,
        }[state]
        if not satisfied:
            raise PlaywrightTimeoutError(f'Timeout {timeout}ms exceeded waiting for {self!r} to be {state}')
