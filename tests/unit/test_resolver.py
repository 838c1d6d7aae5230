from chatwright.core import SnapshotPage, resolve_locator


def make_root(mocker, counts):
    """Root whose locator(selector) returns a mock with the given match count."""
    locators = {}
    for selector, count in counts.items():
        locator = mocker.Mock(name=selector)
        locator.count = mocker.AsyncMock(return_value=count)
        locators[selector] = locator

    root = mocker.Mock()
    root.locator.side_effect = lambda selector: locators[selector]
    return root, locators


async def test_returns_first_matching_candidate_even_if_later_ones_match(mocker):
    root, locators = make_root(mocker, {'a.one': 0, 'a.two': 2, 'a.three': 5})

    resolved = await resolve_locator(root, ['a.one', 'a.two', 'a.three'])

    assert resolved is locators['a.two']
    # a.three is never queried once a.two matched
    locators['a.three'].count.assert_not_awaited()


async def test_falls_back_to_first_candidate_when_nothing_matches(mocker):
    root, locators = make_root(mocker, {'a.one': 0, 'a.two': 0})

    resolved = await resolve_locator(root, ['a.one', 'a.two'])

    assert resolved is locators['a.one']


async def test_single_string_selector(mocker):
    root, locators = make_root(mocker, {'#send': 1})

    assert await resolve_locator(root, '#send') is locators['#send']


async def test_fallback_against_snapshot():
    page = SnapshotPage('<body><a class="fallback">Back</a></body>')

    resolved = await resolve_locator(page, ['a.primary', 'a.fallback'])

    assert await resolved.count() == 1
    assert await resolved.text_content() == 'Back'


async def test_resolution_scoped_to_element():
    page = SnapshotPage(
        """
        <div class="turn"><span class="a">first</span></div>
        <div class="turn"><span class="b">second</span></div>
        """
    )
    second_turn = page.locator('div.turn').nth(1)

    resolved = await resolve_locator(second_turn, ['span.a', 'span.b'])

    assert await resolved.text_content() == 'second'
