import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from chatwright.core import SnapshotPage


@pytest.fixture
def page():
    return SnapshotPage(
        """
        <body>
            <ul class="list">
                <li class="item first">one</li>
                <li class="item">two</li>
                <li class="item" hidden>three</li>
            </ul>
            <div style="display: none"><span class="ghost">boo</span></div>
            <input id="name" type="text">
        </body>
        """
    )


async def test_count_and_nth(page):
    items = page.locator('li.item')
    assert await items.count() == 3
    assert await items.nth(1).text_content() == 'two'
    assert await items.nth(-1).text_content() == 'three'
    assert await items.nth(7).count() == 0
    assert await items.first.text_content() == 'one'


async def test_nested_locator(page):
    assert await page.locator('ul.list').locator('li').count() == 3
    assert await page.locator('li.item').nth(0).locator('li').count() == 0


async def test_get_attribute_joins_class_list(page):
    assert await page.locator('li.item').first.get_attribute('class') == 'item first'
    assert await page.locator('li.item').first.get_attribute('data-x') is None


async def test_strict_mode_for_single_element_actions(page):
    with pytest.raises(PlaywrightError, match='strict mode violation'):
        await page.locator('li.item').click()

    with pytest.raises(PlaywrightTimeoutError):
        await page.locator('button.missing').click()


async def test_click_is_recorded(page):
    await page.locator('li.item').nth(1).click()
    assert page.click_count('li.item') == 1
    assert page.click_count('li.first') == 0


async def test_fill_input_sets_value(page):
    await page.locator('#name').fill('Ada')
    assert await page.locator('#name').get_attribute('value') == 'Ada'


async def test_wait_for_states(page):
    await page.locator('li.first').wait_for(state='visible', timeout=10)
    await page.locator('button.missing').wait_for(state='detached', timeout=10)
    await page.locator('span.ghost').wait_for(state='hidden', timeout=10)
    await page.locator('span.ghost').wait_for(state='attached', timeout=10)

    with pytest.raises(PlaywrightTimeoutError):
        await page.locator('span.ghost').wait_for(state='visible', timeout=10)

    with pytest.raises(PlaywrightTimeoutError):
        await page.locator('li.item').wait_for(state='detached', timeout=10)


async def test_from_file(tmp_path):
    source = tmp_path / 'source.html'
    source.write_text('<p class="greeting">hi</p>', encoding='utf-8')

    page = SnapshotPage.from_file(source, url='https://example.com/')

    assert page.url == 'https://example.com/'
    assert await page.locator('p.greeting').text_content() == 'hi'
