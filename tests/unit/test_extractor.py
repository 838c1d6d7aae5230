import pytest

from chatwright.core import SnapshotPage, extract_from
from chatwright.exceptions import SelectorDefinitionError
from chatwright.models import SelectorDef


async def test_scalar_text_for_every_match_in_order(chat_page):
    values = await extract_from(chat_page, SelectorDef(selector='a.chat-link'))
    assert values == ['First chat', 'Second chat']


async def test_text_is_trimmed(chat_page):
    values = await extract_from(chat_page, SelectorDef(selector='div.turn .text'))
    assert values == ['Hello there', 'Hi! How can I help?']


async def test_attribute_values(chat_page):
    assert await extract_from(chat_page, SelectorDef(selector='a.chat-link', attr='href')) == ['/c/1', '/c/2']


async def test_text_content_sentinel(chat_page):
    definition = SelectorDef(selector='a.chat-link', attr='textContent')
    assert await extract_from(chat_page, definition) == ['First chat', 'Second chat']


async def test_missing_attribute_is_none(chat_page):
    assert await extract_from(chat_page, SelectorDef(selector='a.chat-link', attr='data-id')) == [None, None]


async def test_zero_matches_is_empty(chat_page):
    assert await extract_from(chat_page, SelectorDef(selector=['.nope', '.also-nope'])) == []


async def test_fallback_candidate_is_used():
    page = SnapshotPage('<body><a class="fallback"> Back </a></body>')
    assert await extract_from(page, SelectorDef(selector=['a.primary', 'a.fallback'])) == ['Back']


async def test_records_have_exactly_the_field_keys():
    page = SnapshotPage(
        """
        <ul>
            <li class="item"><a href="/one">One</a><span class="tag">new</span><span class="tag">hot</span></li>
            <li class="item"><a href="/two">Two</a></li>
        </ul>
        """
    )
    definition = SelectorDef.model_validate(
        {
            'selector': 'li.item',
            'fields': {
                'title': {'selector': 'a'},
                'link': {'selector': 'a', 'attr': 'href'},
                'tags': {'selector': 'span.tag'},
            },
        }
    )

    records = await extract_from(page, definition)

    assert records == [
        {'title': ['One'], 'link': ['/one'], 'tags': ['new', 'hot']},
        {'title': ['Two'], 'link': ['/two'], 'tags': []},
    ]
    assert all(set(record) == {'title', 'link', 'tags'} for record in records)


async def test_nested_records():
    page = SnapshotPage(
        """
        <section class="thread">
            <div class="post"><p class="line">a</p><p class="line">b</p></div>
        </section>
        """
    )
    definition = SelectorDef.model_validate(
        {
            'selector': 'section.thread',
            'fields': {'posts': {'selector': 'div.post', 'fields': {'lines': {'selector': 'p.line'}}}},
        }
    )

    assert await extract_from(page, definition) == [{'posts': [{'lines': ['a', 'b']}]}]


async def test_extraction_does_not_touch_the_page(chat_page):
    await extract_from(chat_page, SelectorDef(selector='#send'))
    assert chat_page.clicked == []
    assert chat_page.soup.select_one('#box').get_text() == 'draft'


async def test_depth_guard():
    page = SnapshotPage('<div><div><div><div><div>deep</div></div></div></div></div>')
    definition = SelectorDef(selector='div')
    for _ in range(5):
        definition = SelectorDef(selector='div', fields={'child': definition})

    with pytest.raises(SelectorDefinitionError, match='deeper than 2'):
        await extract_from(page, definition, max_depth=2)


async def test_depth_guard_allows_shallow_definitions():
    page = SnapshotPage('<div><div>inner</div></div>')
    definition = SelectorDef(selector='div', fields={'child': SelectorDef(selector='div')})

    assert await extract_from(page, definition, max_depth=1) == [{'child': ['inner']}, {'child': []}]
