from chatwright.automators import create_automator
from chatwright.automators.grok import GrokMessageFormatter, join_parts, to_string_parts
from chatwright.core import SnapshotPage
from chatwright.models import AiAssistantPageSpec


def as_dicts(messages):
    return [message.model_dump() for message in messages]


def test_splits_user_follow_ups_and_joins_assistant_parts():
    records = [{'userMessage': ['hello', 'follow-up'], 'aiMessage': ['part one', 'part two']}]

    messages = GrokMessageFormatter().format(records)

    assert as_dicts(messages) == [
        {'role': 'user', 'content': 'hello', 'timestamp': None},
        {'role': 'user', 'content': 'follow-up', 'timestamp': None},
        {'role': 'assistant', 'content': 'part one\n\npart two', 'timestamp': None},
    ]


def test_empty_parts_are_dropped():
    records = [{'userMessage': ['  ', ' hi '], 'aiMessage': ['', '  answer  ', None]}]

    messages = GrokMessageFormatter().format(records)

    assert [(m.role, m.content) for m in messages] == [('user', 'hi'), ('assistant', 'answer')]


def test_assistant_message_key_is_a_fallback_only():
    formatter = GrokMessageFormatter()

    fallback = formatter.format([{'userMessage': [], 'assistantMessage': ['from fallback']}])
    assert [(m.role, m.content) for m in fallback] == [('assistant', 'from fallback')]

    # An empty aiMessage list is still present, so the fallback key is not read
    present = formatter.format([{'aiMessage': [], 'assistantMessage': ['ignored']}])
    assert present == []


def test_non_record_entries_are_skipped():
    assert GrokMessageFormatter().format(['stray text', None, {'userMessage': ['ok']}])[0].content == 'ok'


def test_to_string_parts_flattens_and_drops_records():
    assert to_string_parts([['a', ' b '], {'nested': ['x']}, 3, None, 'c']) == ['a', 'b', 'c']
    assert to_string_parts(None) == []
    assert to_string_parts('  ') == []


def test_join_parts():
    assert join_parts([' one ', '', 'two']) == 'one\n\ntwo'


async def test_grok_automator_reads_messages_from_page():
    page = SnapshotPage(
        """
        <main>
            <div class="group">
                <div class="user"><p>hello</p><p>follow-up</p></div>
                <div class="reply"><div class="md">part one</div><div class="md">part two</div></div>
            </div>
        </main>
        """
    )
    spec = AiAssistantPageSpec.model_validate(
        {
            'elements': {
                'messageBlocks': {
                    'selector': 'div.group',
                    'fields': {
                        'userMessage': {'selector': '.user p'},
                        'aiMessage': {'selector': '.reply .md'},
                    },
                }
            }
        }
    )

    messages = await create_automator('grok', page, spec).get_messages()

    assert [(m.role, m.content) for m in messages] == [
        ('user', 'hello'),
        ('user', 'follow-up'),
        ('assistant', 'part one\n\npart two'),
    ]
