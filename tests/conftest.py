import logfire
import pytest

from chatwright.core import SnapshotPage
from chatwright.models import AiAssistantPageSpec


@pytest.fixture(scope='session', autouse=True)
def quiet_logfire():
    # Keep spans local; nothing is sent or printed during tests
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def chat_page_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Test Chat</title>
    </head>
    <body>
        <nav>
            <button id="new-chat">New chat</button>
            <a class="chat-link" href="/c/1">First chat</a>
            <a class="chat-link" href="/c/2">Second chat</a>
            <img class="avatar" alt="me" src="/me.png">
        </nav>
        <main>
            <div class="turn"><div class="text">Hello there</div></div>
            <div class="turn"><div class="text">  Hi! How can I help?  </div></div>
            <div class="spinner">...</div>
        </main>
        <footer>
            <div id="box" contenteditable="true">draft</div>
            <button id="send">Send</button>
        </footer>
    </body>
    </html>
    """


@pytest.fixture
def chat_page(chat_page_html):
    return SnapshotPage(chat_page_html, url='https://chat.example.com/c/1')


@pytest.fixture
def chat_page_spec():
    return AiAssistantPageSpec.model_validate(
        {
            'urlGlob': 'https://chat.example.com/c/*',
            'elements': {
                'loginIndicator': {'selector': ['img.profile-picture', 'img.avatar']},
                'newChatButton': {'selector': '#new-chat'},
                'recentChatLinks': {'selector': 'a.chat-link', 'attr': 'href'},
                'messageInputArea': {'selector': '#box'},
                'messageSubmitButton': {'selector': '#send'},
                'messageBlocks': {'selector': 'div.turn', 'fields': {'text': {'selector': '.text'}}},
                'aiGeneratingIndicator': {'selector': '.spinner'},
            },
        }
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        file_path = str(item.path)
        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
