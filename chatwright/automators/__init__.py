"""Chat automators and the site variant factory."""

from urllib.parse import urlparse

from chatwright.automators.base import AiChatAutomator, ChatAutomator, MessageFormatter, PassthroughFormatter
from chatwright.automators.grok import GrokMessageFormatter
from chatwright.core.locatable import Locatable
from chatwright.models import AiAssistantPageSpec

# Variant name -> message formatter. ChatGPT and Gemini need no reshaping.
AUTOMATOR_VARIANTS: dict[str, type[MessageFormatter]] = {
    'default': PassthroughFormatter,
    'chatgpt': PassthroughFormatter,
    'gemini': PassthroughFormatter,
    'grok': GrokMessageFormatter,
}

VARIANT_HOSTS: dict[str, str] = {
    'grok.com': 'grok',
    'chatgpt.com': 'chatgpt',
    'chat.openai.com': 'chatgpt',
    'gemini.google.com': 'gemini',
}


def detect_variant(url: str) -> str:
    """Pick the automator variant for a URL by its host.

    Args:
        url: Page URL

    Returns:
        Variant name, 'default' for unknown hosts

    """
    host = urlparse(url).netloc.lower()
    if host.startswith('www.'):
        host = host[4:]
    for known, variant in VARIANT_HOSTS.items():
        if host == known or host.endswith('.' + known):
            return variant
    return 'default'


def create_automator(variant: str, page: Locatable, spec: AiAssistantPageSpec, **kwargs) -> ChatAutomator:
    """Create a chat automator for a site variant.

    Args:
        variant: Site variant ('default', 'chatgpt', 'gemini', 'grok')
        page: Page to drive
        spec: Page spec for the page type
        **kwargs: Additional arguments for ChatAutomator (settings, console)

    Returns:
        ChatAutomator with the variant's message formatter

    """
    if variant not in AUTOMATOR_VARIANTS:
        raise ValueError(f'Unknown automator variant: {variant}. Choose from: {list(AUTOMATOR_VARIANTS.keys())}')

    return ChatAutomator(page, spec, formatter=AUTOMATOR_VARIANTS[variant](), **kwargs)


__all__ = [
    'AUTOMATOR_VARIANTS',
    'AiChatAutomator',
    'ChatAutomator',
    'GrokMessageFormatter',
    'MessageFormatter',
    'PassthroughFormatter',
    'create_automator',
    'detect_variant',
]
