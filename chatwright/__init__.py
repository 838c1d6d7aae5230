"""chatwright - resilient selectors and chat automation for AI assistant sites.

Drive web chat UIs through ordered fallback selectors and extract
structured conversations from their DOM.
"""

from chatwright.automators import (
    AUTOMATOR_VARIANTS,
    AiChatAutomator,
    ChatAutomator,
    GrokMessageFormatter,
    MessageFormatter,
    PassthroughFormatter,
    create_automator,
    detect_variant,
)
from chatwright.config import ChatwrightSettings
from chatwright.core import SelectorVerifier, SnapshotPage, extract_from, resolve_locator
from chatwright.exceptions import ChatwrightError, SelectorDefinitionError, SelectorNotDefinedError, SpecLoadError
from chatwright.models import (
    AiAssistantPageSpec,
    AiAssistantSiteSpec,
    ChatMessage,
    ChatState,
    PageSpec,
    SelectorDef,
    normalize_selector,
)
from chatwright.storage import SpecStorage, load_site_spec

__all__ = [
    # Core components
    'resolve_locator',
    'extract_from',
    'normalize_selector',
    'SelectorVerifier',
    'SnapshotPage',
    # Automators
    'AUTOMATOR_VARIANTS',
    'AiChatAutomator',
    'ChatAutomator',
    'GrokMessageFormatter',
    'MessageFormatter',
    'PassthroughFormatter',
    'create_automator',
    'detect_variant',
    # Models
    'AiAssistantPageSpec',
    'AiAssistantSiteSpec',
    'ChatMessage',
    'ChatState',
    'PageSpec',
    'SelectorDef',
    # Configuration and storage
    'ChatwrightSettings',
    'SpecStorage',
    'load_site_spec',
    # Errors
    'ChatwrightError',
    'SelectorDefinitionError',
    'SelectorNotDefinedError',
    'SpecLoadError',
]
