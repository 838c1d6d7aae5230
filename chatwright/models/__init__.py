"""Pydantic models for selector specs, messages and results."""

from chatwright.models.messages import ChatMessage, ChatState, ExtractedRecord, ExtractedValue
from chatwright.models.results import ElementVerificationResult, PageVerificationResult, SelectorFailure
from chatwright.models.selectors import (
    AI_GENERATING_INDICATOR,
    CORE_ELEMENTS,
    LOGIN_INDICATOR,
    MESSAGE_BLOCKS,
    MESSAGE_INPUT_AREA,
    MESSAGE_SUBMIT_BUTTON,
    NEW_CHAT_BUTTON,
    RECENT_CHAT_LINKS,
    TEXT_CONTENT,
    AiAssistantPageSpec,
    AiAssistantSiteSpec,
    CssSelector,
    PageSpec,
    SelectorDef,
    SiteSpec,
    normalize_selector,
)

__all__ = [
    'AiAssistantPageSpec',
    'AiAssistantSiteSpec',
    'CssSelector',
    'PageSpec',
    'SelectorDef',
    'SiteSpec',
    'normalize_selector',
    'ChatMessage',
    'ChatState',
    'ExtractedRecord',
    'ExtractedValue',
    'SelectorFailure',
    'ElementVerificationResult',
    'PageVerificationResult',
    # Element roles
    'CORE_ELEMENTS',
    'TEXT_CONTENT',
    'LOGIN_INDICATOR',
    'NEW_CHAT_BUTTON',
    'RECENT_CHAT_LINKS',
    'MESSAGE_INPUT_AREA',
    'MESSAGE_SUBMIT_BUTTON',
    'MESSAGE_BLOCKS',
    'AI_GENERATING_INDICATOR',
]
