"""Pydantic models for JSON selector specifications."""

import re
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_validator,
)

from chatwright.exceptions import SelectorNotDefinedError

TEXT_CONTENT = 'textContent'

# Core element roles of an AI assistant page
LOGIN_INDICATOR = 'loginIndicator'
NEW_CHAT_BUTTON = 'newChatButton'
RECENT_CHAT_LINKS = 'recentChatLinks'
MESSAGE_INPUT_AREA = 'messageInputArea'
MESSAGE_SUBMIT_BUTTON = 'messageSubmitButton'
MESSAGE_BLOCKS = 'messageBlocks'
AI_GENERATING_INDICATOR = 'aiGeneratingIndicator'

CORE_ELEMENTS: tuple[str, ...] = (
    LOGIN_INDICATOR,
    NEW_CHAT_BUTTON,
    RECENT_CHAT_LINKS,
    MESSAGE_INPUT_AREA,
    MESSAGE_SUBMIT_BUTTON,
    MESSAGE_BLOCKS,
    AI_GENERATING_INDICATOR,
)

CssSelector = str | tuple[str, ...]


def normalize_selector(selector: CssSelector) -> list[str]:
    """Normalize a selector (string or list of strings) into a candidate list."""
    return list(selector) if isinstance(selector, list | tuple) else [selector]


def glob_to_regex(glob: str) -> re.Pattern[str]:
    """Compile a URL glob into a regex matched against the whole URL.

    '**' matches anything, '*' matches anything except '/', '?' matches one
    character. Everything else is literal.
    """
    parts = []
    i = 0
    while i < len(glob):
        if glob.startswith('**', i):
            parts.append('.*')
            i += 2
            continue
        char = glob[i]
        if char == '*':
            parts.append('[^/]*')
        elif char == '?':
            parts.append('.')
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile(''.join(parts))


def _as_list(value: str | tuple[str, ...] | None) -> list[str]:
    if value is None:
        return []
    return normalize_selector(value)


def _freeze(value: dict | None) -> MappingProxyType | None:
    return None if value is None else MappingProxyType(value)


def _thaw(value: Any, handler: SerializerFunctionWrapHandler) -> Any:
    return handler(None if value is None else dict(value))


class SelectorDef(BaseModel):
    """One element definition with ordered fallback selectors.

    Attributes:
        selector: One CSS selector or a list tried in order (earlier wins)
        attr: Attribute to read per match; text content when omitted or 'textContent'
        fields: Sub-definitions; when present every match becomes a record
        hints: Free-form notes about stability, locale issues, visibility. Never evaluated.

    """

    model_config = ConfigDict(frozen=True)

    selector: CssSelector = Field(description='Selector or ordered fallback selectors')
    attr: str | None = Field(default=None, description='Attribute to extract')
    fields: dict[str, 'SelectorDef'] | None = Field(default=None, description='Nested field definitions')
    hints: tuple[str, ...] = Field(default=(), description='Contextual tips, documentation only')

    @field_validator('selector')
    @classmethod
    def _require_candidates(cls, value: CssSelector) -> CssSelector:
        if isinstance(value, tuple) and not value:
            raise ValueError('selector list must not be empty')
        return value

    _freeze_fields = field_validator('fields')(_freeze)
    _dump_fields = field_serializer('fields', mode='wrap')(_thaw)

    @property
    def candidates(self) -> list[str]:
        """Selectors in preference order."""
        return normalize_selector(self.selector)

    @property
    def is_record(self) -> bool:
        """True when matches are expanded into records rather than scalars."""
        return self.fields is not None

    @property
    def reads_text(self) -> bool:
        """True when the scalar read is trimmed text content."""
        return self.attr is None or self.attr == TEXT_CONTENT


class PageSpec(BaseModel):
    """Generic page specification.

    Attributes:
        url: Optional navigation URL
        url_match: Regex string(s) matched against the current URL
        timeout_ms: Page-level timeout override
        elements: Named element definitions

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str | None = None
    url_match: str | tuple[str, ...] | None = Field(default=None, alias='urlMatch')
    timeout_ms: int | None = Field(default=None, alias='timeoutMs')
    elements: dict[str, SelectorDef] = Field(default_factory=dict, validate_default=True)

    _freeze_elements = field_validator('elements')(_freeze)
    _dump_elements = field_serializer('elements', mode='wrap')(_thaw)

    def matches_url(self, url: str) -> bool:
        """Check the URL against every urlMatch regex."""
        return any(re.search(pattern, url) for pattern in _as_list(self.url_match))


SiteSpec = dict[str, PageSpec]


class AiAssistantPageSpec(BaseModel):
    """Selectors describing one page type of an AI assistant site.

    Core element keys are listed in CORE_ELEMENTS. Additional named
    elements are allowed and are only used when read explicitly.

    Attributes:
        url_glob: Glob-style URL pattern(s), e.g. "https://gemini.google.com/app*"
        elements: Element definitions keyed by role
        hints: Page-level guidance (visibility, flows, prerequisites)

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url_glob: str | tuple[str, ...] | None = Field(default=None, alias='urlGlob')
    elements: dict[str, SelectorDef] = Field(default_factory=dict, validate_default=True)
    hints: tuple[str, ...] = ()

    _freeze_elements = field_validator('elements')(_freeze)
    _dump_elements = field_serializer('elements', mode='wrap')(_thaw)

    def element(self, name: str) -> SelectorDef | None:
        """Return the definition for an element role, or None."""
        return self.elements.get(name)

    def require(self, *names: str) -> list[SelectorDef]:
        """Return definitions for every named role.

        Raises:
            SelectorNotDefinedError: If any of the roles is missing

        """
        missing = [name for name in names if name not in self.elements]
        if missing:
            raise SelectorNotDefinedError(missing)
        return [self.elements[name] for name in names]

    def matches_url(self, url: str) -> bool:
        """Check the whole URL against the page's glob pattern(s)."""
        return any(glob_to_regex(pattern).fullmatch(url) for pattern in _as_list(self.url_glob))


class AiAssistantSiteSpec(BaseModel):
    """All page specs of one AI assistant site.

    Attributes:
        version: Optional schema version string
        pages: Page specs keyed by role; 'landing' and 'chat' are required
        hints: Site-wide guidance

    """

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    pages: dict[str, AiAssistantPageSpec]
    hints: tuple[str, ...] = ()

    _freeze_pages = field_validator('pages')(_freeze)
    _dump_pages = field_serializer('pages', mode='wrap')(_thaw)

    @model_validator(mode='after')
    def _require_core_pages(self) -> 'AiAssistantSiteSpec':
        missing = [role for role in ('landing', 'chat') if role not in self.pages]
        if missing:
            raise ValueError(f'pages must include {", ".join(missing)}')
        return self

    def page(self, role: str) -> AiAssistantPageSpec:
        """Return the page spec for a role."""
        if role not in self.pages:
            raise ValueError(f'Unknown page role: {role}. Choose from: {list(self.pages.keys())}')
        return self.pages[role]

    def page_for_url(self, url: str) -> str | None:
        """Return the first page role whose URL glob matches, or None."""
        for role, page_spec in self.pages.items():
            if page_spec.matches_url(url):
                return role
        return None
