"""Site-independent chat automator driven by an AI assistant page spec."""

import logging
from typing import Any, Protocol

import logfire
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from rich.console import Console

from chatwright.config import ChatwrightSettings
from chatwright.core.extraction import extract_from
from chatwright.core.locatable import Locatable
from chatwright.core.resolver import resolve_locator
from chatwright.models import (
    AI_GENERATING_INDICATOR,
    LOGIN_INDICATOR,
    MESSAGE_BLOCKS,
    MESSAGE_INPUT_AREA,
    MESSAGE_SUBMIT_BUTTON,
    NEW_CHAT_BUTTON,
    RECENT_CHAT_LINKS,
    AiAssistantPageSpec,
    ChatState,
    ExtractedRecord,
)


class AiChatAutomator(Protocol):
    """Operations every chat automator exposes, whatever the site."""

    async def check_login_status(self) -> bool: ...

    async def wait_for_login(self, timeout: float | None = None) -> None: ...

    async def start_new_chat(self) -> None: ...

    async def open_chat(self, index: int | None = None) -> None: ...

    async def send_message(self, text: str) -> None: ...

    async def wait_for_response(self, timeout: float | None = None) -> None: ...

    async def get_messages(self) -> list[Any]: ...

    async def get_chat_state(self) -> ChatState: ...


class MessageFormatter(Protocol):
    """Site-specific reshaping of extracted message records. Pure data, no DOM access."""

    def format(self, records: list[ExtractedRecord]) -> list[Any]: ...


class PassthroughFormatter:
    """Returns extracted records unchanged."""

    def format(self, records: list[ExtractedRecord]) -> list[Any]:
        return records


class ChatAutomator:
    """Drives one chat page through the selectors of its page spec.

    Holds no state besides the page handle: every operation re-resolves its
    selectors against the current DOM. Operations must be awaited one at a
    time per page.

    Attributes:
        page: Playwright page (or any Locatable) being driven
        spec: Page spec with the element selectors
        formatter: Post-processing applied to get_messages() records
        settings: Default timeouts and extraction limits
        console: Optional Rich console for progress output

    """

    def __init__(
        self,
        page: Locatable,
        spec: AiAssistantPageSpec,
        formatter: MessageFormatter | None = None,
        settings: ChatwrightSettings | None = None,
        console: Console | None = None,
    ):
        """Initialize the automator.

        Args:
            page: Page to drive
            spec: Page spec for this page type
            formatter: Message post-processing. Defaults to PassthroughFormatter.
            settings: Timeouts and limits. Defaults to ChatwrightSettings().
            console: Rich console for progress output. Defaults to None (silent).

        """
        self.page = page
        self.spec = spec
        self.formatter = formatter or PassthroughFormatter()
        self.settings = settings or ChatwrightSettings()
        self.console = console
        self.logger = logging.getLogger(__name__)

    async def check_login_status(self) -> bool:
        """Whether the login indicator currently matches. False when not configured."""
        definition = self.spec.element(LOGIN_INDICATOR)
        if definition is None:
            return False
        locator = await resolve_locator(self.page, definition.selector)
        return await locator.count() > 0

    async def wait_for_login(self, timeout: float | None = None) -> None:
        """Wait until the login indicator is visible.

        Args:
            timeout: Milliseconds to wait. Defaults to settings.login_timeout_ms.

        Raises:
            SelectorNotDefinedError: If no loginIndicator is configured
            playwright.async_api.TimeoutError: If the indicator does not appear in time

        """
        (definition,) = self.spec.require(LOGIN_INDICATOR)
        timeout = timeout if timeout is not None else self.settings.login_timeout_ms

        with logfire.span('wait_for_login', timeout=timeout):
            if self.console:
                self.console.print(f'[bold blue]⏳ Waiting for user to log in... (timeout: {timeout}ms)[/bold blue]')
            locator = await resolve_locator(self.page, definition.selector)
            try:
                await locator.wait_for(state='visible', timeout=timeout)
            except PlaywrightTimeoutError:
                logfire.warn('Login not detected before timeout', timeout=timeout)
                raise
            if self.console:
                self.console.print('[bold green]✓ Login detected![/bold green]')
            logfire.info('Login detected')

    async def start_new_chat(self) -> None:
        """Click the new-chat control."""
        (definition,) = self.spec.require(NEW_CHAT_BUTTON)
        with logfire.span('start_new_chat'):
            locator = await resolve_locator(self.page, definition.selector)
            await locator.click()

    async def open_chat(self, index: int | None = None) -> None:
        """Open a recent chat.

        Args:
            index: Zero-based position in the recent chat list. Defaults to the first entry.

        """
        (definition,) = self.spec.require(RECENT_CHAT_LINKS)
        with logfire.span('open_chat', index=index):
            locator = await resolve_locator(self.page, definition.selector)
            target = locator.nth(index) if index is not None else locator.first
            await target.click()

    async def send_message(self, text: str) -> None:
        """Replace the input's content with text and click submit.

        Args:
            text: Message to send, forwarded as-is (empty is allowed)

        """
        input_def, submit_def = self.spec.require(MESSAGE_INPUT_AREA, MESSAGE_SUBMIT_BUTTON)
        with logfire.span('send_message', length=len(text)):
            message_input = await resolve_locator(self.page, input_def.selector)
            await message_input.fill(text)
            submit = await resolve_locator(self.page, submit_def.selector)
            await submit.click()

    async def wait_for_response(self, timeout: float | None = None) -> None:
        """Wait for the generating indicator to go away, best effort.

        Returns immediately when no indicator is configured. Driver errors,
        including timeouts, are logged and absorbed because some responses
        never show the indicator at all.

        Args:
            timeout: Milliseconds to wait. Defaults to settings.response_timeout_ms.

        """
        definition = self.spec.element(AI_GENERATING_INDICATOR)
        if definition is None:
            return
        timeout = timeout if timeout is not None else self.settings.response_timeout_ms

        with logfire.span('wait_for_response', timeout=timeout):
            locator = await resolve_locator(self.page, definition.selector)
            try:
                await locator.wait_for(state='detached', timeout=timeout)
            except PlaywrightError as e:
                self.logger.info(f'Generating indicator still present, continuing: {e}')
                logfire.info('Response wait ended without indicator detaching', timeout=timeout)

    async def extract_records(self) -> list[ExtractedRecord]:
        """Field-keyed records for the messageBlocks element, before formatting."""
        definition = self.spec.element(MESSAGE_BLOCKS)
        if definition is None:
            return []
        return await extract_from(self.page, definition, max_depth=self.settings.max_field_depth)

    async def get_messages(self) -> list[Any]:
        """Extract the conversation and apply the site's formatter."""
        with logfire.span('get_messages'):
            records = await self.extract_records()
            messages = self.formatter.format(records)
            self.logger.debug(f'Extracted {len(records)} records -> {len(messages)} messages')
            return messages

    async def get_chat_state(self) -> ChatState:
        """'generating' while the generating indicator matches, else 'idle'."""
        definition = self.spec.element(AI_GENERATING_INDICATOR)
        if definition is None:
            return 'idle'
        locator = await resolve_locator(self.page, definition.selector)
        return 'generating' if await locator.count() > 0 else 'idle'
