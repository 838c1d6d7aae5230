"""Verifies that a page spec's selectors match elements on a page."""

import logfire
from rich.console import Console
from rich.markup import escape

from chatwright.core.locatable import Locatable
from chatwright.models import (
    AiAssistantPageSpec,
    ElementVerificationResult,
    PageVerificationResult,
    SelectorDef,
    SelectorFailure,
)


class SelectorVerifier:
    """Verifies page specs by testing every candidate selector against a page.

    Unlike resolution (which silently falls back to the first candidate),
    verification reports which candidate of each element actually matched
    and why the others did not.

    Attributes:
        console: Optional Rich console for output

    """

    def __init__(self, console: Console | None = None):
        """Initialize the SelectorVerifier."""
        self.console = console

    async def verify(
        self,
        root: Locatable,
        page_spec: AiAssistantPageSpec,
        required: list[str] | tuple[str, ...] | None = None,
    ) -> PageVerificationResult:
        """Verify all element definitions of a page spec.

        Args:
            root: Page (or locator) to verify against
            page_spec: Page spec whose elements are checked
            required: Element names that must match for the page to pass.
                Defaults to None (nothing required).

        Returns:
            PageVerificationResult with per-element status

        """
        results: dict[str, ElementVerificationResult] = {}

        if self.console:
            self.console.print(f'  → Verifying {len(page_spec.elements)} elements...')

        with logfire.span('verify_page_spec', elements=len(page_spec.elements)):
            for element_name, definition in page_spec.elements.items():
                result = await self._verify_element(root, element_name, definition)
                results[element_name] = result

                if self.console:
                    self._print_element_result(result)

            verified = sum(1 for r in results.values() if r.status == 'verified')
            page_result = PageVerificationResult(
                total_elements=len(results),
                verified_count=verified,
                required=list(required or []),
                results=results,
            )
            if not page_result.success:
                logfire.warn('Required elements failed verification', missing=page_result.missing_required)

        if self.console:
            self.console.print(f'  → Summary: {verified}/{len(results)} elements verified')

        return page_result

    async def _verify_element(
        self,
        root: Locatable,
        element_name: str,
        definition: SelectorDef,
    ) -> ElementVerificationResult:
        """Verify one element's candidates in preference order.

        Args:
            root: Page to query
            element_name: Role name of the element
            definition: The element's selector definition

        Returns:
            ElementVerificationResult for the first matching candidate, or a failure

        """
        failed_selectors: list[SelectorFailure] = []

        for index, selector in enumerate(definition.candidates):
            count, reason = await self._test_selector(root, selector)
            if count:
                return ElementVerificationResult(
                    element_name=element_name,
                    status='verified',
                    working_index=index,
                    selector=selector,
                    match_count=count,
                    failed_selectors=failed_selectors,
                )
            failed_selectors.append(SelectorFailure(index=index, selector=selector, reason=reason))

        return ElementVerificationResult(
            element_name=element_name,
            status='failed',
            failed_selectors=failed_selectors,
        )

    async def _test_selector(self, root: Locatable, selector: str) -> tuple[int, str]:
        """Count the elements a selector finds.

        Args:
            root: Page to query
            selector: CSS selector string

        Returns:
            Tuple of (match count, reason)

        """
        try:
            count = await root.locator(selector).count()
        except Exception as e:
            return 0, f'invalid_selector: {e}'
        return (count, 'found') if count else (0, 'no_elements_found')

    def _print_element_result(self, result: ElementVerificationResult) -> None:
        """Print verification result for a single element."""
        if not self.console:
            return

        if result.status == 'verified':
            selector = escape(str(result.selector))
            if not result.used_fallback:
                self.console.print(f'  ✓ {result.element_name}: primary works ({selector})')
            else:
                self.console.print(f'  → {result.element_name}: using fallback #{result.working_index} ({selector})')
        else:
            self.console.print(f'  ✗ {result.element_name}: all selectors failed')
            for failure in result.failed_selectors:
                self.console.print(f'      → #{failure.index}: "{escape(failure.selector)}" → {escape(failure.reason)}')
