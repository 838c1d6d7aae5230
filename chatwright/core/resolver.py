"""Resolves ordered fallback selectors to a locator."""

import logging

from chatwright.core.locatable import Locatable, Locator
from chatwright.models.selectors import CssSelector, normalize_selector

logger = logging.getLogger(__name__)


async def resolve_locator(root: Locatable, selector: CssSelector) -> Locator:
    """Return a locator for the first candidate selector that matches under root.

    Root can be a page or a locator (for nested queries). When no candidate
    matches, the locator for the first candidate is returned so that whatever
    the caller does next fails with an error naming that selector.

    Args:
        root: Page or locator to query within
        selector: One selector or an ordered list of fallbacks

    Returns:
        Locator bound to the chosen candidate

    """
    candidates = normalize_selector(selector)
    for index, candidate in enumerate(candidates):
        locator = root.locator(candidate)
        if await locator.count():
            if index:
                logger.debug(f'Resolved fallback #{index}: {candidate}')
            return locator

    logger.debug(f'No candidate matched, using first: {candidates[0]}')
    return root.locator(candidates[0])
