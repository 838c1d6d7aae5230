"""Extracts scalar values and nested records using selector definitions."""

from chatwright.core.locatable import Locatable, Locator
from chatwright.core.resolver import resolve_locator
from chatwright.exceptions import SelectorDefinitionError
from chatwright.models.messages import ExtractedRecord, ExtractedValue
from chatwright.models.selectors import SelectorDef

DEFAULT_MAX_DEPTH = 16


async def read_value(locator: Locator, definition: SelectorDef) -> str | None:
    """Read one scalar from the first element of a locator.

    Args:
        locator: Locator over the element to read
        definition: Definition whose attr decides what to read

    Returns:
        Trimmed text content, or the attribute value. None when absent.

    """
    element = locator.first
    if definition.reads_text:
        text = await element.text_content()
        return text.strip() if text is not None else None
    return await element.get_attribute(definition.attr)


async def extract_from(
    root: Locatable,
    definition: SelectorDef,
    max_depth: int = DEFAULT_MAX_DEPTH,
    _depth: int = 0,
) -> list[ExtractedValue]:
    """Extract data from every element matched by a definition.

    Each match yields a record (field name -> nested extraction list) when
    the definition has fields, otherwise a scalar. Matches are addressed by
    index, so a DOM that mutates between reads can shift results.

    Args:
        root: Page or locator to scope the query to
        definition: Selector definition to extract
        max_depth: Deepest allowed level of nested fields

    Returns:
        One entry per matched element in DOM order; empty when nothing matches.

    Raises:
        SelectorDefinitionError: If fields are nested deeper than max_depth

    """
    if _depth > max_depth:
        raise SelectorDefinitionError(f'Selector fields nested deeper than {max_depth} levels')

    locator = await resolve_locator(root, definition.selector)
    count = await locator.count()

    out: list[ExtractedValue] = []
    for i in range(count):
        item = locator.nth(i)
        if definition.fields is not None:
            record: ExtractedRecord = {}
            for key, sub in definition.fields.items():
                record[key] = await extract_from(item, sub, max_depth=max_depth, _depth=_depth + 1)
            out.append(record)
        else:
            out.append(await read_value(item, definition))
    return out
