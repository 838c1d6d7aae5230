"""Pydantic models for page-spec verification results."""

from typing import Literal

from pydantic import BaseModel, Field


class SelectorFailure(BaseModel):
    """Details about why a single candidate selector failed.

    Attributes:
        index: Position of the candidate in the fallback list
        selector: The CSS selector that was attempted
        reason: Why the selector failed ('no_elements_found' or 'invalid_selector: ...')

    """

    index: int = Field(description='Candidate position (0 = most preferred)')
    selector: str = Field(description='The CSS selector attempted')
    reason: str = Field(description='Why the selector failed')


class ElementVerificationResult(BaseModel):
    """Result of verifying one element definition of a page spec.

    Attributes:
        element_name: Role name of the element
        status: Whether any candidate matched
        working_index: Position of the first matching candidate, or None
        selector: The candidate that matched, if any
        match_count: Number of elements the matching candidate found
        failed_selectors: Candidates tried before the match (or all, on failure)

    """

    element_name: str = Field(description='Name of the element')
    status: Literal['verified', 'failed'] = Field(description='Verification status')
    working_index: int | None = Field(default=None, description='Which candidate worked')
    selector: str | None = Field(default=None, description='Selector that worked')
    match_count: int = Field(default=0, description='Elements matched by the working selector')
    failed_selectors: list[SelectorFailure] = Field(default_factory=list, description='Failed candidates with reasons')

    @property
    def used_fallback(self) -> bool:
        """True when a later candidate had to be used."""
        return bool(self.working_index)


class PageVerificationResult(BaseModel):
    """Verification result for every element of a page spec.

    Attributes:
        total_elements: Number of elements checked
        verified_count: Number of elements with a matching candidate
        required: Element names that must verify for the page to pass
        results: Per-element results keyed by element name

    """

    total_elements: int = Field(description='Total elements checked')
    verified_count: int = Field(description='Elements that matched')
    required: list[str] = Field(default_factory=list, description='Elements that must match')
    results: dict[str, ElementVerificationResult] = Field(default_factory=dict, description='Per-element results')

    @property
    def verified_elements(self) -> list[str]:
        """Names of elements that matched."""
        return [name for name, result in self.results.items() if result.status == 'verified']

    @property
    def missing_required(self) -> list[str]:
        """Required element names that did not match (or are not defined)."""
        return [
            name for name in self.required if name not in self.results or self.results[name].status != 'verified'
        ]

    @property
    def success(self) -> bool:
        """True if every required element matched."""
        return not self.missing_required
