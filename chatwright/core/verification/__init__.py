"""Page-spec verification against a live or saved page."""

from chatwright.core.verification.verifier import SelectorVerifier

__all__ = ['SelectorVerifier']
