"""Selector resolution, extraction and verification."""

from chatwright.core.extraction import extract_from, read_value
from chatwright.core.locatable import Locatable, Locator, WaitState
from chatwright.core.resolver import resolve_locator
from chatwright.core.snapshot import SnapshotLocator, SnapshotPage
from chatwright.core.verification import SelectorVerifier

__all__ = [
    'Locatable',
    'Locator',
    'WaitState',
    'resolve_locator',
    'extract_from',
    'read_value',
    'SelectorVerifier',
    'SnapshotLocator',
    'SnapshotPage',
]
