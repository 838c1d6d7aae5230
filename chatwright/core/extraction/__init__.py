"""Structured extraction from resolved scopes."""

from chatwright.core.extraction.extractor import DEFAULT_MAX_DEPTH, extract_from, read_value

__all__ = ['DEFAULT_MAX_DEPTH', 'extract_from', 'read_value']
