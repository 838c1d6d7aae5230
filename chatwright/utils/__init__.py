"""Utility components for chatwright."""

from chatwright.utils.files import get_project_root, init_chatwright
from chatwright.utils.logging import setup_local_logging, setup_logfire

__all__ = [
    'get_project_root',
    'init_chatwright',
    'setup_local_logging',
    'setup_logfire',
]
