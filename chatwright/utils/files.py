"""Utility functions for file and directory management in chatwright."""

from pathlib import Path

WORKSPACE_DIR = '.chatwright'


def get_project_root() -> Path:
    """Find the project root by searching upwards from the Current Working Directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', WORKSPACE_DIR, 'requirements.txt'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers found (e.g., running in /tmp)
    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .chatwright."""
    return get_project_root() / WORKSPACE_DIR / 'logs'


def init_chatwright(storage_name: str = 'specs') -> Path:
    """Initialize the .chatwright directory and return the storage path."""
    workspace = get_project_root() / WORKSPACE_DIR
    storage_dir = workspace / storage_name
    logs_dir = workspace / 'logs'

    storage_dir.mkdir(parents=True, exist_ok=True)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = workspace / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by chatwright\n*\n')

    return storage_dir
