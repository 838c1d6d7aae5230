"""Handles saving and loading AI assistant site specs to/from JSON files."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from chatwright.exceptions import SpecLoadError
from chatwright.models import AiAssistantSiteSpec, SiteSpec
from chatwright.utils.files import init_chatwright

site_spec_adapter = TypeAdapter(SiteSpec)


def _read_json(path: str | Path) -> Any:
    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except OSError as e:
        raise SpecLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise SpecLoadError(str(path), f'invalid JSON: {e}') from e


def load_site_spec(path: str | Path) -> AiAssistantSiteSpec:
    """Read and validate a site spec JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        The validated site spec

    Raises:
        SpecLoadError: If the file is missing, not JSON, or not a valid site spec

    """
    data = _read_json(path)
    try:
        return AiAssistantSiteSpec.model_validate(data)
    except ValidationError as e:
        raise SpecLoadError(str(path), f'{e.error_count()} validation error(s): {e}') from e


def load_page_specs(path: str | Path) -> SiteSpec:
    """Read a generic spec file mapping page names to urlMatch-based page specs.

    Raises:
        SpecLoadError: If the file is missing, not JSON, or not a valid mapping of page specs

    """
    data = _read_json(path)
    try:
        return site_spec_adapter.validate_python(data)
    except ValidationError as e:
        raise SpecLoadError(str(path), f'{e.error_count()} validation error(s): {e}') from e


class SpecStorage:
    """Manages site spec storage in JSON files.

    Attributes:
        storage_dir: Directory path where spec files are stored

    """

    def __init__(self, storage_dir: str | None = None):
        """Initialize the storage manager.

        Args:
            storage_dir: Directory for spec files. Defaults to None (.chatwright/specs in the project root).

        """
        if storage_dir is None:
            self.storage_dir = str(init_chatwright('specs'))
        else:
            os.makedirs(storage_dir, exist_ok=True)
            self.storage_dir = storage_dir

    def save_spec(self, site: str, spec: AiAssistantSiteSpec) -> str:
        """Save a site spec as JSON using the camelCase keys of the spec format.

        Args:
            site: Site name or domain (e.g., 'grok.com')
            spec: Site spec to save

        Returns:
            Path to the saved file.

        """
        filepath = self._get_filepath(site)
        data = spec.model_dump(by_alias=True, exclude_none=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return filepath

    def load_spec(self, site: str) -> AiAssistantSiteSpec | None:
        """Load a site spec.

        Args:
            site: Site name or domain

        Returns:
            The site spec, or None if none is stored for the site.

        Raises:
            SpecLoadError: If the stored file is not a valid site spec

        """
        filepath = self._get_filepath(site)
        if not os.path.exists(filepath):
            return None
        return load_site_spec(filepath)

    def spec_exists(self, site: str) -> bool:
        """Check if a spec is stored for a site."""
        return os.path.exists(self._get_filepath(site))

    def list_sites(self) -> list[str]:
        """List all sites with stored specs.

        Returns:
            Sorted list of site names.

        """
        if not os.path.exists(self.storage_dir):
            return []

        sites = []
        for filename in os.listdir(self.storage_dir):
            if filename.startswith('spec_') and filename.endswith('.json'):
                sites.append(filename[5:-5].replace('_', '.'))

        return sorted(sites)

    def _get_filepath(self, site: str) -> str:
        """Get filepath for a site's spec file."""
        safe_site = site.lower().removeprefix('www.').replace('.', '_').replace('/', '_')
        return os.path.join(self.storage_dir, f'spec_{safe_site}.json')
