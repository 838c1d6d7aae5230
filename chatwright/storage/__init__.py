"""Site spec storage."""

from chatwright.storage.persistence import SpecStorage, load_page_specs, load_site_spec

__all__ = ['SpecStorage', 'load_page_specs', 'load_site_spec']
