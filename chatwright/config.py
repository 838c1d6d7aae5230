"""Runtime settings for chatwright.

Values come from keyword arguments or from CHATWRIGHT_* environment
variables (a .env file is honoured via python-dotenv).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from chatwright.core.extraction import DEFAULT_MAX_DEPTH

ENV_PREFIX = 'CHATWRIGHT_'


@dataclass(frozen=True)
class ChatwrightSettings:
    """Timeouts and limits shared by automators.

    Attributes:
        login_timeout_ms: How long wait_for_login waits. Defaults to five minutes for manual login.
        response_timeout_ms: How long wait_for_response waits for generation to finish.
        max_field_depth: Deepest nesting of selector fields the extractor will walk.
    """

    login_timeout_ms: int = 300_000
    response_timeout_ms: int = 60_000
    max_field_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate settings after initialization.

        Raises:
            ValueError: If a timeout or the depth limit is not positive.
        """
        for name in ('login_timeout_ms', 'response_timeout_ms', 'max_field_depth'):
            if getattr(self, name) <= 0:
                raise ValueError(f'{name} must be positive, got {getattr(self, name)}')

    @classmethod
    def from_env(cls, dotenv: bool = True) -> 'ChatwrightSettings':
        """Build settings from CHATWRIGHT_* environment variables.

        Args:
            dotenv: Load a .env file first. Defaults to True.

        Returns:
            Settings with defaults for unset variables

        Raises:
            ValueError: If a variable is not an integer
        """
        if dotenv:
            load_dotenv()

        overrides: dict[str, int] = {}
        for name in ('login_timeout_ms', 'response_timeout_ms', 'max_field_depth'):
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is None or not raw.strip():
                continue
            try:
                overrides[name] = int(raw)
            except ValueError as err:
                raise ValueError(f'{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}') from err
        return cls(**overrides)
