"""Custom exceptions for chatwright."""


class ChatwrightError(Exception):
    """Base class for all chatwright exceptions."""

    pass


class SelectorNotDefinedError(ChatwrightError):
    """Raised when an operation needs an element the page spec does not define."""

    def __init__(self, element_names: list[str] | tuple[str, ...]):
        """Initialize the configuration error.

        Args:
            element_names: Names of the missing element definitions

        """
        self.element_names = list(element_names)
        names = ' or '.join(self.element_names)
        super().__init__(f'{names} not defined for this page')


class SelectorDefinitionError(ChatwrightError):
    """Raised when a selector definition cannot be walked (e.g. nested too deeply)."""

    pass


class SpecLoadError(ChatwrightError):
    """Raised when a stored site spec cannot be read or validated."""

    def __init__(self, path: str, reason: str):
        """Initialize spec load error.

        Args:
            path: Path of the spec file that failed to load
            reason: Why loading failed

        """
        self.path = path
        self.reason = reason
        super().__init__(f'Could not load site spec from {path}: {reason}')
