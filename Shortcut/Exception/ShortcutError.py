"""Shortcut resolver error classes."""
from typing import Optional


class ShortcutError(Exception):

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

"""Raised when the shortcut records cannot be read or parsed."""
class LoadError(ShortcutError):
    pass

"""Raised when a suggestion provider fails or returns something unusable.
        Attributes:
            provider: provider id the fetch was issued against
            status_code: HTTP status when the provider answered with one
"""
class SuggestionFetchError(ShortcutError):
    def __init__(self, message: str, provider: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code

"""Raised when a URL or local path cannot be handed to the shell."""
class ActivationError(ShortcutError):
    def __init__(self, message: str, target: str):
        super().__init__(message)
        self.target = target
