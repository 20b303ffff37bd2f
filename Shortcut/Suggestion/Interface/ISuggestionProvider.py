"""
Suggestion provider abstraction.
Each implementation talks to one autocomplete backend (search engine, encyclopedia,
package registry, ...) and returns its completions as `SuggestionItem`s in the
order the backend ranked them.
"""

from abc import ABC, abstractmethod
from typing import List

from Shortcut.Model.SuggestionItem import SuggestionItem


class ISuggestionProvider(ABC):
    """Abstract suggestion provider interface."""

    @abstractmethod
    def QuerySuggestions(self, query: str, limit: int = 8) -> List[SuggestionItem]:
        """Fetch completions for `query`; raise SuggestionFetchError on failure."""
        pass
