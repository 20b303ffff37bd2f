"""Suggestion client: the single network-facing entry point of the resolver.
Built-in providers are registered here and looked up by the id a shortcut
record names in its `SuggestionProvider` field.
"""

from __future__ import annotations
from typing import List, Optional

from Shortcut.Model.SuggestionItem import SuggestionItem
from Shortcut.Exception.ShortcutError import SuggestionFetchError
from Shortcut.Suggestion.ProviderFactory import ProviderFactory
from Shortcut.Suggestion.SuggestionHttpClient import SuggestionHttpClient
from Shortcut.Suggestion.Implementation.GoogleSuggestion import GoogleSuggestion
from Shortcut.Suggestion.Implementation.YouTubeSuggestion import YouTubeSuggestion
from Shortcut.Suggestion.Implementation.BingSuggestion import BingSuggestion
from Shortcut.Suggestion.Implementation.DuckDuckGoSuggestion import DuckDuckGoSuggestion
from Shortcut.Suggestion.Implementation.WikipediaSuggestion import WikipediaSuggestion
from Shortcut.Suggestion.Implementation.NpmSuggestion import NpmSuggestion

import logging
logger = logging.getLogger(__name__)

# Register built-in providers
ProviderFactory.register("Google", lambda http: GoogleSuggestion(http))
ProviderFactory.register("YouTube", lambda http: YouTubeSuggestion(http))
ProviderFactory.register("Bing", lambda http: BingSuggestion(http))
ProviderFactory.register("DuckDuckGo", lambda http: DuckDuckGoSuggestion(http))
ProviderFactory.register("Wikipedia", lambda http: WikipediaSuggestion(http))
ProviderFactory.register("Npm", lambda http: NpmSuggestion(http))


class SuggestionClient:
    def __init__(self, http: Optional[SuggestionHttpClient] = None, limit: int = 8):
        self.http = http or SuggestionHttpClient()
        self.limit = limit

    def fetch(self, provider_id: str, term: str) -> List[SuggestionItem]:
        try:
            provider = ProviderFactory.create(provider_id, self.http)
        except KeyError as e:
            raise SuggestionFetchError(f"Unknown suggestion provider: {provider_id}", provider_id) from e
        logger.debug("Fetching %s suggestions for %r", provider_id, term)
        return provider.QuerySuggestions(term, self.limit)[:self.limit]
