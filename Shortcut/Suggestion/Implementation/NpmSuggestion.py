from __future__ import annotations
from typing import Any, List

from Shortcut.Model.SuggestionItem import SuggestionItem
from Shortcut.Exception.ShortcutError import SuggestionFetchError
from Shortcut.Suggestion.Interface.ISuggestionProvider import ISuggestionProvider
from Shortcut.Suggestion.SuggestionHttpClient import SuggestionHttpClient

import logging
logger = logging.getLogger(__name__)

"""Package name completions from the npm registry search API."""
class NpmSuggestion(ISuggestionProvider):
    name = "Npm"
    endpoint = "https://registry.npmjs.org/-/v1/search"

    def __init__(self, http: SuggestionHttpClient):
        self.http = http

    def QuerySuggestions(self, query: str, limit: int = 8) -> List[SuggestionItem]:
        data = self.http.get_json(self.endpoint, {"text": query, "size": limit}, self.name)
        return self.ParseSuggestions(data)[:limit]

    def ParseSuggestions(self, data: Any) -> List[SuggestionItem]:
        objects = data.get("objects") if isinstance(data, dict) else None
        if not isinstance(objects, list):
            raise SuggestionFetchError("Npm returned an unexpected payload", self.name)
        items = []
        for entry in objects:
            package = entry.get("package", {}) if isinstance(entry, dict) else {}
            name = package.get("name")
            if not name:
                logger.debug("Skipping npm entry without a package name: %s", entry)
                continue
            items.append(SuggestionItem(title=name, description=package.get("description") or ""))
        return items
