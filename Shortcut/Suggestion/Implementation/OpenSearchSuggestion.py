from __future__ import annotations
from typing import Any, Dict, List

from Shortcut.Model.SuggestionItem import SuggestionItem
from Shortcut.Exception.ShortcutError import SuggestionFetchError
from Shortcut.Suggestion.Interface.ISuggestionProvider import ISuggestionProvider
from Shortcut.Suggestion.SuggestionHttpClient import SuggestionHttpClient

"""Provider for backends answering in the OpenSearch suggestions format:
    [query, [completion, ...], [description, ...]?, ...]
"""
class OpenSearchSuggestion(ISuggestionProvider):
    name = "OpenSearch"
    endpoint = ""
    query_param = "q"
    extra_params: Dict[str, Any] = {}

    def __init__(self, http: SuggestionHttpClient):
        self.http = http

    def BuildParams(self, query: str, limit: int) -> Dict[str, Any]:
        return {**self.extra_params, self.query_param: query}

    def QuerySuggestions(self, query: str, limit: int = 8) -> List[SuggestionItem]:
        data = self.http.get_json(self.endpoint, self.BuildParams(query, limit), self.name)
        return self.ParseSuggestions(data)[:limit]

    def ParseSuggestions(self, data: Any) -> List[SuggestionItem]:
        if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
            raise SuggestionFetchError(f"{self.name} returned an unexpected payload", self.name)
        descriptions = data[2] if len(data) > 2 and isinstance(data[2], list) else []
        items = []
        for index, title in enumerate(data[1]):
            if not isinstance(title, str) or not title:
                continue
            description = descriptions[index] if index < len(descriptions) else ""
            items.append(SuggestionItem(title=title, description=description if isinstance(description, str) else ""))
        return items
