from typing import Any, Dict

from Shortcut.Suggestion.Implementation.OpenSearchSuggestion import OpenSearchSuggestion

"""Wikipedia opensearch API, descriptions come back in the third array."""
class WikipediaSuggestion(OpenSearchSuggestion):
    name = "Wikipedia"
    endpoint = "https://en.wikipedia.org/w/api.php"
    query_param = "search"
    extra_params = {"action": "opensearch", "format": "json", "namespace": 0}

    def BuildParams(self, query: str, limit: int) -> Dict[str, Any]:
        params = super().BuildParams(query, limit)
        params["limit"] = limit
        return params
