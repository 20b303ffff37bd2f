from Shortcut.Suggestion.Implementation.OpenSearchSuggestion import OpenSearchSuggestion


class DuckDuckGoSuggestion(OpenSearchSuggestion):
    name = "DuckDuckGo"
    endpoint = "https://duckduckgo.com/ac/"
    extra_params = {"type": "list"}
