from Shortcut.Suggestion.Implementation.OpenSearchSuggestion import OpenSearchSuggestion


class GoogleSuggestion(OpenSearchSuggestion):
    name = "Google"
    endpoint = "https://suggestqueries.google.com/complete/search"
    extra_params = {"client": "firefox"}
