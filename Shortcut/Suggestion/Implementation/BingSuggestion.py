from Shortcut.Suggestion.Implementation.OpenSearchSuggestion import OpenSearchSuggestion


class BingSuggestion(OpenSearchSuggestion):
    name = "Bing"
    endpoint = "https://api.bing.com/osjson.aspx"
    query_param = "query"
