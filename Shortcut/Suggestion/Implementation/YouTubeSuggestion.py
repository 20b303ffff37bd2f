from Shortcut.Suggestion.Implementation.GoogleSuggestion import GoogleSuggestion


class YouTubeSuggestion(GoogleSuggestion):
    name = "YouTube"
    extra_params = {"client": "firefox", "ds": "yt"}
