"""
Lightweight HTTP client shared by suggestion providers to centralize timeouts
and error handling.
"""
from typing import Any, Dict, Optional
import requests
from Shortcut.Exception.ShortcutError import SuggestionFetchError

USER_AGENT = "websearch-shortcut/1.0"


class SuggestionHttpClient:
    def __init__(self, timeout: float = 2.0, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
        self.timeout = timeout

    def _handle_response(self, response: requests.Response, provider: str) -> Any:
        if response.status_code == 429:
            raise SuggestionFetchError(f"{provider} rate limited the request", provider, 429)
        elif response.status_code != 200:
            raise SuggestionFetchError(f"{provider} returned HTTP {response.status_code}", provider, response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise SuggestionFetchError(f"{provider} returned invalid JSON", provider, response.status_code) from e

    def get_json(self, url: str, params: Dict[str, Any], provider: str) -> Any:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise SuggestionFetchError(f"{provider} timed out after {self.timeout}s", provider) from e
        except requests.exceptions.RequestException as e:
            raise SuggestionFetchError(f"{provider} request failed: {e}", provider) from e
        return self._handle_response(response, provider)
