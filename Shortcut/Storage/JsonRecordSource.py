"""
JSON file record source.

File layout: an object keyed by shortcut name.
{
    "Google": {
        "Url": "https://www.google.com/search?q=%s",   # Required
        "Keyword": "g",                                # Optional, defaults to the name
        "SuggestionProvider": "Google",                # Optional
        "IconPath": "Images/google.png",               # Optional
        "IsDefault": true                              # Optional, at most one record
    }
}
"""
import json
import os
import logging
from typing import Any, Dict, List

from Shortcut.Model.Record import Record
from Shortcut.Exception.ShortcutError import LoadError
from Shortcut.Storage.IRecordSource import IRecordSource

logger = logging.getLogger(__name__)

DEFAULT_RECORDS: Dict[str, Dict[str, Any]] = {
    "Google": {"Url": "https://www.google.com/search?q=%s", "Keyword": "g", "SuggestionProvider": "Google"},
    "Bing": {"Url": "https://www.bing.com/search?q=%s", "Keyword": "b", "SuggestionProvider": "Bing"},
    "DuckDuckGo": {"Url": "https://duckduckgo.com/?q=%s", "Keyword": "ddg", "SuggestionProvider": "DuckDuckGo"},
    "YouTube": {"Url": "https://www.youtube.com/results?search_query=%s", "Keyword": "yt", "SuggestionProvider": "YouTube"},
    "Wikipedia": {"Url": "https://en.wikipedia.org/wiki/Special:Search?search=%s", "Keyword": "wiki", "SuggestionProvider": "Wikipedia"},
    "npm": {"Url": "https://www.npmjs.com/search?q=%s", "Keyword": "npm", "SuggestionProvider": "Npm"},
}


def parse_records(data: Any) -> List[Record]:
    if not isinstance(data, dict):
        raise LoadError("Shortcut file must contain a JSON object keyed by shortcut name")
    records = []
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise LoadError(f"Shortcut '{name}' must be an object")
        url = entry.get("Url")
        if not isinstance(url, str) or not url.strip():
            raise LoadError(f"Shortcut '{name}' has no Url")
        keyword = entry.get("Keyword") or name
        if not isinstance(keyword, str):
            raise LoadError(f"Shortcut '{name}' has a non-text Keyword")
        records.append(Record(
            name=name,
            keyword=keyword,
            url=url.strip(),
            icon_path=entry.get("IconPath") or None,
            suggestion_provider=entry.get("SuggestionProvider") or None,
            is_default=bool(entry.get("IsDefault", False)),
        ))
    defaults = [r.name for r in records if r.is_default]
    if len(defaults) > 1:
        raise LoadError(f"Only one default shortcut is allowed, found: {', '.join(defaults)}")
    return records


class JsonRecordSource(IRecordSource):
    def __init__(self, path: str):
        self.path = path

    def GetPath(self) -> str:
        return self.path

    def Load(self) -> List[Record]:
        if not os.path.exists(self.path):
            self._write_defaults()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in {self.path}: {e}") from e
        except OSError as e:
            raise LoadError(f"Cannot read {self.path}: {e}") from e
        records = parse_records(data)
        logger.info("Loaded %d shortcuts from %s", len(records), self.path)
        return records

    def _write_defaults(self) -> None:
        logger.info("Shortcut file not found, writing defaults to %s", self.path)
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(DEFAULT_RECORDS, f, indent=2)
        except OSError as e:
            raise LoadError(f"Cannot create {self.path}: {e}") from e
