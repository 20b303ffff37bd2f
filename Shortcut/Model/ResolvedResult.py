from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from Shortcut.Model.Record import Record

ICON_PATHS = {
    "Search": "Images/Search.png",
    "Config": "Images/Config.png",
    "Reload": "Images/Reload.png",
    "Suggestion": "Images/Suggestion.png",
    "Warn": "Images/Warn.png",
}

# Rank bands, higher sorts first
SUGGESTION_SCORE = 99
SELECT_SCORE = 100
SELECT_EXACT_SCORE = 101
SEARCH_SCORE = 1000
DEFAULT_SEARCH_SCORE = 1001


class ActivationKind(str, Enum):
    OPEN_URL = "open_url"
    CHANGE_QUERY = "change_query"
    OPEN_PATH = "open_path"
    RELOAD = "reload"
    NONE = "none"


"""What happens when a row is chosen.
    OPEN_URL targets may hold several whitespace separated URLs.
"""
@dataclass(frozen=True)
class Activation:
    kind: ActivationKind
    target: str = ""


"""One row handed back to the launcher host."""
@dataclass
class ResolvedResult:
    title: str
    subtitle: str
    icon: str
    score: int
    activation: Activation = field(default_factory=lambda: Activation(ActivationKind.NONE))
    record: Optional[Record] = None
    query_text_display: Optional[str] = None
    context_data: Optional[str] = None


"""Secondary action offered for a row."""
@dataclass(frozen=True)
class ContextAction:
    title: str
    activation: Activation
