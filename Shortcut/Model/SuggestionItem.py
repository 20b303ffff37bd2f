from dataclasses import dataclass

"""Autocomplete entry returned by a suggestion provider."""
@dataclass(frozen=True)
class SuggestionItem:
    title: str
    description: str = ""
