"""
Builders for the rows both resolvers emit, so the immediate and delayed
paths render shortcuts identically.
"""
from typing import Optional

from Shortcut.Model.Record import Record
from Shortcut.Model.SuggestionItem import SuggestionItem
from Shortcut.Model.ResolvedResult import (
    ResolvedResult, Activation, ActivationKind, ICON_PATHS,
    SUGGESTION_SCORE, SELECT_SCORE, SELECT_EXACT_SCORE, SEARCH_SCORE, DEFAULT_SEARCH_SCORE,
)
from Shortcut.Utility import url as url_builder


def record_icon(record: Record) -> str:
    return record.icon_path or ICON_PATHS["Search"]


def narrow_query(record: Record, action_keyword: Optional[str] = None) -> str:
    if not action_keyword or not action_keyword.strip():
        return f"{record.name} "
    return f"{action_keyword} {record.name} "


def select_result(record: Record, typed: str, action_keyword: Optional[str] = None) -> ResolvedResult:
    exact = record.keyword == typed or record.name == typed
    return ResolvedResult(
        title=record.name,
        subtitle=f"Select {record.name} to search",
        icon=record_icon(record),
        score=SELECT_EXACT_SCORE if exact else SELECT_SCORE,
        activation=Activation(ActivationKind.CHANGE_QUERY, narrow_query(record, action_keyword)),
        record=record,
        query_text_display=typed,
    )


def search_result(record: Record, term: str, search: str, is_default: bool = False) -> ResolvedResult:
    title = record.name if is_default and not search.strip() else f"{record.name} | {term}"
    return ResolvedResult(
        title=title,
        subtitle=f"Search {record.name} for '{term}'",
        icon=record_icon(record),
        score=DEFAULT_SEARCH_SCORE if is_default else SEARCH_SCORE,
        activation=Activation(ActivationKind.OPEN_URL, url_builder.build(record.url, term)),
        record=record,
        query_text_display=search,
    )


"""`head` is the typed keyword for explicit searches; default-record rows have none."""
def suggestion_result(record: Record, item: SuggestionItem, head: Optional[str] = None) -> ResolvedResult:
    return ResolvedResult(
        title=item.title,
        subtitle=item.description,
        icon=ICON_PATHS["Suggestion"],
        score=SUGGESTION_SCORE,
        activation=Activation(ActivationKind.OPEN_URL, url_builder.build(record.url, item.title)),
        record=record,
        query_text_display=f"{head} {item.title}" if head else item.title,
    )
