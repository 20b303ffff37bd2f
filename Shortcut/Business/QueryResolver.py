"""
Immediate resolution run on every keystroke. Pure in-memory work over a record
snapshot plus whatever suggestion rows the cache currently holds.
"""
from typing import List, Optional

from Shortcut.Model.ResolvedResult import ResolvedResult, Activation, ActivationKind, ICON_PATHS
from Shortcut.Storage.RecordStore import RecordStore
from Shortcut.Business.SuggestionCache import SuggestionCache
from Shortcut.Business import ResultFactory
from Shortcut.Utility.tokenizer import tokenize

RELOAD_COMMAND = "!reload"
CONFIG_COMMAND = "!config"


def is_admin_command(search: str) -> bool:
    return search.strip().lower() in (RELOAD_COMMAND, CONFIG_COMMAND)


def error_result(load_error: str) -> ResolvedResult:
    return ResolvedResult(
        title="Failed to load shortcuts",
        subtitle=f"Error: {load_error}",
        icon=ICON_PATHS["Warn"],
        score=0,
    )


class QueryResolver:
    def __init__(self, store: RecordStore, cache: SuggestionCache):
        self.store = store
        self.cache = cache

    def Resolve(self, search: Optional[str], action_keyword: Optional[str] = None) -> List[ResolvedResult]:
        if search is None:
            return []
        self.cache.Observe(search)
        command = search.strip().lower()

        if command == RELOAD_COMMAND:
            return [ResolvedResult(
                title="Reload shortcuts",
                subtitle="Reload the shortcut records from the config file",
                icon=ICON_PATHS["Reload"],
                score=0,
                activation=Activation(ActivationKind.RELOAD),
                query_text_display=search,
            )]
        if command == CONFIG_COMMAND:
            path = self.store.GetPath()
            return [ResolvedResult(
                title="Open config file",
                subtitle=path,
                icon=ICON_PATHS["Config"],
                score=0,
                activation=Activation(ActivationKind.OPEN_PATH, path),
                query_text_display=search,
                context_data=path,
            )]

        records = self.store.Snapshot()
        if records.load_error:
            return [error_result(records.load_error)]

        tokens = tokenize(search)
        if tokens is None:
            return [ResultFactory.select_result(r, "", action_keyword) for r in records.prefix_search("")]

        results: List[ResolvedResult] = []
        if tokens.rest is None:
            results.extend(ResultFactory.select_result(r, tokens.head, action_keyword) for r in records.prefix_search(tokens.head))

        record = records.match_keyword_or_name(tokens.head)
        if tokens.rest is not None and record is not None:
            results.append(ResultFactory.search_result(record, tokens.rest, search))
            results.extend(self.cache.RowsFor(record))

        default = records.default_record
        if default is not None and records.match_keyword(tokens.head) is None:
            text = search.strip()
            results.append(ResultFactory.search_result(default, text, search, is_default=True))
            results.extend(self.cache.RowsFor(default))
        return results
