"""
Delayed resolution run when the host reports the user paused typing. Issues at
most one suggestion fetch and augments the immediate rows with its results.
"""
from typing import List, Optional

from Shortcut.Model.ResolvedResult import ResolvedResult
from Shortcut.Exception.ShortcutError import SuggestionFetchError
from Shortcut.Storage.RecordStore import RecordStore
from Shortcut.Suggestion.SuggestionClient import SuggestionClient
from Shortcut.Business.SuggestionCache import SuggestionCache
from Shortcut.Business.QueryResolver import is_admin_command
from Shortcut.Business import ResultFactory
from Shortcut.Utility.tokenizer import tokenize

import logging
logger = logging.getLogger(__name__)


class SuggestionResolver:
    def __init__(self, store: RecordStore, client: SuggestionClient, cache: SuggestionCache):
        self.store = store
        self.client = client
        self.cache = cache

    def Resolve(self, search: Optional[str], action_keyword: Optional[str] = None) -> List[ResolvedResult]:
        if search is None:
            self.cache.Clear()
            return []
        token = self.cache.Observe(search)
        records = self.store.Snapshot()
        tokens = tokenize(search)
        if tokens is None or is_admin_command(search) or records.load_error:
            self.cache.Clear(token)
            return []

        record = records.match_keyword_or_name(tokens.head)
        default = records.default_record
        # Same fallback rule as the immediate path: a head that is not a keyword searches the default
        use_default = default is not None and records.match_keyword(tokens.head) is None
        if record is not None and tokens.rest is not None and (record.suggestion_provider or not use_default):
            active, term, is_default = record, tokens.rest, False
        elif use_default and (record is None or tokens.rest is not None):
            active, term, is_default = default, search.strip(), True
        else:
            # Bare keyword or no shortcut to search with: nothing to suggest yet
            self.cache.Clear(token)
            return []

        if not active.suggestion_provider:
            return []

        try:
            items = self.client.fetch(active.suggestion_provider, term)
        except SuggestionFetchError as e:
            logger.warning("Suggestions unavailable from %s: %s", active.suggestion_provider, e.message)
            items = []

        if not items:
            self.cache.Clear(token)
            return []

        head = None if is_default else tokens.head
        rows = [ResultFactory.suggestion_result(active, item, head) for item in items]
        if not self.cache.Commit(token, rows, active):
            logger.debug("Discarding stale suggestions for %r", search)
            return []

        results = list(rows)
        if is_default and tokens.rest is None:
            results.extend(ResultFactory.select_result(r, tokens.head, action_keyword) for r in records.prefix_search(tokens.head))
        results.append(ResultFactory.search_result(active, term, search, is_default))
        return results
