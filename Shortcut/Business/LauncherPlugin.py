import os
from typing import List, Optional

from Shortcut.Model.ResolvedResult import ResolvedResult, Activation, ActivationKind, ContextAction
from Shortcut.Exception.ShortcutError import ActivationError
from Shortcut.Storage.RecordStore import RecordStore
from Shortcut.Suggestion.SuggestionClient import SuggestionClient
from Shortcut.Business.SuggestionCache import SuggestionCache
from Shortcut.Business.QueryResolver import QueryResolver
from Shortcut.Business.SuggestionResolver import SuggestionResolver
from Shortcut.Events.event_dispatcher import RECORDS_RELOADED
from Shortcut.Utility.shell import ShellOpener
from Shortcut.Utility import url as url_builder

import logging
logger = logging.getLogger(__name__)


def ranked(results: List[ResolvedResult]) -> List[ResolvedResult]:
    return sorted(results, key=lambda r: r.score, reverse=True)


class LauncherPlugin:

    """Entry point the launcher host talks to.
    Wires the record store, the two resolvers and the shared suggestion cache,
    and carries out row activations through the shell opener.
    """
    def __init__(self, store: RecordStore, client: Optional[SuggestionClient] = None, opener: Optional[ShellOpener] = None):
        self.store = store
        self.cache = SuggestionCache()
        self.client = client or SuggestionClient()
        self.opener = opener or ShellOpener()
        self.query_resolver = QueryResolver(store, self.cache)
        self.suggestion_resolver = SuggestionResolver(store, self.client, self.cache)
        self.store.dispatcher.subscribe(RECORDS_RELOADED, self._on_records_reloaded)

    def Query(self, search: Optional[str], action_keyword: Optional[str] = None) -> List[ResolvedResult]:
        return ranked(self.query_resolver.Resolve(search, action_keyword))

    def QueryDelayed(self, search: Optional[str], action_keyword: Optional[str] = None) -> List[ResolvedResult]:
        return ranked(self.suggestion_resolver.Resolve(search, action_keyword))

    def ReloadData(self) -> bool:
        return self.store.Reload()

    def Activate(self, activation: Activation) -> bool:
        if activation.kind == ActivationKind.OPEN_URL:
            return self.OpenUrls(activation.target)
        if activation.kind == ActivationKind.OPEN_PATH:
            try:
                self.opener.open_path(activation.target)
            except ActivationError as e:
                logger.error("Cannot open %s: %s", e.target, e.message)
                return False
            return True
        if activation.kind == ActivationKind.RELOAD:
            self.ReloadData()
            return True
        # CHANGE_QUERY keeps the launcher open, the host rewrites its input
        return False

    """Open every URL in `urls`, even after a failure. Succeeds only if all of them open."""
    def OpenUrls(self, urls: str) -> bool:
        targets = url_builder.expand(urls)
        if not targets:
            return False
        success = True
        for target in targets:
            try:
                self.opener.open_url(target)
            except ActivationError as e:
                logger.error("Cannot open %s: %s", e.target, e.message)
                success = False
        return success

    def LoadContextMenus(self, result: ResolvedResult) -> List[ContextAction]:
        if result.context_data is not None:
            folder = os.path.dirname(result.context_data) or result.context_data
            return [ContextAction(
                title="Open containing folder (Ctrl + Enter)",
                activation=Activation(ActivationKind.OPEN_PATH, folder),
            )]
        if result.record is None:
            return []
        return [ContextAction(
            title=f"Open {result.record.name} (Ctrl + Enter)",
            activation=Activation(ActivationKind.OPEN_URL, result.record.domain),
        )]

    def _on_records_reloaded(self, **kwargs) -> None:
        logger.debug("Records reloaded, clearing cached suggestions")
        self.cache.Clear()
