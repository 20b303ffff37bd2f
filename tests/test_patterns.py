from Shortcut.Suggestion.ProviderFactory import ProviderFactory
from Shortcut.Suggestion.SuggestionClient import SuggestionClient
from Shortcut.Suggestion.Implementation.BingSuggestion import BingSuggestion
from Shortcut.Events.event_dispatcher import EventDispatcher


def test_builtin_providers_registered():
    SuggestionClient()
    for key in ("Google", "Bing", "DuckDuckGo", "YouTube", "Wikipedia", "Npm"):
        assert key in ProviderFactory.registered_keys()


def test_provider_factory_register_and_create():
    # register a temporary provider
    ProviderFactory.register("TmpEngine", lambda http: BingSuggestion(http))
    prov = ProviderFactory.create("tmpengine", None)
    assert isinstance(prov, BingSuggestion)


def test_event_dispatcher_subscribe_dispatch():
    disp = EventDispatcher()
    events = []

    def on_reload(**kwargs):
        events.append(("reloaded", kwargs.get("count")))

    disp.subscribe("records_reloaded", on_reload)
    assert disp.dispatch("records_reloaded", count=3) == 1
    assert events == [("reloaded", 3)]

    disp.unsubscribe("records_reloaded", on_reload)
    assert disp.dispatch("records_reloaded", count=4) == 0
    assert events == [("reloaded", 3)]


def test_event_dispatcher_isolates_failing_listener():
    disp = EventDispatcher()
    seen = []

    def broken(**kwargs):
        raise RuntimeError("listener bug")

    disp.subscribe("records_reloaded", broken)
    disp.subscribe("records_reloaded", lambda **kw: seen.append(kw))
    assert disp.dispatch("records_reloaded", count=1) == 1
    assert seen == [{"count": 1}]
