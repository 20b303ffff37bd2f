from Shortcut.Model.Record import Record
from Shortcut.Model.ResolvedResult import ResolvedResult, ActivationKind, SUGGESTION_SCORE
from Shortcut.Exception.ShortcutError import LoadError
from Shortcut.Storage.IRecordSource import IRecordSource
from Shortcut.Storage.RecordStore import RecordStore
from Shortcut.Business.SuggestionCache import SuggestionCache
from Shortcut.Business.QueryResolver import QueryResolver

GOOGLE = Record("Google", "g", "https://www.google.com/search?q=%s", suggestion_provider="Google", is_default=True)
GITHUB = Record("GitHub", "gh", "https://github.com/search?q=%s")
BOTH = Record("Both", "both", "https://a.com/%s https://b.com/%s")
NEWS = Record("News", "hn", "https://news.ycombinator.com", icon_path="Images/hn.png")


class FakeSource(IRecordSource):
    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error

    def Load(self):
        if self.error:
            raise LoadError(self.error)
        return list(self.records)

    def GetPath(self):
        return "/tmp/shortcuts.json"


def make_resolver(records=(GOOGLE, GITHUB, BOTH, NEWS), error=None):
    cache = SuggestionCache()
    return QueryResolver(RecordStore(FakeSource(list(records), error)), cache), cache


def cached_row(title):
    return ResolvedResult(title=title, subtitle="", icon="Images/Suggestion.png", score=SUGGESTION_SCORE)


def test_empty_input_lists_every_record_for_narrowing():
    resolver, _ = make_resolver()
    results = resolver.Resolve("")
    assert [r.record for r in results] == [GOOGLE, GITHUB, BOTH, NEWS]
    assert all(r.activation.kind == ActivationKind.CHANGE_QUERY for r in results)
    assert all(r.score == 100 for r in results)
    assert results[1].activation.target == "GitHub "


def test_whitespace_only_input_is_empty():
    resolver, _ = make_resolver()
    assert len(resolver.Resolve("   ")) == 4


def test_none_input():
    resolver, _ = make_resolver()
    assert resolver.Resolve(None) == []


def test_reserved_commands_short_circuit():
    resolver, _ = make_resolver()
    reload_rows = resolver.Resolve("  !RELOAD ")
    assert len(reload_rows) == 1
    assert reload_rows[0].activation.kind == ActivationKind.RELOAD

    config_rows = resolver.Resolve("!Config")
    assert len(config_rows) == 1
    assert config_rows[0].activation.kind == ActivationKind.OPEN_PATH
    assert config_rows[0].activation.target == "/tmp/shortcuts.json"
    assert config_rows[0].context_data == "/tmp/shortcuts.json"


def test_reserved_commands_win_over_load_error():
    resolver, _ = make_resolver(error="bad file")
    assert resolver.Resolve("!reload")[0].activation.kind == ActivationKind.RELOAD


def test_load_error_replaces_results():
    resolver, _ = make_resolver(error="Invalid JSON in shortcuts.json")
    results = resolver.Resolve("g golang")
    assert len(results) == 1
    assert results[0].record is None
    assert results[0].activation.kind == ActivationKind.NONE
    assert "Invalid JSON" in results[0].subtitle


def test_explicit_keyword_search():
    resolver, _ = make_resolver()
    results = resolver.Resolve("g golang tutorial")
    assert len(results) == 1
    row = results[0]
    assert row.record is GOOGLE
    assert row.score == 1000
    assert row.title == "Google | golang tutorial"
    assert row.activation.kind == ActivationKind.OPEN_URL
    assert row.activation.target == "https://www.google.com/search?q=golang%20tutorial"


def test_keyword_match_is_case_insensitive():
    resolver, _ = make_resolver()
    results = resolver.Resolve("GH react")
    explicit = [r for r in results if r.score == 1000]
    assert explicit[0].record is GITHUB


def test_unknown_head_falls_back_to_default_with_full_input():
    resolver, _ = make_resolver()
    results = resolver.Resolve("  what is golang ")
    assert len(results) == 1
    assert results[0].record is GOOGLE
    assert results[0].score == 1001
    assert results[0].activation.target == "https://www.google.com/search?q=what%20is%20golang"


def test_no_default_and_no_match():
    resolver, _ = make_resolver(records=(GITHUB, NEWS))
    assert resolver.Resolve("what is golang") == []


def test_head_only_lists_prefix_matches_with_exact_bonus():
    resolver, _ = make_resolver()
    results = resolver.Resolve("g")
    scores = {r.record.name: r.score for r in results}
    assert scores == {"Google": 101, "GitHub": 100}


def test_head_only_unknown_token_gets_default_row():
    resolver, _ = make_resolver()
    results = resolver.Resolve("xyz")
    assert len(results) == 1
    assert results[0].score == 1001
    assert results[0].activation.target == "https://www.google.com/search?q=xyz"


def test_name_match_gets_explicit_and_default_rows():
    resolver, _ = make_resolver()
    results = resolver.Resolve("github react")
    assert sorted(r.score for r in results) == [1000, 1001]
    explicit = next(r for r in results if r.score == 1000)
    default = next(r for r in results if r.score == 1001)
    assert explicit.activation.target == "https://github.com/search?q=react"
    assert default.activation.target == "https://www.google.com/search?q=github%20react"


def test_multi_url_template():
    resolver, _ = make_resolver()
    row = resolver.Resolve("both cat")[0]
    assert row.activation.target == "https://a.com/cat https://b.com/cat"


def test_static_bookmark_ignores_term():
    resolver, _ = make_resolver()
    row = resolver.Resolve("hn anything")[0]
    assert row.activation.target == "https://news.ycombinator.com"
    assert row.icon == "Images/hn.png"


def test_action_keyword_prefixes_narrowed_query():
    resolver, _ = make_resolver()
    results = resolver.Resolve("gh", action_keyword="ws")
    assert results[0].activation.target == "ws GitHub "


def test_cached_suggestions_follow_search_rows():
    resolver, cache = make_resolver()
    cache.Commit(cache.Observe("gh rea"), [cached_row("react"), cached_row("redux")], GITHUB)

    results = resolver.Resolve("gh react")
    assert [r.title for r in results] == ["GitHub | react", "react", "redux"]


def test_cached_suggestions_follow_default_row():
    resolver, cache = make_resolver()
    cache.Commit(cache.Observe("golan"), [cached_row("golang")], GOOGLE)
    results = resolver.Resolve("golang")
    assert [r.title for r in results] == ["Google | golang", "golang"]


def test_cached_suggestions_not_appended_when_browsing():
    resolver, cache = make_resolver(records=(GITHUB, NEWS))
    cache.Commit(cache.Observe("g"), [cached_row("golang")])
    results = resolver.Resolve("g")
    assert [r.title for r in results] == ["GitHub"]


def test_cached_suggestions_only_follow_their_own_record():
    resolver, cache = make_resolver()
    cache.Commit(cache.Observe("g rea"), [cached_row("react hooks")], GOOGLE)

    results = resolver.Resolve("gh react")
    assert [r.title for r in results] == ["GitHub | react"]
    results = resolver.Resolve("g react")
    assert [r.title for r in results] == ["Google | react", "react hooks"]
