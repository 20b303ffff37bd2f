import json
import pytest

from Shortcut.Exception.ShortcutError import LoadError
from Shortcut.Storage.JsonRecordSource import JsonRecordSource, DEFAULT_RECORDS, parse_records


def test_load_records(tmp_path):
    path = tmp_path / "shortcuts.json"
    path.write_text(json.dumps({
        "Google": {"Url": "https://www.google.com/search?q=%s", "Keyword": "g", "SuggestionProvider": "Google", "IsDefault": True},
        "Hacker News": {"Url": " https://news.ycombinator.com "},
    }), encoding="utf-8")
    records = JsonRecordSource(str(path)).Load()
    assert [r.name for r in records] == ["Google", "Hacker News"]
    google, news = records
    assert google.keyword == "g"
    assert google.suggestion_provider == "Google"
    assert google.is_default is True
    assert news.keyword == "Hacker News"
    assert news.url == "https://news.ycombinator.com"
    assert news.icon_path is None
    assert news.suggestion_provider is None


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "nested" / "shortcuts.json"
    records = JsonRecordSource(str(path)).Load()
    assert path.exists()
    assert len(records) == len(DEFAULT_RECORDS)
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_RECORDS


def test_invalid_json_raises_load_error(tmp_path):
    path = tmp_path / "shortcuts.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoadError) as exc:
        JsonRecordSource(str(path)).Load()
    assert "Invalid JSON" in exc.value.message


def test_parse_rejects_empty_url():
    with pytest.raises(LoadError):
        parse_records({"Broken": {"Url": "  "}})


def test_parse_rejects_multiple_defaults():
    data = {
        "A": {"Url": "https://a.com/%s", "IsDefault": True},
        "B": {"Url": "https://b.com/%s", "IsDefault": True},
    }
    with pytest.raises(LoadError) as exc:
        parse_records(data)
    assert "A, B" in exc.value.message


def test_parse_rejects_non_object():
    with pytest.raises(LoadError):
        parse_records(["https://a.com/%s"])
    with pytest.raises(LoadError):
        parse_records({"A": "https://a.com/%s"})


def test_get_path():
    assert JsonRecordSource("/tmp/x.json").GetPath() == "/tmp/x.json"
