from Shortcut.Utility.tokenizer import tokenize, Tokens
from Shortcut.Utility.url import encode, build, expand


def test_tokenize_head_and_rest():
    assert tokenize("g golang tutorial") == Tokens(head="g", rest="golang tutorial")


def test_tokenize_trims_and_splits_on_whitespace_run():
    assert tokenize("  wiki \t  large   language model ") == Tokens(head="wiki", rest="large   language model")


def test_tokenize_head_only():
    assert tokenize(" gh ") == Tokens(head="gh")


def test_tokenize_empty():
    assert tokenize("") is None
    assert tokenize("   ") is None
    assert tokenize(None) is None


def test_encode_escapes_reserved_characters():
    assert encode("c++ & c#/x y") == "c%2B%2B%20%26%20c%23%2Fx%20y"


def test_build_replaces_every_placeholder():
    assert build("https://a.com/%s?q=%s", "cat dog") == "https://a.com/cat%20dog?q=cat%20dog"


def test_build_static_template_unchanged():
    assert build("https://news.ycombinator.com", "anything at all") == "https://news.ycombinator.com"


def test_expand_multi_url_template():
    urls = expand(build("https://a.com/%s https://b.com/%s", "cat"))
    assert urls == ["https://a.com/cat", "https://b.com/cat"]


def test_expand_single_url():
    assert expand("https://a.com/x") == ["https://a.com/x"]
