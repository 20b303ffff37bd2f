"""URL template utilities for shortcut records."""
from typing import List
from urllib.parse import quote

PLACEHOLDER = "%s"


def encode(term: str) -> str:
    return quote(term, safe="")


def build(template: str, term: str) -> str:
    if PLACEHOLDER not in template:
        return template
    return template.replace(PLACEHOLDER, encode(term))


def expand(urls: str) -> List[str]:
    return urls.split()
