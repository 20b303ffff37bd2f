"""Query tokenizing shared by the immediate and delayed resolvers."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tokens:
    head: str
    rest: Optional[str] = None


def tokenize(raw: Optional[str]) -> Optional[Tokens]:
    text = (raw or "").strip()
    if not text:
        return None
    parts = text.split(None, 1)
    if len(parts) == 1:
        return Tokens(head=parts[0])
    return Tokens(head=parts[0], rest=parts[1])
