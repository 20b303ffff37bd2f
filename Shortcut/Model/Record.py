from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

"""A configured web search shortcut."""
@dataclass(frozen=True)
class Record:
    name: str
    keyword: str
    url: str
    icon_path: Optional[str] = None
    suggestion_provider: Optional[str] = None
    is_default: bool = False

    """Bare site address used by the "visit site" context action."""
    @property
    def domain(self) -> str:
        first = self.url.split()[0]
        parsed = urlparse(first)
        if not parsed.scheme or not parsed.netloc:
            return first
        return f"{parsed.scheme}://{parsed.netloc}"
