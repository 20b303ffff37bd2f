"""Runtime settings read from the environment (optionally seeded from .env)."""
import os
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SHORTCUTS_FILE = os.path.join("~", ".websearch-shortcut", "shortcuts.json")


def read_env_file(filepath: str = ".env") -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return values
    with open(filepath, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, val = line.removeprefix("export ").split("=", 1)
            val = val.strip()
            if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
                val = val[1:-1]
            values[key.strip()] = val
    return values


def seed_environ(filepath: str = ".env") -> None:
    """Copy .env values into os.environ without overriding what is already set."""
    for key, val in read_env_file(filepath).items():
        os.environ.setdefault(key, val)


@dataclass
class Settings:
    shortcuts_file: str
    suggestion_timeout: float = 2.0
    suggestion_limit: int = 8
    browser_path: Optional[str] = None
    log_level: str = "INFO"
    # Browser origins allowed to call /api/query and /api/health-check, never /api/activate
    cors_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "Settings":
        if env_file:
            seed_environ(env_file)
        timeout = float(os.environ.get("SUGGESTION_TIMEOUT", "2.0"))
        limit = int(os.environ.get("SUGGESTION_LIMIT", "8"))
        if timeout <= 0:
            raise ValueError("SUGGESTION_TIMEOUT must be positive")
        if limit < 1:
            raise ValueError("SUGGESTION_LIMIT must be at least 1")
        return cls(
            shortcuts_file=os.path.expanduser(os.environ.get("SHORTCUTS_FILE") or DEFAULT_SHORTCUTS_FILE),
            suggestion_timeout=timeout,
            suggestion_limit=limit,
            browser_path=os.environ.get("BROWSER_PATH") or None,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in os.environ.get("CORS_ORIGINS", "").split(",") if o.strip()],
        )
