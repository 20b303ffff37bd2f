import os
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

from Shortcut.Model.ResolvedResult import ResolvedResult, Activation, ActivationKind, ContextAction
from Shortcut.Utility import url as url_builder

WEB_SCHEMES = ("http", "https")


def validate_query_payload(data: Dict[str, Any]) -> Tuple[str, Optional[str], bool]:
    search = data.get("search")
    if not isinstance(search, str):
        raise ValueError("Field 'search' is required and must be a string")
    action_keyword = data.get("action_keyword")
    if action_keyword is not None and not isinstance(action_keyword, str):
        raise ValueError("Field 'action_keyword' must be a string")
    delayed = data.get("delayed", False)
    if not isinstance(delayed, bool):
        raise ValueError("Field 'delayed' must be a boolean")
    return search, action_keyword, delayed


"""Parse an activation and check it only opens what the resolver can produce:
web URLs, or the shortcut file and its folder.
    Args:
        data: request JSON body
        config_path: the record store's file path; path activations are refused without it
    Raises:
        ValueError: malformed payload or a target outside what is allowed
"""
def validate_activation_payload(data: Dict[str, Any], config_path: Optional[str] = None) -> Activation:
    activation = data.get("activation")
    if not isinstance(activation, dict):
        raise ValueError("Field 'activation' is required")
    try:
        kind = ActivationKind(activation.get("kind"))
    except ValueError:
        allowed = ", ".join(k.value for k in ActivationKind)
        raise ValueError(f"Invalid activation kind '{activation.get('kind')}'. Allowed: {allowed}")
    target = activation.get("target", "")
    if not isinstance(target, str):
        raise ValueError("Activation 'target' must be a string")
    if kind in (ActivationKind.OPEN_URL, ActivationKind.OPEN_PATH) and not target.strip():
        raise ValueError(f"Activation '{kind.value}' needs a target")
    if kind == ActivationKind.OPEN_URL:
        validate_web_urls(target)
    elif kind == ActivationKind.OPEN_PATH:
        validate_config_path(target, config_path)
    return Activation(kind, target)


def validate_web_urls(target: str) -> None:
    for url in url_builder.expand(target):
        parsed = urlparse(url)
        if parsed.scheme.lower() not in WEB_SCHEMES or not parsed.netloc:
            raise ValueError(f"Only http and https URLs can be opened, got '{url}'")


def _normalize(path: str) -> str:
    return os.path.normcase(os.path.abspath(os.path.expanduser(path)))


def validate_config_path(target: str, config_path: Optional[str]) -> None:
    if config_path:
        config_file = _normalize(config_path)
        if _normalize(target) in (config_file, os.path.dirname(config_file)):
            return
    raise ValueError("Only the shortcut file or its folder can be opened")


def map_activation(activation: Activation) -> Dict[str, str]:
    return {"kind": activation.kind.value, "target": activation.target}


def map_results(results: List[ResolvedResult], context_menus: List[List[ContextAction]]) -> List[Dict[str, Any]]:
    return [
        {
            "title": r.title,
            "subtitle": r.subtitle,
            "icon": r.icon,
            "score": r.score,
            "query_text_display": r.query_text_display,
            "activation": map_activation(r.activation),
            "shortcut": r.record.name if r.record else None,
            "context_actions": [{"title": c.title, "activation": map_activation(c.activation)} for c in menu],
        }
        for r, menu in zip(results, context_menus)
    ]
