"""
Factory for suggestion providers. Providers register themselves by id and the
suggestion client requests instances via `create`. Ids are case-insensitive.
"""
from typing import Dict, Callable, List
from Shortcut.Suggestion.Interface.ISuggestionProvider import ISuggestionProvider


class ProviderFactory:
    _registry: Dict[str, Callable[..., ISuggestionProvider]] = {}
    _names: Dict[str, str] = {}

    @classmethod
    def register(cls, key: str, creator: Callable[..., ISuggestionProvider]):
        cls._registry[key.lower()] = creator
        cls._names[key.lower()] = key

    @classmethod
    def create(cls, key: str, *args, **kwargs) -> ISuggestionProvider:
        creator = cls._registry.get(key.lower())
        if not creator:
            raise KeyError(f"Provider not registered: {key}")
        return creator(*args, **kwargs)

    @classmethod
    def registered_keys(cls) -> List[str]:
        return list(cls._names.values())
