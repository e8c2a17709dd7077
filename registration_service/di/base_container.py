# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Keys are usually the abstract type (UserRepository) or use case class,
    or a string for infrastructure handles ("user_collection").
    Singletons are returned as registered; factories build a new
    instance on every get().
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a ready-made instance, replacing any previous registration"""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory, replacing any previous registration"""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Raises:
            KeyError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise KeyError(f"No dependency registered for {name}")
    
    def reset(self) -> None:
        """Drop all registrations"""
        self._singletons.clear()
        self._factories.clear()
