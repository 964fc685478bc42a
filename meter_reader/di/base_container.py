# Standard library imports
import inspect
import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Minimal dependency injection container.

    Keys are usually classes (interfaces or concrete types) but plain strings
    are accepted for infrastructure handles such as collections.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}
        self._shutdown_hooks: List[Callable[[], Any]] = []

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register one shared instance for key"""
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a factory called on every get(key)"""
        self._factories[key] = factory

    def get(self, key: Any) -> Any:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered for key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")

    def add_shutdown_hook(self, hook: Callable[[], Any]) -> None:
        """Register a callable (sync or async) to run on shutdown"""
        self._shutdown_hooks.append(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in reverse registration order"""
        for hook in reversed(self._shutdown_hooks):
            try:
                result = hook()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Error during container shutdown: {e}", exc_info=True)
        self._shutdown_hooks.clear()
