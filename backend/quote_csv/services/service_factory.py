"""Unified service factory with singleton support.

Usage:
    @service_factory
    def get_csv_serializer() -> CsvSerializerService:
        return CsvSerializerService()

    # With parameters (one instance per unique parameter combination)
    @service_factory
    def get_legacy_csv_parser(snapshot_keys: tuple = ...) -> LegacyCsvParserService:
        return LegacyCsvParserService(snapshot_keys=snapshot_keys)
"""

import functools
import threading
from typing import Any, Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def service_factory(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that converts a factory function into a cached singleton factory.

    For functions with no arguments (or only default arguments), creates a true singleton.
    For functions with arguments, caches instances by argument values, so the
    arguments must be hashable.

    Args:
        func: Factory function that creates service instances

    Returns:
        Wrapped function that returns cached singleton instances
    """
    cache: dict[tuple, Any] = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))

        if key not in cache:
            with lock:
                # Double-check after acquiring lock
                if key not in cache:
                    cache[key] = func(*args, **kwargs)

        return cache[key]

    wrapper.clear_cache = lambda: cache.clear()  # type: ignore

    return wrapper


def clear_all_service_caches() -> None:
    """Clear all service singleton caches.

    Note: only factories in modules that are already imported are cleared.
    """
    import sys

    services_module = "quote_csv.services"
    for module_name in list(sys.modules.keys()):
        if module_name.startswith(services_module):
            module = sys.modules[module_name]
            for attr_name in dir(module):
                attr = getattr(module, attr_name, None)
                if callable(attr) and hasattr(attr, "clear_cache"):
                    attr.clear_cache()
