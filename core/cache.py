# core/cache.py
"""
Per-object attribute cache.

Replaces attributes attached lazily to a group (reflection data, the
parameter space with its sharp map, the non-modularity flag) by an explicit
compute-or-fetch table. A value is computed at most once and never replaced.
"""
import threading
from typing import Any, Callable, Dict, Hashable

from utils.logging_config import get_logger

logger = get_logger(__name__)


class AttributeCache:
    """Thread-safe store of values computed once per owner."""

    def __init__(self, owner: str = "") -> None:
        self._owner = owner
        self._values: Dict[Hashable, Any] = {}
        # Re-entrant: a factory may fetch other attributes of the same owner.
        self._lock = threading.RLock()

    def get_or_compute(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """
        Return the cached value for *key*, computing it with *factory* on first use.

        :param key: Attribute name.
        :param factory: Zero-argument callable producing the value.
        :return: The cached value.
        """
        with self._lock:
            if key in self._values:
                return self._values[key]
            value = factory()
            self._values[key] = value
            logger.debug("Cached attribute '%s' on %s", key, self._owner or "<anonymous>")
            return value

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"<AttributeCache {self._owner}: {sorted(map(str, self._values))}>"
