"""
cache.py  —  In-process memo for annual charts
===============================================
Thread-safe LRU keyed by (natal fingerprint, year, language, as-of date).
The as-of date is part of the key because the current Mudda period and
the active sahams depend on it.
"""

import logging
import threading
from collections import OrderedDict
from datetime import date, datetime
from typing import Any, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)


def cache_key(chart, year: int, language, as_of) -> Tuple[str, int, str, str]:
    day = as_of.date() if isinstance(as_of, datetime) else as_of
    lang = getattr(language, "value", language)
    return chart.fingerprint(), int(year), str(lang), day.isoformat() if isinstance(day, date) else ""


class VarshaphalaCache:
    def __init__(self, maxsize: int = 128):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._data: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
                self._hits += 1
                return self._data[key]
            self._misses += 1
            return None

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                evicted, _ = self._data.popitem(last=False)
                logger.debug("Evicted %r from the Varshaphala cache", evicted)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    @property
    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"size": len(self._data), "maxsize": self.maxsize,
                    "hits": self._hits, "misses": self._misses}
