"""Opt-in memoization around the work-time checks.

Every operation is a pure function of its arguments, so results are cached
by a canonical serialization of those arguments. The cache store is injected;
by default each operation gets its own ``cachetools.LRUCache``.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, MutableMapping
from datetime import date, datetime, timezone
from typing import Any

from cachetools import LRUCache
from pydantic import BaseModel

from worktime.core.config import settings
from worktime.services import worktime_validator

logger = logging.getLogger(__name__)

CacheFactory = Callable[[], MutableMapping[str, Any]]

OPERATIONS: tuple[str, ...] = (
    "is_work_now",
    "get_current_work_time",
    "get_possible_delivery_order_datetime",
    "get_possible_self_service_order_datetime",
    "get_max_order_date",
    "get_time_from_string",
    "convert_minutes_to_time",
)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Cannot build a cache key from {type(value).__name__}")


def make_cache_key(*args: Any, **kwargs: Any) -> str:
    """Return a deterministic key for structurally identical arguments."""
    return json.dumps({"args": args, "kwargs": kwargs}, sort_keys=True, default=_json_default)


def default_cache_factory() -> MutableMapping[str, Any]:
    return LRUCache(maxsize=settings.cache_maxsize)


class MemoizedWorkTimeValidator:
    """Work-time checks with one result cache per operation.

    The caches are shared by every call on the instance and guarded by a lock,
    so one instance may be used from several threads.
    """

    def __init__(self, *, cache_factory: CacheFactory | None = None, default_zone: str | None = None) -> None:
        factory: CacheFactory = cache_factory or default_cache_factory
        self._caches: dict[str, MutableMapping[str, Any]] = {name: factory() for name in OPERATIONS}
        self._lock = threading.RLock()
        self.default_zone = default_zone

    def _memoize(self, operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        key: str = make_cache_key(*args, **kwargs)
        cache: MutableMapping[str, Any] = self._caches[operation]
        with self._lock:
            if key in cache:
                return cache[key]

        result: Any = func(*args, **kwargs)
        with self._lock:
            cache[key] = result
        logger.debug("[CACHE] Stored %s result (%s entries)", operation, len(cache))
        return result

    def is_work_now(self, restriction: Any, now: datetime | None = None):
        # Pin "now" first so the key never stands for a moving clock.
        now = datetime.now(timezone.utc) if now is None else now
        return self._memoize(
            "is_work_now", worktime_validator.is_work_now, restriction, now, default_zone=self.default_zone
        )

    def get_current_work_time(self, restriction: Any, day: date):
        return self._memoize("get_current_work_time", worktime_validator.get_current_work_time, restriction, day)

    def get_possible_delivery_order_datetime(self, restriction_order: Any, now: datetime, *, raise_if_open: bool = False) -> str:
        return self._memoize(
            "get_possible_delivery_order_datetime",
            worktime_validator.get_possible_delivery_order_datetime,
            restriction_order,
            now,
            raise_if_open=raise_if_open,
            default_zone=self.default_zone,
        )

    def get_possible_self_service_order_datetime(
        self, restriction_order: Any, now: datetime, *, raise_if_open: bool = False
    ) -> str:
        return self._memoize(
            "get_possible_self_service_order_datetime",
            worktime_validator.get_possible_self_service_order_datetime,
            restriction_order,
            now,
            raise_if_open=raise_if_open,
            default_zone=self.default_zone,
        )

    def get_max_order_date(self, restriction_order: Any, now: datetime) -> str:
        return self._memoize("get_max_order_date", worktime_validator.get_max_order_date, restriction_order, now)

    def get_time_from_string(self, value: str) -> int:
        return self._memoize("get_time_from_string", worktime_validator.get_time_from_string, value)

    def convert_minutes_to_time(self, minutes: int) -> str:
        return self._memoize("convert_minutes_to_time", worktime_validator.convert_minutes_to_time, minutes)

    def cache_info(self) -> dict[str, int]:
        """Return the number of cached results per operation."""
        with self._lock:
            return {name: len(cache) for name, cache in self._caches.items()}

    def clear(self) -> None:
        with self._lock:
            for cache in self._caches.values():
                cache.clear()
