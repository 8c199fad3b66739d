"""Memoization for read queries.

Queries are pure functions of their inputs, so a result can be reused
whenever the inputs are structurally equal. Keys are built by freezing
the arguments: pydantic models by their dumped fields, dataclasses by
their field values, lists and dicts into tuples.
"""

from __future__ import annotations

import copy
import logging
from collections import OrderedDict
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Callable, Hashable, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


def freeze(value: Any) -> Hashable:
    """Turn ``value`` into a hashable key with structural equality."""
    if isinstance(value, BaseModel):
        return (type(value).__name__, freeze(value.model_dump()))
    if is_dataclass(value) and not isinstance(value, type):
        return (
            type(value).__name__,
            tuple((f.name, freeze(getattr(value, f.name))) for f in fields(value)),
        )
    if isinstance(value, dict):
        return tuple(sorted((str(k), freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    if isinstance(value, Enum):
        return value.value
    return value


class QueryCache:
    """Bounded LRU cache for query results.

    A ``maxsize`` of 0 disables caching: every lookup computes.
    Results are handed out as deep copies so callers cannot mutate
    the cached value.
    """

    def __init__(self, maxsize: int = 128):
        if maxsize < 0:
            msg = f"Cache size must be 0 or positive, got {maxsize}"
            raise ValueError(msg)
        self._maxsize = maxsize
        self._results: OrderedDict[Hashable, Any] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def enabled(self) -> bool:
        return self._maxsize > 0

    def get_or_compute(self, name: str, args: Any, compute: Callable[[], T]) -> T:
        if not self.enabled:
            return compute()

        key = (name, freeze(args))
        if key in self._results:
            self._results.move_to_end(key)
            self.hits += 1
            logger.debug("Cache hit for %s", name)
            return self._copy(self._results[key])

        self.misses += 1
        result = compute()
        self._results[key] = result
        if len(self._results) > self._maxsize:
            self._results.popitem(last=False)
        return self._copy(result)

    def clear(self) -> None:
        self._results.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._results)

    @staticmethod
    def _copy(result: T) -> T:
        return copy.deepcopy(result)
