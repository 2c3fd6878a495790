# clientdesk/services/identity.py
"""
Identity policies for the in-memory repositories.

A repository asks its policy for the next id on every create. The policy is
injected, so the strategy can be swapped without touching the services.
"""
from abc import ABC, abstractmethod
from typing import Iterable

from ..core.constants import IdStrategy


class IdPolicy(ABC):
    """Interface: return the id for a new record given the ids in use."""

    def observe(self, existing_ids: Iterable[int]) -> None:
        """Called once with the seeded ids when a repository is built."""
        return None

    @abstractmethod
    def next_id(self, existing_ids: Iterable[int]) -> int:
        ...


class MaxPlusOneIdPolicy(IdPolicy):
    """
    max(existing ids) + 1, or 1 for an empty collection.
    Ids freed by deleting the highest record are handed out again.
    """

    def next_id(self, existing_ids: Iterable[int]) -> int:
        return max(existing_ids, default=0) + 1


class MonotonicIdPolicy(IdPolicy):
    """
    Counter that starts after the highest seeded id and never goes back,
    so a deleted id is never reused.
    """

    def __init__(self, start: int = 0):
        self._last = start

    def observe(self, existing_ids: Iterable[int]) -> None:
        self._last = max(self._last, max(existing_ids, default=0))

    def next_id(self, existing_ids: Iterable[int]) -> int:
        self._last = max(self._last, max(existing_ids, default=0)) + 1
        return self._last


def build_id_policy(strategy: IdStrategy) -> IdPolicy:
    if IdStrategy(strategy) == IdStrategy.MAX_PLUS_ONE:
        return MaxPlusOneIdPolicy()
    return MonotonicIdPolicy()
