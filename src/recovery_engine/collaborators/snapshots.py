"""Explicit per-user store for the latest optimization snapshot.

Callers that need results across calls inject an instance; the engine and
service hold no process-wide state of their own.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class SnapshotStore(Generic[T]):
    """Keeps the latest snapshot per user id."""

    def __init__(self) -> None:
        self._latest: dict[str, T] = {}

    def put(self, user_id: str, snapshot: T) -> None:
        self._latest[user_id] = snapshot

    def get(self, user_id: str) -> T | None:
        return self._latest.get(user_id)

    def clear(self, user_id: str) -> None:
        self._latest.pop(user_id, None)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._latest

    def __len__(self) -> int:
        return len(self._latest)
