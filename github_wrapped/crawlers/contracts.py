"""Typed fetch contracts shared by the GitHub client and its callers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class FetchState(str, enum.Enum):
    """Outcome of a single upstream fetch."""

    OK = "OK"
    EMPTY = "EMPTY"
    FAILED = "FAILED"


@dataclass(slots=True)
class FetchResult(Generic[T]):
    """Fetch outcome with payload or error details; never raised."""

    state: FetchState
    data: Optional[T] = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state == FetchState.OK


UserSnapshotContract = FetchResult[dict[str, Any]]
