"""Single-slot tracker for one kind of remote operation.

A slot holds `{data, loading, err}` for the most recent call of one
operation (dashboard, marginal reduction, pathway).

Semantics of `run`:
- loading is set and err cleared before awaiting
- success replaces data
- failure records the message and keeps the previous data
- loading is released once the latest run settles

Each run takes a request token. When runs overlap, only the most recently
issued one may write; an older run that settles afterwards is discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Generic, Optional, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SlotState(Generic[T]):
    """Read-only view of a slot at one point in time."""
    data: Optional[T] = None
    loading: bool = False
    err: Optional[str] = None


def error_message(exc: BaseException) -> str:
    """Message of an exception, or its class name when the message is empty."""
    return str(exc) or exc.__class__.__name__


class AsyncSlot(Generic[T]):
    """Tracks one outstanding/completed remote computation."""

    def __init__(self, name: str, initial: Optional[T] = None):
        self.name = name
        self._initial = initial
        self.data: Optional[T] = initial
        self.loading = False
        self.err: Optional[str] = None
        self._token = 0

    @property
    def state(self) -> SlotState[T]:
        return SlotState(data=self.data, loading=self.loading, err=self.err)

    @property
    def token(self) -> int:
        """Token of the most recently issued run."""
        return self._token

    async def run(self, operation: Awaitable[T]) -> None:
        """Await `operation` and record its outcome. Never raises on failure."""
        self._token += 1
        token = self._token
        self.loading = True
        self.err = None
        logger.info("slot_run_started", slot=self.name, token=token)

        try:
            result = await operation
        except Exception as e:
            if token == self._token:
                self.err = error_message(e)
                logger.warning("slot_run_failed", slot=self.name, token=token, error=self.err)
            else:
                logger.info("slot_run_superseded", slot=self.name, token=token, latest=self._token)
        else:
            if token == self._token:
                self.data = result
                self.err = None
                logger.info("slot_run_succeeded", slot=self.name, token=token)
            else:
                logger.info("slot_run_superseded", slot=self.name, token=token, latest=self._token)
        finally:
            if token == self._token:
                self.loading = False

    def reset(self) -> None:
        """Back to the initial state; runs still in flight become stale."""
        self._token += 1
        self.data = self._initial
        self.loading = False
        self.err = None
