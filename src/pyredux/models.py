"""Structured records emitted by the logger middleware."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActionLogEntry(BaseModel):
    """One dispatched action, as seen by the logger middleware."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action_type: str | None = Field(default=None, description="repr of the action's type, if any")
    action: Any = Field(default=None, description="Redacted action payload")
    prev_state: Any = None
    next_state: Any = None
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    duration_ms: float = 0.0
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def summary(self) -> str:
        """Short single-line description used for stdlib log messages."""
        outcome = f"failed: {self.error}" if self.failed else "ok"
        return f"action {self.action_type} ({self.duration_ms:.2f} ms) {outcome}"
