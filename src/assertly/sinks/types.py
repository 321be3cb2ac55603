"""Pydantic models for failures delivered to a sink."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from assertly.types import FailureKind


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FailureRecord(BaseModel):
    """A single failure as received by a recording sink."""

    kind: FailureKind
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)

    model_config = {"frozen": True}

    @property
    def fatal(self) -> bool:
        return self.kind is FailureKind.FATAL

    def render(self) -> str:
        """``error# <message>`` or ``fatal# <message>``."""
        return f"{self.kind.value}# {self.message}"
