"""
Page Snapshot: the input contract of the detection core.

Pydantic model for the captured state of one page. Accepts the wire field
names sent by the capture layer (``rawText``) as well as Python names.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from uxdetective.config import settings


class PageSnapshot(BaseModel):
    """Captured text and UI-control state of one web page."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={"examples": [
            {
                "url": "https://www.example.com/",
                "rawText": "Start your free trial today. Credit card required.",
                "headings": ["Limited time offer"],
                "buttons": ["Start Free Trial"],
                "alerts": [],
            },
        ]},
    )

    url: StrictStr = Field(..., description="Absolute URL of the analysed page.")
    raw_text: StrictStr = Field(
        ..., max_length=settings.MAX_TEXT_CHARS,
        description="Full visible body text.",
    )
    headings: tuple[StrictStr, ...] = Field(default=(), description="Heading texts in DOM order.")
    buttons: tuple[StrictStr, ...] = Field(default=(), description="Clickable control labels.")
    alerts: tuple[StrictStr, ...] = Field(default=(), description="Alert and live-region texts.")

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        value = value.strip()
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("url must be an absolute http(s) URL")
        return value

    @classmethod
    def from_capture(cls, payload: dict[str, Any]) -> PageSnapshot:
        """Validate a capture-layer payload, which must also carry non-blank text."""
        snapshot = cls.model_validate(payload)
        if not snapshot.raw_text.strip():
            raise ValueError("rawText cannot be empty")
        return snapshot
