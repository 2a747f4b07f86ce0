"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, daytime.toml only contains overrides.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from daytime.domain.daytime import Daytime


def resolve_zone(name: str) -> ZoneInfo:
    """Look up an IANA zone, raising ValueError for unknown names."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown time zone: {name!r}"
        raise ValueError(msg) from exc


# --- daytime.toml sections ---


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    timezone: str = "UTC"
    layout: str = "%Y-%m-%d %H:%M:%S %Z"

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str) -> str:
        resolve_zone(value)
        return value


class WindowConfig(BaseModel):
    """One entry of the [windows] table.

    Bounds accept ``"HH:MM:SS"`` or integer seconds. A window whose start
    is after its end wraps across midnight.
    """

    model_config = {"frozen": True}

    start: Daytime
    end: Daytime


class DaytimeConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    windows: dict[str, WindowConfig] = Field(default_factory=dict)
