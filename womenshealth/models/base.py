"""Shared Pydantic base model for calculator records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class WomensHealthBase(BaseModel):
    """Immutable base model for every result record."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        populate_by_name=True,
    )

    def to_boundary(self) -> dict[str, Any]:
        """JSON-safe dict: dates as ``YYYY-MM-DD``, enums as their values."""
        return self.model_dump(mode="json")
