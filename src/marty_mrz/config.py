"""
Configuration for the MRZ parser.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class MRZParserConfig(BaseModel):
    """Settings that influence how an MRZ is decoded."""

    # Year used for the two-digit year window; None means the current UTC year
    reference_year: int | None = Field(default=None, ge=1, le=9999)
    check_digits: bool = True
    expiry_century_window: bool = Field(
        default=True,
        description="Apply the century window to expiry dates as well as birth dates",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    def current_year(self) -> int:
        """Resolve the reference year for century inference."""
        if self.reference_year is not None:
            return self.reference_year
        return datetime.now(timezone.utc).year


DEFAULT_CONFIG = MRZParserConfig()
