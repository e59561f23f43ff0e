"""
Pydantic schemas for channel frequency rows.

This module contains the transient record produced by extraction and the
response shape used when reporting stored rows.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ChannelFrequencyRecord(BaseModel):
    """A validated row extracted from the worksheet."""

    channel: int = Field(..., description="Channel number parsed from the label")
    frequency: float = Field(..., description="Frequency value (never NaN)")
    row_num: Optional[int] = Field(None, description="1-based source row number")


class ChannelFrequencyResponse(BaseModel):
    """Stored channel frequency row."""

    id: int = Field(..., description="Row ID")
    channel: int = Field(..., description="Channel number")
    frequency: float = Field(..., description="Stored frequency")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "channel": 7,
                "frequency": 102.0,
                "updated_at": "2025-01-15T10:30:00"
            }
        }
