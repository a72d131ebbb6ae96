"""Pydantic models for intake API payloads."""

from pydantic import BaseModel


class AddWaterRequest(BaseModel):
    """Add-water request payload."""

    amount: float
