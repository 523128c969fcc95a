"""Pydantic models for structured cart summaries."""
from decimal import Decimal

from pydantic import BaseModel, field_validator

from shopcart.money import to_decimal as _to_decimal


class CartSummary(BaseModel):
    """Cart summary in structured form."""
    total: Decimal
    item_count: int
    text: str

    class Config:
        frozen = True

    @field_validator("total", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return _to_decimal(v)


__all__ = ["CartSummary"]
