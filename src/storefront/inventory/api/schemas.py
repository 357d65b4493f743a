"""Pydantic request/response schemas for the Inventory API."""

from pydantic import BaseModel, Field


class SetStockLevelRequest(BaseModel):
    quantity: int = Field(ge=0)
    cost_price: float | None = Field(default=None, ge=0)


class InventoryRecordResponse(BaseModel):
    id: str
    product_id: str
    product_name: str | None = None
    quantity: int
    cost_price: float | None = None
    last_updated: str | None = None
