from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from storefront.models.catalog import COLORS, SIZES
from storefront.schemas.order import TotalsOut


def _check_size(value: Optional[str]) -> Optional[str]:
    # Empty means "not selected yet"; anything else must be a known size
    if value and value not in SIZES:
        raise ValueError(f"size must be one of: {', '.join(SIZES)}")
    return value


def _check_color(value: Optional[str]) -> Optional[str]:
    if value and value not in COLORS:
        raise ValueError(f"color must be one of: {', '.join(COLORS)}")
    return value


# Request schema for changing a product's size/color/quantity selection
class SelectionUpdate(BaseModel):
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: Optional[int] = None

    @field_validator("size")
    @classmethod
    def check_size(cls, value):
        return _check_size(value)

    @field_validator("color")
    @classmethod
    def check_color(cls, value):
        return _check_color(value)


# Request schema for adding a line directly, bypassing the selector
class CartAddLine(BaseModel):
    template_id: str
    size: str = ""
    color: str = ""
    quantity: int = 1

    @field_validator("size")
    @classmethod
    def check_size(cls, value):
        return _check_size(value)

    @field_validator("color")
    @classmethod
    def check_color(cls, value):
        return _check_color(value)


# Request schema for setting a line's quantity; zero or less removes the line
class CartUpdateItem(BaseModel):
    quantity: int


# Response schema for the selector state of one product
class SelectorOut(BaseModel):
    template_id: str
    size: str
    color: str
    quantity: int
    is_complete: bool


# Response schema for a single cart line
class CartLineOut(BaseModel):
    key: str
    template_id: str
    title: str
    size: str
    color: str
    quantity: int = Field(gt=0)
    image: str
    unit_price_cents: int
    line_total_cents: int
    line_total: str


# Response schema for the entire cart summary
class CartOut(BaseModel):
    items: List[CartLineOut]
    total_quantity: int
    totals: TotalsOut
