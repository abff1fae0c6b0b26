from pydantic import BaseModel
from typing import Optional

from storefront.models.checkout import PaymentMethod, ShippingTier


# Order totals in cents plus their two-decimal display form
class TotalsOut(BaseModel):
    subtotal_cents: int
    shipping_cents: int
    total_cents: int
    subtotal: str
    shipping: str
    total: str


# Partial update of the customer form; omitted fields are left untouched
class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ShippingUpdate(BaseModel):
    tier: ShippingTier


class PaymentUpdate(BaseModel):
    method: PaymentMethod
