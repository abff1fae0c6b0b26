# storefront/routes/checkout.py
from fastapi import APIRouter, Depends

from storefront.models.checkout import CustomerInfo
from storefront.schemas.order import CustomerUpdate, PaymentUpdate, ShippingUpdate
from storefront.schemas.session import SessionSnapshot
from storefront.session import Storefront
from storefront.state import get_storefront

router = APIRouter(prefix="/checkout", tags=["Checkout"])

# Full session snapshot for rendering the page
@router.get("", response_model=SessionSnapshot)
def get_checkout(store: Storefront = Depends(get_storefront)):
    return store.snapshot()

@router.put("/shipping", response_model=SessionSnapshot)
def set_shipping(payload: ShippingUpdate, store: Storefront = Depends(get_storefront)):
    store.set_shipping_tier(payload.tier)
    return store.snapshot()

@router.put("/payment", response_model=SessionSnapshot)
def set_payment(payload: PaymentUpdate, store: Storefront = Depends(get_storefront)):
    store.set_payment_method(payload.method)
    return store.snapshot()

# Only fields present in the body are changed
@router.patch("/customer", response_model=CustomerInfo)
def update_customer(payload: CustomerUpdate, store: Storefront = Depends(get_storefront)):
    return store.update_customer(**payload.model_dump(exclude_none=True))
