# storefront/routes/orders.py
import logging

from fastapi import APIRouter, Depends

from storefront.schemas.session import SessionSnapshot
from storefront.session import Storefront
from storefront.state import get_storefront
from storefront.utils.responses import raise_for_issues

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger(__name__)

# Validate cart and customer form, then move the order into review
@router.post("/submit", response_model=SessionSnapshot)
def submit_order(store: Storefront = Depends(get_storefront)):
    raise_for_issues(store.submit_order())
    return store.snapshot()

# Mocked confirmation: no payment is taken, the form is reset
@router.post("/confirm", response_model=SessionSnapshot)
def confirm_order(store: Storefront = Depends(get_storefront)):
    raise_for_issues(store.confirm_order())
    return store.snapshot()

@router.post("/cancel", response_model=SessionSnapshot)
def cancel_order(store: Storefront = Depends(get_storefront)):
    raise_for_issues(store.cancel_order())
    return store.snapshot()

# Show/hide the review details; does not affect the order state
@router.post("/review/toggle", response_model=SessionSnapshot)
def toggle_review(store: Storefront = Depends(get_storefront)):
    expanded = store.toggle_review_visibility()
    logger.debug("Review panel expanded=%s", expanded)
    return store.snapshot()
