from pydantic import BaseModel
from typing import List, Optional

from storefront.models.checkout import CustomerInfo, PaymentMethod, ShippingTier, WorkflowState
from storefront.models.order import OrderConfirmation
from storefront.schemas.cart import CartLineOut, SelectorOut
from storefront.schemas.order import TotalsOut
from storefront.schemas.product import ProductOut


# Read-only view of the whole session, rendered after every action
class SessionSnapshot(BaseModel):
    catalog: List[ProductOut]
    selectors: List[SelectorOut]
    cart_lines: List[CartLineOut]
    total_quantity: int
    totals: TotalsOut
    show_summary: bool
    workflow_state: WorkflowState
    review_panel_expanded: bool
    customer_info: CustomerInfo
    shipping_tier: ShippingTier
    payment_method: PaymentMethod
    # How the previous attempt ended (confirmed/cancelled) until the next edit or submit
    last_outcome: Optional[WorkflowState] = None
    last_confirmation: Optional[OrderConfirmation] = None
