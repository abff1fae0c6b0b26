# storefront/models/order.py
import logging
from datetime import datetime
from typing import List

from pydantic import BaseModel

from storefront.errors import (
    ValidationIssue,
    empty_cart,
    incomplete_customer_info,
    invalid_transition,
)
from storefront.models.cart import CartLine
from storefront.models.checkout import CustomerInfo, PaymentMethod, ShippingTier, WorkflowState
from storefront.utils.pricing import OrderTotals

logger = logging.getLogger(__name__)

TERMINAL_STATES = {WorkflowState.CONFIRMED, WorkflowState.CANCELLED}


# Everything the buyer agreed to when confirming, handed to confirmation listeners
class OrderConfirmation(BaseModel):
    order_number: str
    lines: List[CartLine]
    totals: OrderTotals
    customer: CustomerInfo
    shipping: ShippingTier
    payment: PaymentMethod
    confirmed_at: datetime


class OrderWorkflow:
    """Gates an order attempt: editing -> reviewing -> confirmed | cancelled.

    Only control state lives here. Whether the review panel is expanded is a
    display preference kept by the session and never moves this machine.
    """

    def __init__(self):
        self.state = WorkflowState.EDITING

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def reopen(self) -> None:
        # An edit invalidates a pending review and starts a new attempt after a terminal one
        if self.state != WorkflowState.EDITING:
            logger.debug("Order workflow %s -> editing", self.state.value)
            self.state = WorkflowState.EDITING

    def submit(self, total_quantity: int, customer: CustomerInfo) -> List[ValidationIssue]:
        if self.is_terminal:
            self.reopen()

        issues: List[ValidationIssue] = []
        if total_quantity <= 0:
            issues.append(empty_cart())
        missing = customer.missing_fields()
        if missing:
            issues.append(incomplete_customer_info(missing))
        if issues:
            return issues

        self.state = WorkflowState.REVIEWING
        return []

    def confirm(self) -> List[ValidationIssue]:
        if self.state != WorkflowState.REVIEWING:
            return [invalid_transition("confirm", self.state.value)]
        self.state = WorkflowState.CONFIRMED
        return []

    def cancel(self) -> List[ValidationIssue]:
        if self.is_terminal:
            return [invalid_transition("cancel", self.state.value)]
        self.state = WorkflowState.CANCELLED
        return []

    def reset(self) -> None:
        self.state = WorkflowState.EDITING
