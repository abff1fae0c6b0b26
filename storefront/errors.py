# storefront/errors.py
"""Validation issues returned by storefront actions.

Expected user mistakes (an incomplete selection, an empty cart, a blank form
field) are frequent, so actions report them as a list of ``ValidationIssue``
values instead of raising. An empty list means the action succeeded.
"""
import enum
from typing import List

from pydantic import BaseModel, Field


class ErrorCode(str, enum.Enum):
    INCOMPLETE_SELECTION = "incomplete_selection"
    EMPTY_CART = "empty_cart"
    INCOMPLETE_CUSTOMER_INFO = "incomplete_customer_info"
    INVALID_TRANSITION = "invalid_transition"
    UNKNOWN_PRODUCT = "unknown_product"


class ValidationIssue(BaseModel):
    code: ErrorCode
    message: str
    fields: List[str] = Field(default_factory=list)


def incomplete_selection(size: str, color: str, quantity: int) -> ValidationIssue:
    missing = []
    if not size:
        missing.append("size")
    if not color:
        missing.append("color")
    if quantity <= 0:
        missing.append("quantity")
    return ValidationIssue(
        code=ErrorCode.INCOMPLETE_SELECTION,
        message="Please select size, color, and quantity before adding to cart",
        fields=missing,
    )


def empty_cart() -> ValidationIssue:
    return ValidationIssue(code=ErrorCode.EMPTY_CART, message="Please add at least one item")


def incomplete_customer_info(missing: List[str]) -> ValidationIssue:
    return ValidationIssue(
        code=ErrorCode.INCOMPLETE_CUSTOMER_INFO,
        message="Please fill in all customer fields: " + ", ".join(missing),
        fields=list(missing),
    )


def invalid_transition(action: str, state: str) -> ValidationIssue:
    return ValidationIssue(
        code=ErrorCode.INVALID_TRANSITION,
        message=f"Cannot {action} an order in state '{state}'",
    )


def unknown_product(template_id: str) -> ValidationIssue:
    return ValidationIssue(
        code=ErrorCode.UNKNOWN_PRODUCT,
        message=f"Product not found: {template_id}",
        fields=["template_id"],
    )
