# storefront/models/checkout.py
import enum
from typing import List

from pydantic import BaseModel, ConfigDict


# Closed set of shipping tiers; costs live in the pricing table
class ShippingTier(str, enum.Enum):
    EXPRESS = "express"
    STANDARD = "standard"
    PICKUP = "pickup"


# Closed set of payment methods (payment itself is mocked)
class PaymentMethod(str, enum.Enum):
    CREDIT = "credit"
    PAYPAL = "paypal"
    CHECK = "check"


# Position of the current order attempt in its lifecycle
class WorkflowState(str, enum.Enum):
    EDITING = "editing"
    REVIEWING = "reviewing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


DEFAULT_SHIPPING = ShippingTier.STANDARD
DEFAULT_PAYMENT = PaymentMethod.CREDIT


# Contact details collected by the customer form; every field is required
class CustomerInfo(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    address: str = ""
    state: str = ""
    zip: str = ""
    email: str = ""
    phone: str = ""

    def missing_fields(self) -> List[str]:
        # Presence only, no email/phone format checks
        return [name for name in type(self).model_fields if not getattr(self, name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()
