# storefront/models/catalog.py
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.models.checkout import PaymentMethod, ShippingTier

SIZES = ["Small", "Medium", "Large", "Extra Large"]

# Color value -> display name
COLORS = {
    "white": "White",
    "blue": "Blue",
    "black": "Black",
}


# Immutable template of a purchasable shirt
class ProductTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    unit_price_cents: int = Field(ge=0)
    image: str


# Display metadata for a shipping tier or payment method
class OptionInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    description: str


SHIPPING_OPTIONS: Dict[ShippingTier, OptionInfo] = {
    ShippingTier.EXPRESS: OptionInfo(
        value="express", label="Express Shipping", description="2-3 business days"
    ),
    ShippingTier.STANDARD: OptionInfo(
        value="standard", label="Standard Shipping", description="5-7 business days"
    ),
    ShippingTier.PICKUP: OptionInfo(
        value="pickup", label="Pickup", description="Free - pickup in person"
    ),
}

PAYMENT_OPTIONS: Dict[PaymentMethod, OptionInfo] = {
    PaymentMethod.CREDIT: OptionInfo(
        value="credit", label="Credit Card", description="Pay with your credit or debit card"
    ),
    PaymentMethod.PAYPAL: OptionInfo(
        value="paypal", label="PayPal", description="Pay securely with your PayPal account"
    ),
    PaymentMethod.CHECK: OptionInfo(
        value="check", label="Check (In Person)", description="Pay by check in person"
    ),
}

_IMAGE_BASE = "https://raw.githubusercontent.com/smercier5/Image-asset/main/"

# (id, title, image file) of the shirts on sale
DEFAULT_TEMPLATES = [
    ("short-sleeve", "Short Sleeve T-Shirt", "Screenshot%202025-09-27%20at%208.27.05%20PM.png"),
    ("long-sleeve", "Long Sleeve T-Shirt", "Screenshot%202025-09-27%20at%208.28.03%20PM.png"),
    ("muscle-tee", "Muscle Tee", "Screenshot%202025-09-27%20at%208.28.35%20PM.png"),
]


class Catalog:
    """Read-only list of product templates, kept in declared order."""

    def __init__(self, templates: Iterable[ProductTemplate]):
        self._templates: Dict[str, ProductTemplate] = {}
        for template in templates:
            if template.id in self._templates:
                raise ValueError(f"Duplicate product template id: {template.id}")
            self._templates[template.id] = template

    def get(self, template_id: str) -> Optional[ProductTemplate]:
        return self._templates.get(template_id)

    def templates(self) -> List[ProductTemplate]:
        return list(self._templates.values())

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)


def default_catalog(unit_price_cents: int) -> Catalog:
    return Catalog(
        ProductTemplate(id=tid, title=title, unit_price_cents=unit_price_cents, image=_IMAGE_BASE + image)
        for tid, title, image in DEFAULT_TEMPLATES
    )
