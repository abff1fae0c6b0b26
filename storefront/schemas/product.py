# storefront/schemas/product.py
from pydantic import BaseModel
from typing import Dict, List


# Response schema for a product template on sale
class ProductOut(BaseModel):
    id: str
    title: str
    unit_price_cents: int
    unit_price: str
    image: str


# Display entry of a shipping tier or payment method
class OptionOut(BaseModel):
    value: str
    label: str
    description: str
    price_cents: int = 0
    price: str = ""


# Everything the shop page needs to render its selectors
class CatalogOut(BaseModel):
    products: List[ProductOut]
    sizes: List[str]
    colors: Dict[str, str]
    shipping_options: List[OptionOut]
    payment_methods: List[OptionOut]
