# storefront/models/cart.py
from typing import Dict, List, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

from storefront.errors import ValidationIssue, incomplete_selection

KEY_SEPARATOR = ":"


def line_key(template_id: str, size: str, color: str) -> str:
    # Composite identity of a cart line. Each part is percent-encoded, so a
    # separator inside a part can never make two different lines share a key.
    return KEY_SEPARATOR.join(quote(part, safe=" ") for part in (template_id, size, color))


# Represents a single committed (product, size, color) line within the cart
class CartLine(BaseModel):
    key: str
    template_id: str
    title: str
    size: str
    color: str
    quantity: int = Field(gt=0)
    image: str
    unit_price_cents: int = Field(ge=0)  # Unit price at the moment of addition


class Cart:
    """Committed cart lines, at most one per key, kept in first-seen order.

    A line never holds a quantity below 1: driving it to zero removes it.
    """

    def __init__(self):
        self._lines: Dict[str, CartLine] = {}

    def add_line(
        self,
        template_id: str,
        title: str,
        size: str,
        color: str,
        quantity: int,
        image: str,
        unit_price_cents: int,
    ) -> List[ValidationIssue]:
        if not size or not color or quantity <= 0:
            return [incomplete_selection(size, color, quantity)]

        key = line_key(template_id, size, color)
        existing = self._lines.get(key)
        if existing:
            # Merge by addition
            existing.quantity += quantity
        else:
            self._lines[key] = CartLine(
                key=key,
                template_id=template_id,
                title=title,
                size=size,
                color=color,
                quantity=quantity,
                image=image,
                unit_price_cents=unit_price_cents,
            )
        return []

    def update_quantity(self, key: str, new_quantity: int) -> None:
        if new_quantity <= 0:
            self.remove_line(key)
            return
        line = self._lines.get(key)
        if line:
            line.quantity = new_quantity

    def remove_line(self, key: str) -> None:
        self._lines.pop(key, None)

    def get(self, key: str) -> Optional[CartLine]:
        return self._lines.get(key)

    def lines(self) -> List[CartLine]:
        return [line.model_copy() for line in self._lines.values()]

    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def clear(self) -> None:
        self._lines.clear()

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __contains__(self, key: str) -> bool:
        return key in self._lines

    def __len__(self) -> int:
        return len(self._lines)
