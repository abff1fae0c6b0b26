# storefront/models/selector.py
from pydantic import BaseModel


# Transient size/color/quantity choice for one product template
class LineSelector(BaseModel):
    template_id: str
    size: str = ""
    color: str = ""
    quantity: int = 1

    def select_size(self, size: str) -> None:
        self.size = size

    def select_color(self, color: str) -> None:
        self.color = color

    def set_quantity(self, quantity: int) -> None:
        # The quantity stepper never goes below 1
        self.quantity = max(1, quantity)

    @property
    def is_complete(self) -> bool:
        return bool(self.size) and bool(self.color) and self.quantity > 0

    def reset(self) -> None:
        self.size = ""
        self.color = ""
        self.quantity = 1
