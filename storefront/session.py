# storefront/session.py
"""Single-session storefront controller.

``Storefront`` owns every piece of mutable order state: the catalog, one line
selector per product, the cart, the customer form, the shipping and payment
choices, the order workflow, the review panel flag and the audit trail. The
presentation layer drives it with one method call per user action and renders
``snapshot()`` afterwards.

Actions that can fail for ordinary reasons return a list of
``ValidationIssue``; an empty list means success. Every public action runs
under the session's own lock, so concurrent callers see each action applied
as a whole.
"""
import functools
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from storefront.config import Settings, settings as default_settings
from storefront.errors import ValidationIssue, unknown_product
from storefront.models.cart import Cart
from storefront.models.catalog import COLORS, PAYMENT_OPTIONS, SHIPPING_OPTIONS, SIZES, Catalog, default_catalog
from storefront.models.checkout import (
    DEFAULT_PAYMENT,
    DEFAULT_SHIPPING,
    CustomerInfo,
    PaymentMethod,
    ShippingTier,
    WorkflowState,
)
from storefront.models.log import AuditTrail
from storefront.models.order import OrderConfirmation, OrderWorkflow
from storefront.models.selector import LineSelector
from storefront.schemas.cart import CartLineOut, CartOut, SelectorOut
from storefront.schemas.order import TotalsOut
from storefront.schemas.product import CatalogOut, OptionOut, ProductOut
from storefront.schemas.session import SessionSnapshot
from storefront.utils.audit import write_log
from storefront.utils.pricing import (
    OrderTotals,
    build_shipping_table,
    compute_totals,
    format_money,
    format_shipping,
    line_total,
    validate_shipping_table,
)

logger = logging.getLogger(__name__)

ConfirmationListener = Callable[[OrderConfirmation], None]


def _synchronized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class Storefront:
    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        shipping_table: Optional[Dict[ShippingTier, int]] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or default_settings
        self.catalog = catalog if catalog is not None else default_catalog(settings.UNIT_PRICE_CENTS)
        if shipping_table is None:
            shipping_table = build_shipping_table(settings)
        else:
            validate_shipping_table(shipping_table)
        self.shipping_table = dict(shipping_table)

        # Reentrant: snapshot() and listeners call back into locked reads
        self._lock = threading.RLock()
        self.selectors: Dict[str, LineSelector] = {
            t.id: LineSelector(template_id=t.id) for t in self.catalog.templates()
        }
        self.cart = Cart()
        self.customer = CustomerInfo()
        self.shipping_tier = DEFAULT_SHIPPING
        self.payment_method = DEFAULT_PAYMENT
        self.workflow = OrderWorkflow()
        self.review_panel_expanded = False
        self.last_outcome: Optional[WorkflowState] = None
        self.last_confirmation: Optional[OrderConfirmation] = None
        self.audit = AuditTrail(limit=settings.AUDIT_LOG_LIMIT)
        self._listeners: List[ConfirmationListener] = []

    # ---------- Listeners ----------

    @_synchronized
    def on_confirmed(self, listener: ConfirmationListener) -> None:
        self._listeners.append(listener)

    # ---------- Line selection ----------
    # Selector changes are not order edits: nothing is committed until add_to_cart

    def _selector(self, template_id: str) -> Optional[LineSelector]:
        return self.selectors.get(template_id)

    @_synchronized
    def select_size(self, template_id: str, size: str) -> List[ValidationIssue]:
        selector = self._selector(template_id)
        if selector is None:
            return [unknown_product(template_id)]
        selector.select_size(size)
        return []

    @_synchronized
    def select_color(self, template_id: str, color: str) -> List[ValidationIssue]:
        selector = self._selector(template_id)
        if selector is None:
            return [unknown_product(template_id)]
        selector.select_color(color)
        return []

    @_synchronized
    def set_quantity(self, template_id: str, quantity: int) -> List[ValidationIssue]:
        selector = self._selector(template_id)
        if selector is None:
            return [unknown_product(template_id)]
        selector.set_quantity(quantity)
        return []

    @_synchronized
    def update_selection(
        self,
        template_id: str,
        size: Optional[str] = None,
        color: Optional[str] = None,
        quantity: Optional[int] = None,
    ) -> List[ValidationIssue]:
        selector = self._selector(template_id)
        if selector is None:
            return [unknown_product(template_id)]
        if size is not None:
            selector.select_size(size)
        if color is not None:
            selector.select_color(color)
        if quantity is not None:
            selector.set_quantity(quantity)
        return []

    @_synchronized
    def selector_out(self, template_id: str) -> Optional[SelectorOut]:
        selector = self._selector(template_id)
        if selector is None:
            return None
        return SelectorOut(**selector.model_dump(), is_complete=selector.is_complete)

    # ---------- Cart ----------

    @_synchronized
    def add_to_cart(self, template_id: str) -> List[ValidationIssue]:
        selector = self._selector(template_id)
        if selector is None:
            return [unknown_product(template_id)]
        issues = self.add_line(template_id, selector.size, selector.color, selector.quantity)
        if not issues:
            selector.reset()
        return issues

    @_synchronized
    def add_line(self, template_id: str, size: str, color: str, quantity: int) -> List[ValidationIssue]:
        template = self.catalog.get(template_id)
        if template is None:
            return [unknown_product(template_id)]

        issues = self.cart.add_line(
            template.id, template.title, size, color, quantity, template.image, template.unit_price_cents
        )
        if issues:
            write_log(
                self.audit, action="CART_ADD", resource="cart", status="FAIL",
                meta={"template_id": template_id, "size": size, "color": color, "quantity": quantity},
            )
            return issues

        self._touch()
        write_log(
            self.audit, action="CART_ADD", resource="cart",
            meta={"template_id": template_id, "size": size, "color": color, "quantity": quantity,
                  "cart_items": len(self.cart), "total_quantity": self.cart.total_quantity()},
        )
        return []

    @_synchronized
    def update_cart_quantity(self, key: str, quantity: int) -> bool:
        # Returns False when the key is not in the cart
        if key not in self.cart:
            return False
        self.cart.update_quantity(key, quantity)
        self._touch()
        write_log(self.audit, action="CART_UPDATE", resource="cart", meta={"key": key, "quantity": quantity})
        return True

    @_synchronized
    def remove_from_cart(self, key: str) -> None:
        if key not in self.cart:
            return
        self.cart.remove_line(key)
        self._touch()
        write_log(self.audit, action="CART_DELETE", resource="cart", meta={"key": key, "cart_items": len(self.cart)})

    # ---------- Checkout selections ----------

    @_synchronized
    def set_shipping_tier(self, tier: ShippingTier) -> None:
        self.shipping_tier = ShippingTier(tier)
        self._touch()
        write_log(self.audit, action="SHIPPING_SET", resource="checkout", meta={"tier": self.shipping_tier.value})

    @_synchronized
    def set_payment_method(self, method: PaymentMethod) -> None:
        self.payment_method = PaymentMethod(method)
        self._touch()
        write_log(self.audit, action="PAYMENT_SET", resource="checkout", meta={"method": self.payment_method.value})

    @_synchronized
    def set_customer_field(self, name: str, value: str) -> None:
        if name not in CustomerInfo.model_fields:
            raise ValueError(f"Unknown customer field: {name}")
        # Assignment is validated, so a non-string value raises before anything changes
        setattr(self.customer, name, value)
        self._touch()
        # Only the field name is audited, never its contents
        write_log(self.audit, action="CUSTOMER_UPDATE", resource="checkout", meta={"field": name})

    @_synchronized
    def update_customer(self, **fields) -> CustomerInfo:
        unknown = [name for name in fields if name not in CustomerInfo.model_fields]
        if unknown:
            raise ValueError(f"Unknown customer field: {', '.join(unknown)}")
        # Validate the whole update first so a bad value leaves the form untouched
        CustomerInfo.model_validate({**self.customer.model_dump(), **fields})
        for name, value in fields.items():
            self.set_customer_field(name, value)
        return self.customer.model_copy()

    # ---------- Order workflow ----------

    @_synchronized
    def submit_order(self) -> List[ValidationIssue]:
        issues = self.workflow.submit(self.cart.total_quantity(), self.customer)
        if issues:
            write_log(
                self.audit, action="ORDER_SUBMIT", resource="orders", status="FAIL",
                meta={"issues": [issue.code.value for issue in issues]},
            )
            return issues

        self._clear_outcome()
        self.review_panel_expanded = True
        write_log(
            self.audit, action="ORDER_SUBMIT", resource="orders",
            meta={"total_quantity": self.cart.total_quantity(), "total_cents": self.totals().total_cents},
        )
        return []

    @_synchronized
    def confirm_order(self) -> List[ValidationIssue]:
        issues = self.workflow.confirm()
        if issues:
            write_log(self.audit, action="ORDER_CONFIRM", resource="orders", status="FAIL",
                      meta={"state": self.workflow.state.value})
            return issues

        # Capture the order before the form is wiped
        confirmation = OrderConfirmation(
            order_number=uuid.uuid4().hex[:12].upper(),
            lines=self.cart.lines(),
            totals=self.totals(),
            customer=self.customer.model_copy(),
            shipping=self.shipping_tier,
            payment=self.payment_method,
            confirmed_at=datetime.now(timezone.utc),
        )
        logger.info("Order %s confirmed! Confirmation email will be sent.", confirmation.order_number)
        write_log(
            self.audit, action="ORDER_CONFIRM", resource="orders",
            meta={"order_number": confirmation.order_number, "total_cents": confirmation.totals.total_cents},
        )
        self._finish(WorkflowState.CONFIRMED)
        self.last_confirmation = confirmation
        self._notify(confirmation)
        return []

    @_synchronized
    def cancel_order(self) -> List[ValidationIssue]:
        issues = self.workflow.cancel()
        if issues:
            write_log(self.audit, action="ORDER_CANCEL", resource="orders", status="FAIL",
                      meta={"state": self.workflow.state.value})
            return issues

        logger.info("Order cancelled")
        write_log(self.audit, action="ORDER_CANCEL", resource="orders", meta={"cart_items": len(self.cart)})
        self._finish(WorkflowState.CANCELLED)
        return []

    @_synchronized
    def toggle_review_visibility(self) -> bool:
        self.review_panel_expanded = not self.review_panel_expanded
        return self.review_panel_expanded

    @_synchronized
    def clear_all(self) -> None:
        self._reset_form()
        self.workflow.reset()
        self._clear_outcome()
        write_log(self.audit, action="CART_CLEAR", resource="cart")

    # ---------- Reads ----------

    @_synchronized
    def totals(self) -> OrderTotals:
        # Always recomputed from the live cart
        return compute_totals(self.cart.lines(), self.shipping_tier, self.shipping_table)

    @_synchronized
    def cart_out(self) -> CartOut:
        return CartOut(
            items=[_line_out(line) for line in self.cart.lines()],
            total_quantity=self.cart.total_quantity(),
            totals=_totals_out(self.totals()),
        )

    def catalog_out(self) -> CatalogOut:
        return CatalogOut(
            products=[_product_out(t) for t in self.catalog.templates()],
            sizes=list(SIZES),
            colors=dict(COLORS),
            shipping_options=[
                OptionOut(
                    **SHIPPING_OPTIONS[tier].model_dump(),
                    price_cents=self.shipping_table[tier],
                    price=format_shipping(self.shipping_table[tier]),
                )
                for tier in ShippingTier
            ],
            payment_methods=[OptionOut(**PAYMENT_OPTIONS[method].model_dump()) for method in PaymentMethod],
        )

    @_synchronized
    def snapshot(self) -> SessionSnapshot:
        cart = self.cart_out()
        return SessionSnapshot(
            catalog=[_product_out(t) for t in self.catalog.templates()],
            selectors=[
                SelectorOut(**s.model_dump(), is_complete=s.is_complete) for s in self.selectors.values()
            ],
            cart_lines=cart.items,
            total_quantity=cart.total_quantity,
            totals=cart.totals,
            show_summary=cart.total_quantity > 0,
            workflow_state=self.workflow.state,
            review_panel_expanded=self.review_panel_expanded,
            customer_info=self.customer.model_copy(),
            shipping_tier=self.shipping_tier,
            payment_method=self.payment_method,
            last_outcome=self.last_outcome,
            last_confirmation=self.last_confirmation,
        )

    @property
    def workflow_state(self) -> WorkflowState:
        return self.workflow.state

    # ---------- Internals ----------

    def _touch(self) -> None:
        # An edit sends a pending review back to editing and retires the previous outcome
        self.workflow.reopen()
        self._clear_outcome()

    def _clear_outcome(self) -> None:
        self.last_outcome = None
        self.last_confirmation = None

    def _finish(self, outcome: WorkflowState) -> None:
        # A confirmed or cancelled attempt resets the form and opens a fresh one
        self._reset_form()
        self.workflow.reset()
        self.last_outcome = outcome
        self.last_confirmation = None

    def _notify(self, confirmation: OrderConfirmation) -> None:
        # The order is already confirmed; a failing listener must not undo that
        for listener in list(self._listeners):
            try:
                listener(confirmation)
            except Exception:
                logger.exception("Confirmation listener %r failed for order %s", listener, confirmation.order_number)

    def _reset_form(self) -> None:
        self.cart.clear()
        self.customer = CustomerInfo()
        self.shipping_tier = DEFAULT_SHIPPING
        self.payment_method = DEFAULT_PAYMENT
        self.review_panel_expanded = False
        for selector in self.selectors.values():
            selector.reset()


def _totals_out(totals: OrderTotals) -> TotalsOut:
    return TotalsOut(
        **totals.model_dump(),
        subtotal=format_money(totals.subtotal_cents),
        shipping=format_money(totals.shipping_cents),
        total=format_money(totals.total_cents),
    )


def _line_out(line) -> CartLineOut:
    cents = line_total(line)
    return CartLineOut(**line.model_dump(), line_total_cents=cents, line_total=format_money(cents))


def _product_out(template) -> ProductOut:
    return ProductOut(**template.model_dump(), unit_price=format_money(template.unit_price_cents))
