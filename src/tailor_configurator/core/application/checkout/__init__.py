from tailor_configurator.core.application.checkout.cart_order_adapter import (
    CartOrderAdapter,
    to_line_item,
)
from tailor_configurator.core.application.checkout.local_cart_store import LocalCartStore

__all__ = ["CartOrderAdapter", "LocalCartStore", "to_line_item"]
