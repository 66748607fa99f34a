from tailor_configurator.core.domain.order.cart import Cart
from tailor_configurator.core.domain.order.line_item import LineItem
from tailor_configurator.core.domain.order.order_request import OrderRequest
from tailor_configurator.core.domain.order.value_objects.customer_contact import (
    CustomerContact,
    ShippingAddress,
)
from tailor_configurator.core.domain.order.value_objects.payment_method import PaymentMethod

__all__ = [
    "Cart",
    "CustomerContact",
    "LineItem",
    "OrderRequest",
    "PaymentMethod",
    "ShippingAddress",
]
