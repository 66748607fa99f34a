from dataclasses import dataclass

from tailor_configurator.core.domain.order.line_item import LineItem
from tailor_configurator.core.domain.order.value_objects.customer_contact import CustomerContact
from tailor_configurator.core.domain.order.value_objects.payment_method import PaymentMethod
from tailor_configurator.core.domain.shared import Money


@dataclass(frozen=True, kw_only=True)
class OrderRequest:
    customer: CustomerContact
    items: tuple[LineItem, ...]
    payment_method: PaymentMethod = PaymentMethod.COD
    notes: str | None = None
    shipping_cost: Money = Money(0)
    tax: Money = Money(0)

    @property
    def subtotal(self) -> Money:
        return sum((item.total_price for item in self.items), Money.zero())

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping_cost + self.tax
