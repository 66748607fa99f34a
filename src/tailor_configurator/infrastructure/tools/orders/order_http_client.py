from typing import Any

from tailor_configurator.core.application.ports import OrderPort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.domain.order import LineItem, OrderRequest
from tailor_configurator.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)


def _order_item(item: LineItem) -> dict[str, Any]:
    snapshot = item.snapshot
    fabric = snapshot.fabric
    return {
        "productId": item.product_id,
        "productName": item.product_name,
        "productCategory": item.product_category,
        "baseImage": item.base_image,
        "fabric": (
            {"id": fabric.id, "name": fabric.name, "priceModifier": fabric.price_modifier}
            if fabric
            else None
        ),
        "styles": {
            key: {"id": s.id, "name": s.name, "priceModifier": s.price_modifier}
            for key, s in snapshot.selections
            if s is not None
        },
        "measurements": snapshot.measurement_map(),
        "basePrice": item.base_price.amount,
        "totalPrice": item.unit_price.amount,
        "quantity": item.quantity,
    }


def to_order_payload(order: OrderRequest) -> dict[str, Any]:
    customer = order.customer
    address = customer.address
    return {
        "customer": {
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "address": {
                "street": address.street,
                "city": address.city,
                "state": address.state,
                "postalCode": address.postal_code,
                "country": address.country,
            },
        },
        "items": [_order_item(item) for item in order.items],
        "subtotal": order.subtotal.amount,
        "shippingCost": order.shipping_cost.amount,
        "tax": order.tax.amount,
        "total": order.total.amount,
        "paymentMethod": order.payment_method.value,
        "notes": order.notes or "",
    }


class OrderHttpClient(StorefrontHttpClient, OrderPort):
    PROVIDER = "orders"

    async def submit(self, order: OrderRequest) -> str:
        data = await self._request("POST", "/api/orders", json_data=to_order_payload(order))
        order_number = data.get("orderNumber") if isinstance(data, dict) else None
        if not order_number:
            raise ProviderError(self.PROVIDER, "Order response has no order number")
        return str(order_number)
