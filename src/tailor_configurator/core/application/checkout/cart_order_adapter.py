from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import uuid4

import structlog

from tailor_configurator.core.application.exceptions import (
    InvalidQuantity,
    OrderSubmissionError,
)
from tailor_configurator.core.application.ports import OrderPort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.application.pricing import price
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.configuration import Configuration
from tailor_configurator.core.domain.order import (
    CustomerContact,
    LineItem,
    OrderRequest,
    PaymentMethod,
)
from tailor_configurator.infrastructure.observability.metrics_service import (
    ORDER_SUBMISSIONS_TOTAL,
)
from tailor_configurator.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()


def to_line_item(
    configuration: Configuration,
    product: Product,
    quantity: int = 1,
    *,
    line_item_id: str | None = None,
    added_at: datetime | None = None,
) -> LineItem:
    """Freezes the configuration into a priced cart entry, independent of later edits."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantity(
            f"Quantity must be a positive integer, got {quantity!r}",
            context={"product_id": product.id},
        )
    fabric_image = configuration.fabric.front_image if configuration.fabric else None
    return LineItem(
        id=line_item_id or f"cart-{uuid4().hex[:12]}",
        product_id=product.id,
        product_name=product.name,
        product_category=product.category,
        base_image=fabric_image or product.base_images.front,
        snapshot=configuration.to_snapshot(),
        base_price=product.base_price,
        unit_price=price(configuration, product),
        quantity=quantity,
        added_at=added_at or datetime.now(UTC),
    )


class CartOrderAdapter:
    """Turns line items into an order submission. No retry: failures go straight to the caller."""

    def __init__(self, orders: OrderPort) -> None:
        self._orders = orders

    @trace_operation("checkout.submit_order")
    async def submit_order(
        self,
        customer: CustomerContact,
        line_items: Sequence[LineItem],
        payment_method: PaymentMethod = PaymentMethod.COD,
        notes: str | None = None,
    ) -> str:
        if not line_items:
            raise OrderSubmissionError("Cannot submit an order without line items")

        order = OrderRequest(
            customer=customer,
            items=tuple(line_items),
            payment_method=PaymentMethod(payment_method),
            notes=notes,
        )
        try:
            order_number = await self._orders.submit(order)
        except ProviderError as e:
            ORDER_SUBMISSIONS_TOTAL.labels(outcome="error").inc()
            logger.warning(
                "Order submission failed",
                items=len(order.items),
                error_type=type(e).__name__,
                error_details=str(e),
                error_retryable=e.retryable,
            )
            raise OrderSubmissionError(
                f"Order submission failed: {e}",
                context={"status_code": e.status_code, "retryable": e.retryable},
            ) from e

        ORDER_SUBMISSIONS_TOTAL.labels(outcome="success").inc()
        logger.info(
            "Order submitted",
            order_number=order_number,
            items=len(order.items),
            total=order.total.amount,
        )
        return order_number
