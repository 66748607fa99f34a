"""Unit tests for the cart/order adapter (order service mocked)."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from tailor_configurator.core.application.checkout import CartOrderAdapter, to_line_item
from tailor_configurator.core.application.exceptions import (
    InvalidQuantity,
    OrderSubmissionError,
)
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.application.store import ConfigurationStore
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.order import (
    CustomerContact,
    LineItem,
    OrderRequest,
    PaymentMethod,
    ShippingAddress,
)
from tailor_configurator.core.domain.shared import Money

# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture()
def mock_orders() -> AsyncMock:
    orders = AsyncMock()
    orders.submit.return_value = "ORD-1001"
    return orders


@pytest.fixture()
def customer() -> CustomerContact:
    return CustomerContact(
        name="Ayesha Khan",
        email="ayesha@example.com",
        phone="+92 300 0000000",
        address=ShippingAddress(street="12 Mall Road", city="Lahore", postal_code="54000"),
    )


@pytest.fixture()
def line_item(shirt_store: ConfigurationStore, shirt_product: Product) -> LineItem:
    return to_line_item(shirt_store.configuration, shirt_product, 2)


# ═══════════════════════════════════════════════════════════════════════
# to_line_item
# ═══════════════════════════════════════════════════════════════════════


class TestToLineItem:
    def test_prices_the_configuration(
        self, shirt_store: ConfigurationStore, shirt_product: Product
    ) -> None:
        shirt_store.select_fabric_by_id("fabric-champagne")
        added_at = datetime(2026, 6, 1, tzinfo=UTC)

        item = to_line_item(
            shirt_store.configuration,
            shirt_product,
            3,
            line_item_id="cart-fixed",
            added_at=added_at,
        )

        assert item.id == "cart-fixed"
        assert item.added_at == added_at
        assert item.base_price == Money(8500)
        assert item.unit_price == Money(9000)
        assert item.total_price == Money(27000)
        assert item.product_name == "Oxford Shirt"
        assert item.base_image == "/img/shirt-front.png"

    def test_generated_ids_are_unique(
        self, shirt_store: ConfigurationStore, shirt_product: Product
    ) -> None:
        first = to_line_item(shirt_store.configuration, shirt_product)
        second = to_line_item(shirt_store.configuration, shirt_product)

        assert first.id.startswith("cart-")
        assert first.id != second.id

    def test_is_independent_of_later_edits(
        self, shirt_store: ConfigurationStore, shirt_product: Product
    ) -> None:
        configuration = shirt_store.configuration
        item = to_line_item(configuration, shirt_product)

        configuration.selections["collar"] = shirt_product.option("collar", "collar-button-down")
        configuration.measurements["chest"] = "46"

        assert item.snapshot.selected_option_id("collar") == "collar-classic"
        assert item.snapshot.measurement_map() == {}
        assert item.unit_price == Money(8800)

    @pytest.mark.parametrize("quantity", [0, -2, 1.5, True])
    def test_rejects_invalid_quantity(
        self, shirt_store: ConfigurationStore, shirt_product: Product, quantity: object
    ) -> None:
        with pytest.raises(InvalidQuantity):
            to_line_item(shirt_store.configuration, shirt_product, quantity)  # type: ignore


# ═══════════════════════════════════════════════════════════════════════
# submit_order
# ═══════════════════════════════════════════════════════════════════════


class TestSubmitOrder:
    @pytest.mark.asyncio
    async def test_returns_the_order_number(
        self, mock_orders: AsyncMock, customer: CustomerContact, line_item: LineItem
    ) -> None:
        adapter = CartOrderAdapter(mock_orders)

        order_number = await adapter.submit_order(
            customer, [line_item], PaymentMethod.BANK_TRANSFER, notes="Gift wrap"
        )

        assert order_number == "ORD-1001"
        mock_orders.submit.assert_awaited_once()
        order: OrderRequest = mock_orders.submit.await_args.args[0]
        assert order.items == (line_item,)
        assert order.payment_method is PaymentMethod.BANK_TRANSFER
        assert order.notes == "Gift wrap"
        assert order.total == Money(17600)

    @pytest.mark.asyncio
    async def test_accepts_payment_method_strings(
        self, mock_orders: AsyncMock, customer: CustomerContact, line_item: LineItem
    ) -> None:
        adapter = CartOrderAdapter(mock_orders)

        await adapter.submit_order(customer, [line_item], "card")  # type: ignore[arg-type]

        assert mock_orders.submit.await_args.args[0].payment_method is PaymentMethod.CARD

    @pytest.mark.asyncio
    async def test_empty_order_is_rejected(
        self, mock_orders: AsyncMock, customer: CustomerContact
    ) -> None:
        with pytest.raises(OrderSubmissionError):
            await CartOrderAdapter(mock_orders).submit_order(customer, [])

        mock_orders.submit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_service_failure_is_surfaced_without_retry(
        self, mock_orders: AsyncMock, customer: CustomerContact, line_item: LineItem
    ) -> None:
        mock_orders.submit.side_effect = ProviderError(
            "orders", "unavailable", retryable=True, status_code=503
        )

        with pytest.raises(OrderSubmissionError) as exc_info:
            await CartOrderAdapter(mock_orders).submit_order(customer, [line_item])

        assert exc_info.value.context == {"status_code": 503, "retryable": True}
        assert mock_orders.submit.await_count == 1
