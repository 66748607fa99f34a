"""Unit tests for LocalCartStore (in-memory key-value backend)."""

import json
from datetime import UTC, datetime

import pytest

from tailor_configurator.core.application.checkout import LocalCartStore, to_line_item
from tailor_configurator.core.application.store import ConfigurationStore
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.order import Cart, LineItem
from tailor_configurator.infrastructure.repositories.in_memory_key_value_store import (
    InMemoryKeyValueStore,
)

ADDED_AT = datetime(2026, 3, 1, 10, 30, tzinfo=UTC)

# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture()
def cart_store(kv: InMemoryKeyValueStore) -> LocalCartStore:
    return LocalCartStore(kv)


def _build_item(
    store: ConfigurationStore, product: Product, item_id: str, quantity: int = 1
) -> LineItem:
    return to_line_item(
        store.configuration, product, quantity, line_item_id=item_id, added_at=ADDED_AT
    )


class TestLocalCartStore:
    def test_empty_device_loads_an_empty_cart(self, cart_store: LocalCartStore) -> None:
        assert len(cart_store.load()) == 0

    def test_cart_round_trips(
        self,
        cart_store: LocalCartStore,
        shirt_store: ConfigurationStore,
        shirt_product: Product,
    ) -> None:
        shirt_store.select_fabric_by_id("fabric-champagne")
        shirt_store.set_measurement("chest", "41")
        first = _build_item(shirt_store, shirt_product, "cart-1", quantity=2)
        shirt_store.select_option_by_id("sleeve", "sleeve-half")
        second = _build_item(shirt_store, shirt_product, "cart-2")
        cart = Cart()
        cart.add(first)
        cart.add(second)

        cart_store.save(cart)
        restored = cart_store.load()

        assert restored.items == (second, first)
        assert restored.total_amount == cart.total_amount
        assert restored.item_count == 3

    def test_uses_the_storefront_record_shape(
        self,
        kv: InMemoryKeyValueStore,
        cart_store: LocalCartStore,
        shirt_store: ConfigurationStore,
        shirt_product: Product,
    ) -> None:
        cart_store.save(Cart([_build_item(shirt_store, shirt_product, "cart-1")]))

        record = json.loads(kv.get("tailor_fit_cart"))[0]

        assert record["id"] == "cart-1"
        assert record["productId"] == "shirt-oxford"
        assert record["styles"]["collar"]["id"] == "collar-classic"
        assert record["totalPrice"] == shirt_store.price().amount

    def test_unreadable_items_are_skipped_and_kept_aside(
        self,
        kv: InMemoryKeyValueStore,
        cart_store: LocalCartStore,
        shirt_store: ConfigurationStore,
        shirt_product: Product,
    ) -> None:
        cart_store.save(Cart([_build_item(shirt_store, shirt_product, "cart-1")]))
        records = json.loads(kv.get("tailor_fit_cart"))
        broken = {"id": "cart-x", "productId": "shirt-oxford", "quantity": 0}
        kv.put("tailor_fit_cart", json.dumps([*records, broken]))

        cart = cart_store.load()
        cart.add(_build_item(shirt_store, shirt_product, "cart-2"))
        cart_store.save(cart)

        assert [item.id for item in cart_store.load().items] == ["cart-2", "cart-1"]
        assert json.loads(kv.get("tailor_fit_cart.rejected")) == [broken]

    def test_clear_empties_the_stored_cart(
        self,
        cart_store: LocalCartStore,
        shirt_store: ConfigurationStore,
        shirt_product: Product,
    ) -> None:
        cart_store.save(Cart([_build_item(shirt_store, shirt_product, "cart-1")]))

        cart_store.clear()

        assert len(cart_store.load()) == 0
