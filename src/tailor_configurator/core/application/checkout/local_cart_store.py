from typing import Any

import structlog

from tailor_configurator.core.application.checkout.contracts.line_item_dto import LineItemDTO
from tailor_configurator.core.application.persistence.stored_records import (
    DecodedRecords,
    decode_records,
    write_records,
)
from tailor_configurator.core.application.ports import KeyValueStorePort
from tailor_configurator.core.domain.order import Cart, LineItem

logger = structlog.get_logger()

DEFAULT_CART_KEY = "tailor_fit_cart"


class LocalCartStore:
    """Keeps the device's cart across restarts. The whole cart is rewritten on every save."""

    def __init__(self, kv: KeyValueStorePort, key: str = DEFAULT_CART_KEY) -> None:
        self._kv = kv
        self._key = key

    def load(self) -> Cart:
        cart = Cart(self._load().records)
        logger.debug("Cart loaded", items=len(cart), item_count=cart.item_count)
        return cart

    def save(self, cart: Cart) -> None:
        records = [
            LineItemDTO.from_domain(item).model_dump(mode="json", by_alias=True)
            for item in cart.items
        ]
        write_records(self._kv, self._key, records, self._load().rejected)
        logger.debug("Cart saved", items=len(cart))

    def clear(self) -> None:
        self.save(Cart())

    def _load(self) -> DecodedRecords[LineItem]:
        return decode_records(self._kv.get(self._key), _parse_item, key=self._key)


def _parse_item(entry: Any) -> LineItem:
    return LineItemDTO.model_validate(entry).to_domain()
