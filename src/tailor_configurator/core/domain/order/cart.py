from dataclasses import replace

from tailor_configurator.core.domain.order.line_item import LineItem
from tailor_configurator.core.domain.shared import Money


class Cart:
    """Ordered, newest-first collection of line items."""

    def __init__(self, items: list[LineItem] | None = None) -> None:
        self._items: list[LineItem] = list(items or [])

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total_amount(self) -> Money:
        return sum((item.total_price for item in self._items), Money.zero())

    def add(self, item: LineItem) -> None:
        self._items.insert(0, item)

    def remove(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def update_quantity(self, item_id: str, quantity: int) -> None:
        if quantity < 1:
            return
        self._items = [
            replace(item, quantity=quantity) if item.id == item_id else item
            for item in self._items
        ]

    def get(self, item_id: str) -> LineItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
