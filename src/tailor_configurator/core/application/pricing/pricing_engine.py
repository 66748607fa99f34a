"""Deterministic pricing of a configuration.

total = base price + fabric modifier + sum of every selected option's modifier.
Empty slots and missing modifiers count as zero. Totals are never clamped.
"""

from dataclasses import dataclass

from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.configuration import Configuration
from tailor_configurator.core.domain.shared import Money

BASE_LINE = "base"
FABRIC_LINE = "fabric"


@dataclass(frozen=True)
class PriceLine:
    key: str
    label: str
    amount: Money


def price(configuration: Configuration, product: Product) -> Money:
    return sum((line.amount for line in price_breakdown(configuration, product)), Money.zero())


def price_breakdown(configuration: Configuration, product: Product) -> list[PriceLine]:
    """Per-line contributions in display order; base first, then fabric, then categories."""
    lines = [PriceLine(BASE_LINE, product.name or product.id, product.base_price)]

    fabric = configuration.fabric
    if fabric is not None:
        modifier = Money(fabric.price_modifier or 0)
        lines.append(PriceLine(FABRIC_LINE, fabric.name or fabric.id, modifier))

    for category_key, option in configuration.selections.items():
        if option is None:
            continue
        modifier = Money(option.price_modifier or 0)
        lines.append(PriceLine(category_key, option.name or option.id, modifier))
    return lines
