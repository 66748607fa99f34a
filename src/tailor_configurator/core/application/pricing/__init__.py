from tailor_configurator.core.application.pricing.pricing_engine import (
    PriceLine,
    price,
    price_breakdown,
)

__all__ = ["PriceLine", "price", "price_breakdown"]
