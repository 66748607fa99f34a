from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class ShippingAddress:
    street: str
    city: str
    postal_code: str
    state: str = ""
    country: str = "Pakistan"


@dataclass(frozen=True, kw_only=True)
class CustomerContact:
    name: str
    email: str
    phone: str
    address: ShippingAddress = field(
        default_factory=lambda: ShippingAddress(street="", city="", postal_code="")
    )
