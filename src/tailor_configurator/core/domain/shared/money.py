from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Money:
    """Integer amount of currency minor units.

    Arithmetic stays in integers; there is no float path in or out.
    """

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(
                f"Money amount must be an int of minor units, got {type(self.amount).__name__}"
            )

    @classmethod
    def zero(cls) -> Money:
        return cls(0)

    def __add__(self, other: Money | int) -> Money:
        if isinstance(other, Money):
            return Money(self.amount + other.amount)
        if isinstance(other, int) and not isinstance(other, bool):
            return Money(self.amount + other)
        return NotImplemented

    def __radd__(self, other: Money | int) -> Money:
        return self.__add__(other)

    def __sub__(self, other: Money | int) -> Money:
        if isinstance(other, Money):
            return Money(self.amount - other.amount)
        if isinstance(other, int) and not isinstance(other, bool):
            return Money(self.amount - other)
        return NotImplemented

    def __mul__(self, quantity: int) -> Money:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return NotImplemented
        return Money(self.amount * quantity)

    __rmul__ = __mul__

    def is_negative(self) -> bool:
        return self.amount < 0

    def clamped(self) -> Money:
        """Floor at zero. Presentation policy only; engines never clamp."""
        return self if self.amount >= 0 else Money.zero()

    def __str__(self) -> str:
        return str(self.amount)
