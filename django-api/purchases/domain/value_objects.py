"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class AccountId:
    """Identifier of the account paying for a purchase."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")

    @classmethod
    def parse(cls, value: int | None) -> Self:
        if value is None:
            raise ValueError("Account ID is required")
        return cls(value=value)


@dataclass(frozen=True)
class Money:
    """Amount in whole currency units."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


ZERO = Money(0)
