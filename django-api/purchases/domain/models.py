"""Domain models for a ticket purchase.

Nothing here is persisted: requests and totals live for a single purchase call.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Self

from purchases.domain.value_objects import ZERO, Money


class TicketCategory(Enum):
    """Ticket categories a purchase can contain."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


@dataclass(frozen=True)
class CategoryRule:
    """Unit price of a category and whether its tickets take a seat."""

    unit_price: Money
    occupies_seat: bool


# Infants sit on an adult's lap.
CATEGORY_RULES = MappingProxyType(
    {
        TicketCategory.INFANT: CategoryRule(unit_price=Money(0), occupies_seat=False),
        TicketCategory.CHILD: CategoryRule(unit_price=Money(15), occupies_seat=True),
        TicketCategory.ADULT: CategoryRule(unit_price=Money(25), occupies_seat=True),
    }
)


@dataclass(frozen=True)
class TicketRequest:
    """A number of tickets of one category.

    Quantity is not range-checked here; a non-positive quantity is rejected
    when the purchase is validated.
    """

    category: TicketCategory
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise ValueError(f"Unknown ticket category: {self.category!r}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Ticket quantity must be an integer")


@dataclass(frozen=True)
class PurchaseTotals:
    """Aggregated counts and price for a validated batch of requests."""

    infants: int
    children: int
    adults: int
    total_price: Money
    seats_to_reserve: int

    @property
    def total_tickets(self) -> int:
        return self.infants + self.children + self.adults

    @classmethod
    def from_requests(cls, requests: Iterable[TicketRequest]) -> Self:
        counts = dict.fromkeys(TicketCategory, 0)
        total_price = ZERO
        seats = 0
        for request in requests:
            rule = CATEGORY_RULES[request.category]
            counts[request.category] += request.quantity
            total_price += rule.unit_price * request.quantity
            if rule.occupies_seat:
                seats += request.quantity

        return cls(
            infants=counts[TicketCategory.INFANT],
            children=counts[TicketCategory.CHILD],
            adults=counts[TicketCategory.ADULT],
            total_price=total_price,
            seats_to_reserve=seats,
        )
