"""Gateway interfaces for the payment and seat reservation services.

Both services are external and trusted: they are only called with arguments
that already passed validation, and any failure they raise belongs to the caller.
"""

from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` currency units to the account."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the account."""
        ...
