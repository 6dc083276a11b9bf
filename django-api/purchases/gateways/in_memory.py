"""In-memory gateways that record every call instead of contacting a service."""

from purchases.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway


class InMemoryPaymentGateway(TicketPaymentGateway):
    """Payment gateway that keeps (account_id, amount) pairs in order."""

    def __init__(self) -> None:
        self.payments: list[tuple[int, int]] = []

    def make_payment(self, account_id: int, amount: int) -> None:
        self.payments.append((account_id, amount))


class InMemorySeatReservationGateway(SeatReservationGateway):
    """Reservation gateway that keeps (account_id, seat_count) pairs in order."""

    def __init__(self) -> None:
        self.reservations: list[tuple[int, int]] = []

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))
