from purchases.gateways.in_memory import InMemoryPaymentGateway, InMemorySeatReservationGateway
from purchases.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

__all__ = [
    "TicketPaymentGateway",
    "SeatReservationGateway",
    "InMemoryPaymentGateway",
    "InMemorySeatReservationGateway",
]
