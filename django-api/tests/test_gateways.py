"""Tests for the in-memory gateways.

Run with: pytest tests/test_gateways.py -v
"""

import pytest

from purchases.gateways import (
    InMemoryPaymentGateway,
    InMemorySeatReservationGateway,
    SeatReservationGateway,
    TicketPaymentGateway,
)


class TestInterfaces:
    """Tests for the gateway interfaces."""

    def test_interfaces_are_abstract(self):
        """Gateway interfaces cannot be instantiated directly."""
        with pytest.raises(TypeError):
            TicketPaymentGateway()
        with pytest.raises(TypeError):
            SeatReservationGateway()


class TestInMemoryGateways:
    """Tests for call recording."""

    def test_payment_gateway_records_calls_in_order(self):
        """Payments are recorded as (account_id, amount)."""
        gateway = InMemoryPaymentGateway()
        gateway.make_payment(1, 65)
        gateway.make_payment(2, 25)
        assert gateway.payments == [(1, 65), (2, 25)]

    def test_reservation_gateway_records_calls_in_order(self):
        """Reservations are recorded as (account_id, seat_count)."""
        gateway = InMemorySeatReservationGateway()
        gateway.reserve_seat(1, 3)
        assert gateway.reservations == [(1, 3)]
