"""Pytest configuration and shared fixtures."""

import pytest

from purchases.conf import PurchaseLimits
from purchases.gateways import InMemoryPaymentGateway, InMemorySeatReservationGateway
from purchases.services import TicketPurchaseService


@pytest.fixture
def payment_gateway() -> InMemoryPaymentGateway:
    return InMemoryPaymentGateway()


@pytest.fixture
def reservation_gateway() -> InMemorySeatReservationGateway:
    return InMemorySeatReservationGateway()


@pytest.fixture
def service(
    payment_gateway: InMemoryPaymentGateway,
    reservation_gateway: InMemorySeatReservationGateway,
) -> TicketPurchaseService:
    return TicketPurchaseService(payment_gateway, reservation_gateway, PurchaseLimits())
