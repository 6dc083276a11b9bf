"""Ticket purchase service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate the whole request before any side effect
- Return nothing on success, raise domain errors on rejection

A purchase is all-or-nothing: it either ends with exactly one payment and one
seat reservation, or raises before either gateway is called.
"""

import logging
from collections.abc import Sequence

from purchases.conf import PurchaseLimits
from purchases.domain.errors import (
    InvalidAccountError,
    InvalidPurchaseError,
    MissingAdultError,
    NonPositiveQuantityError,
    NoTicketsRequestedError,
    NullTicketRequestError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from purchases.domain.models import PurchaseTotals, TicketRequest
from purchases.domain.value_objects import AccountId
from purchases.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

logger = logging.getLogger(__name__)


class TicketPurchaseService:
    """Service for validating, pricing and committing ticket purchases."""

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        reservation_gateway: SeatReservationGateway,
        limits: PurchaseLimits | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._reservation_gateway = reservation_gateway
        self._limits = limits if limits is not None else PurchaseLimits.from_settings()

    def purchase_tickets(
        self, account_id: int | None, *ticket_requests: TicketRequest | None
    ) -> None:
        """Purchase the given tickets for an account.

        Raises:
            InvalidPurchaseError: If the account or any request breaks a rule.
        """
        self.purchase(account_id, ticket_requests)

    def purchase(
        self,
        account_id: int | None,
        requests: Sequence[TicketRequest | None] | None,
    ) -> None:
        """Validate and price a batch of requests, then pay and reserve seats.

        Gateway exceptions are not caught.

        Raises:
            InvalidAccountError: If the account ID is missing or not positive.
            NoTicketsRequestedError: If there are no requests.
            NullTicketRequestError: If a request is None.
            NonPositiveQuantityError: If a request has a quantity below 1.
            TooManyTicketsError: If the total exceeds the per-purchase limit.
            MissingAdultError: If children or infants come without an adult.
            TooManyInfantsError: If infants outnumber adults.
        """
        try:
            account = self._parse_account(account_id)
            totals = self.quote(requests)
        except InvalidPurchaseError as exc:
            logger.info("Purchase rejected for account %r: %s", account_id, exc.code.value)
            raise

        self._payment_gateway.make_payment(account.value, totals.total_price.amount)
        self._reservation_gateway.reserve_seat(account.value, totals.seats_to_reserve)
        logger.info(
            "Purchase completed for account %s: %s tickets, price %s, %s seats",
            account.value,
            totals.total_tickets,
            totals.total_price,
            totals.seats_to_reserve,
        )

    def quote(self, requests: Sequence[TicketRequest | None] | None) -> PurchaseTotals:
        """Return the totals for a batch of requests without paying or reserving.

        Raises:
            InvalidPurchaseError: If any request or business rule is violated.
        """
        valid_requests = self._validate_requests(requests)
        totals = PurchaseTotals.from_requests(valid_requests)
        logger.debug("Aggregated %s into %s", valid_requests, totals)
        self._validate_business_rules(totals)
        return totals

    def _parse_account(self, account_id: int | None) -> AccountId:
        try:
            return AccountId.parse(account_id)
        except (TypeError, ValueError) as exc:
            raise InvalidAccountError(account_id) from exc

    def _validate_requests(
        self, requests: Sequence[TicketRequest | None] | None
    ) -> list[TicketRequest]:
        if not requests:
            raise NoTicketsRequestedError()

        valid_requests = []
        for position, request in enumerate(requests):
            if request is None:
                raise NullTicketRequestError(position)
            if request.quantity <= 0:
                raise NonPositiveQuantityError(position, request.quantity)
            valid_requests.append(request)
        return valid_requests

    def _validate_business_rules(self, totals: PurchaseTotals) -> None:
        if totals.total_tickets > self._limits.max_tickets:
            raise TooManyTicketsError(totals.total_tickets, self._limits.max_tickets)

        if (totals.infants > 0 or totals.children > 0) and totals.adults == 0:
            raise MissingAdultError()

        if totals.infants > totals.adults:
            raise TooManyInfantsError(totals.infants, totals.adults)
