"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    NULL_TICKET_REQUEST = "NULL_TICKET_REQUEST"
    NON_POSITIVE_QUANTITY = "NON_POSITIVE_QUANTITY"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    MISSING_ADULT = "MISSING_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase breaks a validation or business rule."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing or not positive."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID",
        )
        self.account_id = account_id


class NoTicketsRequestedError(InvalidPurchaseError):
    """Raised when a purchase contains no ticket requests."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKETS_REQUESTED,
            message="No tickets requested",
        )


class NullTicketRequestError(InvalidPurchaseError):
    """Raised when a ticket request is missing."""

    def __init__(self, position: int) -> None:
        super().__init__(
            code=ErrorCode.NULL_TICKET_REQUEST,
            message="Ticket request cannot be null",
        )
        self.position = position


class NonPositiveQuantityError(InvalidPurchaseError):
    """Raised when a ticket request has a quantity below one."""

    def __init__(self, position: int, quantity: int) -> None:
        super().__init__(
            code=ErrorCode.NON_POSITIVE_QUANTITY,
            message="Number of tickets must be positive",
        )
        self.position = position
        self.quantity = quantity


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when a purchase exceeds the per-purchase ticket limit."""

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Cannot purchase more than {limit} tickets",
        )
        self.requested = requested
        self.limit = limit


class MissingAdultError(InvalidPurchaseError):
    """Raised when child or infant tickets are bought without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message="Child or Infant tickets cannot be purchased without an Adult ticket",
        )


class TooManyInfantsError(InvalidPurchaseError):
    """Raised when infants outnumber adults."""

    def __init__(self, infants: int, adults: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message="Number of Infant tickets cannot exceed number of Adult tickets",
        )
        self.infants = infants
        self.adults = adults
