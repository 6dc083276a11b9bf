from purchases.domain.models import (
    CATEGORY_RULES,
    CategoryRule,
    PurchaseTotals,
    TicketCategory,
    TicketRequest,
)
from purchases.domain.value_objects import AccountId, Money

__all__ = [
    "CATEGORY_RULES",
    "CategoryRule",
    "PurchaseTotals",
    "TicketCategory",
    "TicketRequest",
    "AccountId",
    "Money",
]
