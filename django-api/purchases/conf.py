"""Purchase limits read from Django settings.

Settings are namespaced under ``TICKET_PURCHASE``::

    TICKET_PURCHASE = {"MAX_TICKETS_PER_PURCHASE": 25}
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_MAX_TICKETS_PER_PURCHASE = 25


@dataclass(frozen=True)
class PurchaseLimits:
    """Limits applied to a single purchase."""

    max_tickets: int = DEFAULT_MAX_TICKETS_PER_PURCHASE

    def __post_init__(self) -> None:
        if isinstance(self.max_tickets, bool) or not isinstance(self.max_tickets, int):
            raise ImproperlyConfigured("MAX_TICKETS_PER_PURCHASE must be an integer")
        if self.max_tickets <= 0:
            raise ImproperlyConfigured("MAX_TICKETS_PER_PURCHASE must be positive")

    @classmethod
    def from_settings(cls) -> Self:
        options = getattr(settings, "TICKET_PURCHASE", {})
        if not isinstance(options, Mapping):
            raise ImproperlyConfigured("TICKET_PURCHASE must be a mapping")
        return cls(
            max_tickets=options.get(
                "MAX_TICKETS_PER_PURCHASE", DEFAULT_MAX_TICKETS_PER_PURCHASE
            ),
        )
