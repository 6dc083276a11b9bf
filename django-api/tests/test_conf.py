"""Tests for purchase limits configuration.

Run with: pytest tests/test_conf.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from purchases.conf import DEFAULT_MAX_TICKETS_PER_PURCHASE, PurchaseLimits


class TestPurchaseLimits:
    """Tests for PurchaseLimits."""

    def test_default_limit(self):
        """The default limit is 25 tickets."""
        assert PurchaseLimits().max_tickets == DEFAULT_MAX_TICKETS_PER_PURCHASE == 25

    def test_reads_settings(self, settings):
        """from_settings reads MAX_TICKETS_PER_PURCHASE."""
        settings.TICKET_PURCHASE = {"MAX_TICKETS_PER_PURCHASE": 10}
        assert PurchaseLimits.from_settings().max_tickets == 10

    def test_missing_settings_fall_back_to_default(self, settings):
        """Without TICKET_PURCHASE the default applies."""
        del settings.TICKET_PURCHASE
        assert PurchaseLimits.from_settings().max_tickets == 25

    def test_missing_key_falls_back_to_default(self, settings):
        """An empty TICKET_PURCHASE keeps the default."""
        settings.TICKET_PURCHASE = {}
        assert PurchaseLimits.from_settings().max_tickets == 25

    @pytest.mark.parametrize("limit", [0, -5, "10", 2.5, True, None])
    def test_rejects_non_positive_limit(self, settings, limit):
        """A limit that is not a positive integer is a configuration error."""
        settings.TICKET_PURCHASE = {"MAX_TICKETS_PER_PURCHASE": limit}
        with pytest.raises(ImproperlyConfigured):
            PurchaseLimits.from_settings()

    @pytest.mark.parametrize("options", [None, 25, ["MAX_TICKETS_PER_PURCHASE"]])
    def test_rejects_non_mapping_settings(self, settings, options):
        """TICKET_PURCHASE must be a mapping."""
        settings.TICKET_PURCHASE = options
        with pytest.raises(ImproperlyConfigured):
            PurchaseLimits.from_settings()
