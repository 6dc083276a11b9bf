from purchases.services.purchase_service import TicketPurchaseService

__all__ = ["TicketPurchaseService"]
