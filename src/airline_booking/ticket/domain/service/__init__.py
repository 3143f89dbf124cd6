from .ticket_pricing import TicketPricing

__all__ = ["TicketPricing"]
