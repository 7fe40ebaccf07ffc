from askhr_cards.models.help_tab import HelpTabViewModel, validate_help_tab
from askhr_cards.models.payloads import ChangeTicketStatusPayload
from askhr_cards.models.ticket import Ticket, TicketState

__all__ = [
    "ChangeTicketStatusPayload",
    "HelpTabViewModel",
    "Ticket",
    "TicketState",
    "validate_help_tab",
]
