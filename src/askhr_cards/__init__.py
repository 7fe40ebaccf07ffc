"""
Adaptive cards for the HR help bot's experts team
"""

from askhr_cards.cards import build_card, build_status_choice_set, build_unrecognized_team_input_card
from askhr_cards.config import CardConfig
from askhr_cards.core import ResourceStrings, TextDirection
from askhr_cards.models import ChangeTicketStatusPayload, HelpTabViewModel, Ticket, TicketState

__version__ = "1.0.0"

__all__ = [
    "CardConfig",
    "ChangeTicketStatusPayload",
    "HelpTabViewModel",
    "ResourceStrings",
    "TextDirection",
    "Ticket",
    "TicketState",
    "build_card",
    "build_status_choice_set",
    "build_unrecognized_team_input_card",
]
