from askhr_cards.cards.card_helper import (
    format_date_for_card,
    get_ticket_display_status,
    truncate,
)
from askhr_cards.cards.elements import CardDescription
from askhr_cards.cards.sme_ticket_card import build_card, build_status_choice_set
from askhr_cards.cards.unrecognized_team_input_card import build_unrecognized_team_input_card

__all__ = [
    "CardDescription",
    "build_card",
    "build_status_choice_set",
    "build_unrecognized_team_input_card",
    "format_date_for_card",
    "get_ticket_display_status",
    "truncate",
]
