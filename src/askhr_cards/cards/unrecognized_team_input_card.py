"""
Card sent when a team member posts text the bot does not understand
"""

from __future__ import annotations

from botbuilder.core import CardFactory
from botbuilder.schema import ActionTypes, Attachment, CardAction, HeroCard

from askhr_cards.core.resources import ResourceStrings

# Command the bot routes to the team tour
TEAM_TOUR_COMMAND = "team tour"


def build_unrecognized_team_input_card(resources: ResourceStrings | None = None) -> Attachment:
    """Hero card with a single button that starts the team tour."""
    resources = resources or ResourceStrings()
    tour_button_text = resources.get("TakeATeamTourButtonText")

    card = HeroCard(
        text=resources.get("TeamCustomMessage"),
        buttons=[
            CardAction(
                type=ActionTypes.message_back,
                title=tour_button_text,
                display_text=tour_button_text,
                text=TEAM_TOUR_COMMAND,
            )
        ],
    )

    return CardFactory.hero_card(card)
