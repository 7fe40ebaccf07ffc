"""
Formatting helpers shared by the cards
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from askhr_cards.core.resources import ResourceStrings
from askhr_cards.models.ticket import Ticket, TicketState

logger = logging.getLogger(__name__)

CARD_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def truncate(text: Any, max_length: int) -> str:
    """Return the first ``max_length`` characters of ``text``, no ellipsis."""
    if text is None or text == "":
        return ""
    text = str(text)
    if len(text) <= max_length:
        return text
    return text[: max(max_length, 0)]


def format_date_for_card(value: Any) -> str:
    """
    Format a timestamp with adaptive card DATE/TIME functions.

    The Teams client renders these in the viewer's locale and time zone.
    Naive datetimes are taken as UTC.
    """
    if value is None:
        return ""
    if not isinstance(value, datetime):
        logger.warning(f"Cannot format {type(value).__name__} value {value!r} as a card date")
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    stamp = value.astimezone(timezone.utc).strftime(CARD_DATE_FORMAT)
    return f"{{{{DATE({stamp}, SHORT)}}}} {{{{TIME({stamp})}}}}"


def get_ticket_display_status(ticket: Ticket, resources: ResourceStrings) -> str:
    """Status text shown to experts on the ticket card."""
    state = ticket.state
    if state is TicketState.OPEN:
        if ticket.is_assigned:
            return resources.format("AssignedStatusTemplate", ticket.assigned_to_name)
        return resources.get("UnassignedStatusValue")
    if state is TicketState.CLOSED:
        return resources.get("ClosedStatusValue")
    return ""
