"""Shared fixtures for the card tests."""

from datetime import datetime, timezone

import pytest

from askhr_cards.core.resources import ResourceStrings
from askhr_cards.models.ticket import Ticket, TicketState


@pytest.fixture
def resources():
    """English resource strings."""
    return ResourceStrings()


@pytest.fixture
def open_ticket():
    """An open, unassigned ticket with every field filled in."""
    return Ticket(
        ticket_id="a1b2c3",
        title="Parental leave",
        description="Starting in March",
        user_question="How many weeks of parental leave do I get?",
        knowledge_base_answer=None,
        status=TicketState.OPEN,
        requester_user_principal_name="megan@contoso.com",
        requester_given_name="Megan",
    )


@pytest.fixture
def assigned_ticket(open_ticket):
    open_ticket.assigned_to_name = "Alex Wilber"
    open_ticket.assigned_to_object_id = "5d9f0e2a-0000-4c1a-9d3e-7f1b2c3d4e5f"
    return open_ticket


@pytest.fixture
def closed_ticket(assigned_ticket):
    assigned_ticket.status = TicketState.CLOSED
    assigned_ticket.date_closed = datetime(2023, 1, 5, 14, 30, tzinfo=timezone.utc)
    assigned_ticket.knowledge_base_answer = "Use policy X"
    return assigned_ticket
