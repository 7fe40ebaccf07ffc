"""
Ticket snapshot rendered by the SME cards
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class TicketState(IntEnum):
    """Lifecycle states stored on a ticket."""

    OPEN = 0
    CLOSED = 1


@dataclass
class Ticket:
    """
    A question escalated to the experts team.

    Fields default to empty values so a partially-loaded ticket still renders.
    ``status`` is kept as a plain int because the store may hold values that
    are not a known ``TicketState``.
    """

    ticket_id: str = ""
    title: str = ""
    description: str = ""
    user_question: str = ""
    knowledge_base_answer: str | None = None
    status: int = TicketState.OPEN
    requester_user_principal_name: str = ""
    requester_given_name: str = ""
    assigned_to_name: str = ""
    assigned_to_object_id: str = ""
    date_closed: datetime | None = None

    @property
    def is_assigned(self) -> bool:
        return bool(self.assigned_to_object_id)

    @property
    def state(self) -> TicketState | None:
        """The known state for ``status``, or None when it is out of range."""
        try:
            return TicketState(self.status)
        except (ValueError, TypeError):
            return None
