"""
Submit payloads posted back by card actions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChangeTicketStatusPayload:
    """Data submitted by the "change status" card."""

    ASSIGN_TO_SELF_ACTION = "AssignToSelf"
    CLOSE_ACTION = "Close"
    REOPEN_ACTION = "Reopen"

    ticket_id: str = ""
    action: str = ""

    def to_submit_data(self) -> dict[str, Any]:
        # The selected action is merged in by the client from the choice input
        data: dict[str, Any] = {"ticketId": str(self.ticket_id or "")}
        if self.action:
            data["action"] = self.action
        return data

    @classmethod
    def from_activity_value(cls, value: dict[str, Any] | None) -> "ChangeTicketStatusPayload":
        """Parse ``turn_context.activity.value`` from a submit action."""
        value = value or {}
        return cls(
            ticket_id=str(value.get("ticketId") or ""),
            action=str(value.get("action") or ""),
        )
