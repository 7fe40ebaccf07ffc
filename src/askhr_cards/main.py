"""
Render an SME ticket card from the command line
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from typing import List, Optional

from dotenv import load_dotenv

from askhr_cards.cards.sme_ticket_card import build_card
from askhr_cards.config import CardConfig
from askhr_cards.core.resources import ResourceStrings
from askhr_cards.models.ticket import Ticket, TicketState


def build_ticket(args) -> Ticket:
    status = TicketState.CLOSED if args.status == "closed" else TicketState.OPEN
    date_closed = None
    if status is TicketState.CLOSED and args.closed_at:
        date_closed = datetime.fromisoformat(args.closed_at.replace("Z", "+00:00"))
    elif status is TicketState.CLOSED:
        date_closed = datetime.now(timezone.utc)

    return Ticket(
        ticket_id=args.ticket_id,
        title=args.title,
        description=args.description or "",
        user_question=args.question or "",
        knowledge_base_answer=args.kb_answer,
        status=status,
        requester_user_principal_name=args.requester,
        requester_given_name=args.given_name or "",
        assigned_to_name=args.assigned_to or "",
        assigned_to_object_id=args.assigned_to_id or "",
        date_closed=date_closed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Render the experts team ticket card as adaptive card JSON",
    )
    parser.add_argument("--ticket-id", required=True, help="Ticket identifier")
    parser.add_argument("--title", required=True, help="Ticket title")
    parser.add_argument("--requester", required=True, help="Requester user principal name")
    parser.add_argument("--given-name", help="Requester given name")
    parser.add_argument("--description", help="Ticket description")
    parser.add_argument("--question", help="Question the user asked")
    parser.add_argument("--kb-answer", help="Knowledge base answer shown to the user")
    parser.add_argument("--status", choices=["open", "closed"], default="open")
    parser.add_argument("--assigned-to", help="Display name of the assigned expert")
    parser.add_argument("--assigned-to-id", help="Object id of the assigned expert")
    parser.add_argument("--closed-at", help="ISO timestamp the ticket was closed")

    args = parser.parse_args(argv)

    config = CardConfig.from_env()
    logger = config.configure_logging()

    try:
        config.validate()
        card = build_card(build_ticket(args), ResourceStrings(), config.text_direction, config)
    except ValueError as e:
        logger.error(f"Could not render card: {e}")
        return 1

    print(json.dumps(card.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
