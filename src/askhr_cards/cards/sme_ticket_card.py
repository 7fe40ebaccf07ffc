"""
SME ticket card

Posted to the experts' channel when a user question is escalated, and sent
again as an in-place update whenever the ticket status changes. The card is
a pure function of the ticket snapshot; nothing here performs I/O.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from askhr_cards.cards.card_helper import (
    format_date_for_card,
    get_ticket_display_status,
    truncate,
)
from askhr_cards.cards.elements import (
    CardAction,
    CardDescription,
    Choice,
    Fact,
    NestedCard,
    OpenUrlAction,
    ShowCardAction,
    StatusChoiceSet,
    SubmitAction,
    TextBlock,
)
from askhr_cards.config import DEFAULT_TEAMS_CHAT_BASE_URL, CardConfig
from askhr_cards.core.resources import ResourceStrings, TextDirection
from askhr_cards.models.payloads import ChangeTicketStatusPayload
from askhr_cards.models.ticket import Ticket, TicketState

logger = logging.getLogger(__name__)

ACTION_INPUT_ID = "action"

ASSIGN = ChangeTicketStatusPayload.ASSIGN_TO_SELF_ACTION
CLOSE = ChangeTicketStatusPayload.CLOSE_ACTION
REOPEN = ChangeTicketStatusPayload.REOPEN_ACTION

# (state, is_assigned) -> (default value, [(label key, value), ...]);
# None for is_assigned means the assignment does not matter
STATUS_CHOICES: dict[tuple[TicketState, bool | None], tuple[str, list[tuple[str, str]]]] = {
    (TicketState.OPEN, False): (
        ASSIGN,
        [("AssignToMeChoiceLabel", ASSIGN), ("CloseChoiceLabel", CLOSE)],
    ),
    (TicketState.OPEN, True): (
        CLOSE,
        [
            ("UnassignChoiceLabel", REOPEN),
            ("AssignToMeChoiceLabel", ASSIGN),
            ("CloseChoiceLabel", CLOSE),
        ],
    ),
    (TicketState.CLOSED, None): (
        REOPEN,
        [("ReopenChoiceLabel", REOPEN), ("ReopenAssignChoiceLabel", ASSIGN)],
    ),
}


def build_status_choice_set(
    status: int, is_assigned: bool, resources: ResourceStrings
) -> StatusChoiceSet:
    """
    Choices offered by the "change status" card.

    An unknown status yields an empty choice set rather than an error, so the
    card still renders for a ticket the store could not classify.
    """
    try:
        state = TicketState(status)
    except (ValueError, TypeError):
        logger.warning(f"Ticket status {status!r} has no status choices")
        return StatusChoiceSet(input_id=ACTION_INPUT_ID)

    default, options = (
        STATUS_CHOICES.get((state, bool(is_assigned))) or STATUS_CHOICES[(state, None)]
    )
    return StatusChoiceSet(
        input_id=ACTION_INPUT_ID,
        value=default,
        choices=tuple(Choice(resources.get(key), value) for key, value in options),
    )


def build_facts(ticket: Ticket, resources: ResourceStrings) -> list[Fact]:
    facts: list[Fact] = []

    if ticket.description:
        facts.append(Fact(resources.get("DescriptionFactLabel"), str(ticket.description)))

    if ticket.user_question:
        facts.append(Fact(resources.get("QuestionFactLabel"), str(ticket.user_question)))

    facts.append(
        Fact(resources.get("StatusFactLabel"), get_ticket_display_status(ticket, resources))
    )

    if ticket.state is TicketState.CLOSED:
        if ticket.date_closed is None:
            logger.warning(f"Closed ticket {ticket.ticket_id} has no closed date")
        facts.append(
            Fact(resources.get("ClosedFactLabel"), format_date_for_card(ticket.date_closed))
        )

    return facts


def build_chat_url(
    ticket: Ticket,
    resources: ResourceStrings,
    base_url: str = DEFAULT_TEAMS_CHAT_BASE_URL,
) -> str:
    """Teams deep link opening a 1:1 chat with the requester, message pre-filled."""
    message = resources.format("ChatMessageTemplate", ticket.title)
    users = quote(str(ticket.requester_user_principal_name or ""), safe="")
    return f"{base_url}?users={users}&message={quote(message, safe='')}"


def build_actions(
    ticket: Ticket,
    resources: ResourceStrings,
    text_direction: TextDirection,
    config: CardConfig,
) -> list[CardAction]:
    actions: list[CardAction] = [
        OpenUrlAction(
            title=resources.format("ChatButtonTemplate", ticket.requester_given_name),
            url=build_chat_url(ticket, resources, config.teams_chat_base_url),
        ),
        ShowCardAction(
            title=resources.get("ChangeStatusButtonTitle"),
            card=NestedCard(
                body=(build_status_choice_set(ticket.status, ticket.is_assigned, resources),),
                actions=(
                    SubmitAction(
                        title=resources.get("SubmitButtonTitle"),
                        data=ChangeTicketStatusPayload(ticket_id=ticket.ticket_id).to_submit_data(),
                    ),
                ),
            ),
        ),
    ]

    if ticket.knowledge_base_answer:
        answer = truncate(ticket.knowledge_base_answer, config.kb_answer_max_display_length)
        actions.append(
            ShowCardAction(
                title=resources.get("ViewArticleButtonTitle"),
                card=NestedCard(body=(TextBlock(answer, alignment=text_direction.alignment),)),
            )
        )

    return actions


def build_card(
    ticket: Ticket,
    resources: ResourceStrings,
    text_direction: TextDirection = TextDirection.LTR,
    config: CardConfig | None = None,
) -> CardDescription:
    """
    Build the SME card for a ticket

    Args:
        ticket: Latest ticket snapshot
        resources: Localized strings
        text_direction: Reading direction driving text alignment
        config: Display limits and deep link base URL

    Returns:
        Card description; call ``to_attachment()`` to send it
    """
    config = config or CardConfig()
    logger.debug(f"Building SME card for ticket {ticket.ticket_id} (status={ticket.status})")

    return CardDescription(
        title=str(ticket.title or ""),
        subtitle=resources.format("SubtitleTemplate", ticket.requester_user_principal_name),
        facts=tuple(build_facts(ticket, resources)),
        actions=tuple(build_actions(ticket, resources, text_direction, config)),
        text_direction=text_direction,
    )
