"""
SME ticket card tests.
"""
import logging
from datetime import datetime
from urllib.parse import parse_qs, urlparse

import pytest

from askhr_cards.cards.elements import (
    OpenUrlAction,
    ShowCardAction,
    StatusChoiceSet,
    SubmitAction,
    TextBlock,
)
from askhr_cards.cards.sme_ticket_card import build_card, build_chat_url, build_status_choice_set
from askhr_cards.config import CardConfig
from askhr_cards.core.resources import TextDirection
from askhr_cards.models.ticket import Ticket, TicketState


def fact_titles(card):
    return [fact.title for fact in card.facts]


class TestStatusChoices:

    # Unassigned open ticket offers assign first
    def test_open_unassigned(self, resources):
        choice_set = build_status_choice_set(TicketState.OPEN, False, resources)
        assert choice_set.value == "AssignToSelf"
        assert [c.value for c in choice_set.choices] == ["AssignToSelf", "Close"]
        assert [c.title for c in choice_set.choices] == ["Assign to me", "Close"]

    # Assigned open ticket defaults to close and offers unassign
    def test_open_assigned(self, resources):
        choice_set = build_status_choice_set(TicketState.OPEN, True, resources)
        assert choice_set.value == "Close"
        assert [c.value for c in choice_set.choices] == ["Reopen", "AssignToSelf", "Close"]
        assert choice_set.choices[0].title == "Unassign"

    # Closed ticket ignores assignment
    @pytest.mark.parametrize("is_assigned", [True, False])
    def test_closed(self, resources, is_assigned):
        choice_set = build_status_choice_set(TicketState.CLOSED, is_assigned, resources)
        assert choice_set.value == "Reopen"
        assert [c.value for c in choice_set.choices] == ["Reopen", "AssignToSelf"]
        assert [c.title for c in choice_set.choices] == ["Reopen", "Reopen and assign to me"]

    # Unknown status renders an empty dropdown instead of failing
    @pytest.mark.parametrize("status", [7, -1, None])
    def test_unknown_status(self, resources, status):
        choice_set = build_status_choice_set(status, False, resources)
        assert choice_set.value is None
        assert choice_set.choices == ()
        assert "value" not in choice_set.to_dict()

    # Dropdown is a compact single select bound to the payload action
    def test_choice_set_json(self, resources):
        element = build_status_choice_set(TicketState.OPEN, False, resources).to_dict()
        assert element["type"] == "Input.ChoiceSet"
        assert element["id"] == "action"
        assert element["isMultiSelect"] is False
        assert element["style"] == "compact"


class TestFacts:

    # Empty description is skipped and no closed fact for open tickets
    def test_open_ticket_question_only(self, resources):
        ticket = Ticket(
            ticket_id="t1",
            title="Leave",
            status=TicketState.OPEN,
            description="",
            user_question="Why?",
            knowledge_base_answer=None,
        )
        card = build_card(ticket, resources)
        assert [(f.title, f.value) for f in card.facts] == [
            ("Question asked:", "Why?"),
            ("Status:", "Unassigned"),
        ]
        assert len(card.actions) == 2

    # Every fact present for a described open ticket
    def test_fact_order(self, resources, open_ticket):
        card = build_card(open_ticket, resources)
        assert fact_titles(card) == ["Description:", "Question asked:", "Status:"]

    # Assigned status names the expert
    def test_assigned_status(self, resources, assigned_ticket):
        card = build_card(assigned_ticket, resources)
        assert card.facts[-1].value == "Assigned to Alex Wilber"

    # Closed ticket shows the closed date last
    def test_closed_fact(self, resources, closed_ticket):
        card = build_card(closed_ticket, resources)
        assert fact_titles(card)[-2:] == ["Status:", "Closed:"]
        assert card.facts[-2].value == "Closed"
        assert "2023-01-05" in card.facts[-1].value
        assert len(card.actions) == 3

    # Closed ticket without a date still renders the fact
    def test_closed_without_date(self, resources, closed_ticket):
        closed_ticket.date_closed = None
        card = build_card(closed_ticket, resources)
        assert card.facts[-1].title == "Closed:"
        assert card.facts[-1].value == ""


class TestActions:

    # Chat action first, change status second
    def test_action_order(self, resources, open_ticket):
        card = build_card(open_ticket, resources)
        chat, change_status = card.actions
        assert isinstance(chat, OpenUrlAction)
        assert chat.title == "Chat with Megan"
        assert isinstance(change_status, ShowCardAction)
        assert change_status.title == "Change status"

    # Change status card holds one dropdown and one submit
    def test_change_status_card(self, resources, open_ticket):
        card = build_card(open_ticket, resources)
        nested = card.actions[1].card
        assert len(nested.body) == 1
        assert isinstance(nested.body[0], StatusChoiceSet)
        assert len(nested.actions) == 1
        assert nested.actions[0].title == "Submit"
        assert nested.actions[0].data == {"ticketId": "a1b2c3"}

    # View article shows the knowledge base answer
    def test_view_article(self, resources, closed_ticket):
        card = build_card(closed_ticket, resources)
        article = card.actions[2]
        assert article.title == "View article"
        assert article.card.body == (TextBlock("Use policy X", alignment="left"),)

    # Empty answer means no view article action
    @pytest.mark.parametrize("answer", [None, ""])
    def test_no_article(self, resources, open_ticket, answer):
        open_ticket.knowledge_base_answer = answer
        card = build_card(open_ticket, resources)
        assert len(card.actions) == 2

    # Long answers are cut at the configured length
    def test_article_truncated(self, resources, open_ticket):
        open_ticket.knowledge_base_answer = "x" * 20
        card = build_card(open_ticket, resources, config=CardConfig(kb_answer_max_display_length=8))
        assert card.actions[2].card.body[0].text == "x" * 8

    # RTL culture right aligns the article text
    def test_rtl_article(self, resources, closed_ticket):
        card = build_card(closed_ticket, resources, TextDirection.RTL)
        assert card.actions[2].card.body[0].alignment == "right"


class TestChatUrl:

    # Requester and message survive a decode round trip
    @pytest.mark.parametrize(
        "upn,title",
        [
            ("megan@contoso.com", "Parental leave"),
            ("o'brien&co@contoso.com", "Pay & benefits = 100%?"),
            ("zoë@contoso.com", "Congé parental für Jürgen"),
        ],
    )
    def test_round_trip(self, resources, upn, title):
        ticket = Ticket(title=title, requester_user_principal_name=upn)
        url = build_chat_url(ticket, resources)
        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert url.startswith("https://teams.microsoft.com/l/chat/0/0?users=")
        assert query["users"] == [upn]
        assert query["message"] == [f"Regarding your question \"{title}\""]

    # Nothing in the query values is left unescaped
    def test_encoded(self, resources):
        ticket = Ticket(title="a b&c", requester_user_principal_name="x y")
        url = build_chat_url(ticket, resources)
        assert "users=x%20y&" in url
        assert " " not in url


class TestCardJson:

    # Full card serializes to an adaptive card attachment
    def test_attachment(self, resources, closed_ticket):
        attachment = build_card(closed_ticket, resources).to_attachment()
        assert attachment.content_type == "application/vnd.microsoft.card.adaptive"
        content = attachment.content
        assert content["type"] == "AdaptiveCard"
        assert content["version"] == "1.0"
        title, subtitle, fact_set = content["body"]
        assert title["text"] == "Parental leave"
        assert title["size"] == "large"
        assert title["weight"] == "bolder"
        assert subtitle["text"] == "Question from megan@contoso.com"
        assert fact_set["type"] == "FactSet"
        assert [a["type"] for a in content["actions"]] == [
            "Action.OpenUrl",
            "Action.ShowCard",
            "Action.ShowCard",
        ]

    # Header alignment follows the text direction
    def test_rtl_header(self, resources, open_ticket):
        content = build_card(open_ticket, resources, TextDirection.RTL).to_dict()
        assert content["body"][0]["horizontalAlignment"] == "right"
        assert content["body"][1]["horizontalAlignment"] == "right"

    # An empty ticket still produces a valid card
    def test_empty_ticket(self, resources):
        card = build_card(Ticket(title=None, status=42), resources)
        assert card.title == ""
        assert card.subtitle == "Question from "
        assert [(f.title, f.value) for f in card.facts] == [("Status:", "")]
        assert card.actions[1].card.body[0].choices == ()
        assert card.to_dict()["type"] == "AdaptiveCard"

    # Card values are immutable
    def test_frozen(self, resources, open_ticket):
        card = build_card(open_ticket, resources)
        with pytest.raises(AttributeError):
            card.title = "changed"

    # Submit payload of a built card is read-only
    def test_submit_data_read_only(self, resources, open_ticket):
        card = build_card(open_ticket, resources)
        submit = card.actions[1].card.actions[0]
        with pytest.raises(TypeError):
            submit.data["ticketId"] = "other"
        assert card.to_dict()["actions"][1]["card"]["actions"][0]["data"] == {"ticketId": "a1b2c3"}

    # Submit payload is copied from the caller's dict
    def test_submit_data_copied(self):
        data = {"ticketId": "t1"}
        action = SubmitAction("Submit", data)
        data["ticketId"] = "other"
        assert action.data["ticketId"] == "t1"


class TestWronglyTypedTicket:

    # Closed date stored as text renders an empty fact
    def test_string_closed_date(self, resources, caplog):
        ticket = Ticket(status=TicketState.CLOSED, date_closed="2023-01-05T00:00:00Z")
        with caplog.at_level(logging.WARNING):
            card = build_card(ticket, resources)
        assert card.facts[-1].title == "Closed:"
        assert card.facts[-1].value == ""
        assert "card date" in caplog.text

    # Non-string answer is shown as text and truncated
    def test_numeric_answer(self, resources):
        ticket = Ticket(knowledge_base_answer=1234567)
        card = build_card(ticket, resources, config=CardConfig(kb_answer_max_display_length=4))
        assert card.actions[2].card.body[0].text == "1234"

    # Non-string requester still builds a decodable link
    def test_numeric_requester(self, resources):
        ticket = Ticket(title="Leave", requester_user_principal_name=42)
        card = build_card(ticket, resources)
        query = parse_qs(urlparse(card.actions[0].url).query)
        assert query["users"] == ["42"]
        assert card.subtitle == "Question from 42"

    # Non-string text fields become fact strings
    def test_numeric_text_fields(self, resources):
        ticket = Ticket(ticket_id=7, title=99, description=3, user_question=4.5)
        card = build_card(ticket, resources)
        assert card.title == "99"
        assert [f.value for f in card.facts[:2]] == ["3", "4.5"]
        assert card.actions[1].card.actions[0].data == {"ticketId": "7"}
        assert card.to_dict()["type"] == "AdaptiveCard"

    # Naive closed dates are treated as UTC
    def test_naive_closed_date(self, resources, closed_ticket):
        closed_ticket.date_closed = datetime(2023, 1, 5)
        card = build_card(closed_ticket, resources)
        assert card.facts[-1].value == (
            "{{DATE(2023-01-05T00:00:00Z, SHORT)}} {{TIME(2023-01-05T00:00:00Z)}}"
        )
