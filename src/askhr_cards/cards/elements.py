"""
Immutable adaptive card values produced by the card builders.

Each value knows how to render itself as the adaptive card JSON the Teams
client expects. ``CardDescription.to_attachment`` wraps the result in a Bot
Framework attachment ready for ``MessageFactory.attachment``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

from botbuilder.core import CardFactory
from botbuilder.schema import Attachment

from askhr_cards.core.resources import TextDirection

ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.0"


@dataclass(frozen=True)
class Fact:
    title: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value}


@dataclass(frozen=True)
class Choice:
    title: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value}


@dataclass(frozen=True)
class StatusChoiceSet:
    """Single-select compact dropdown offering the next ticket actions."""

    input_id: str
    value: str | None = None
    choices: tuple[Choice, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        element: dict[str, Any] = {
            "type": "Input.ChoiceSet",
            "id": self.input_id,
            "isMultiSelect": False,
            "style": "compact",
            "choices": [choice.to_dict() for choice in self.choices],
        }
        if self.value is not None:
            element["value"] = self.value
        return element


@dataclass(frozen=True)
class TextBlock:
    text: str
    alignment: str = "left"
    size: str | None = None
    weight: str | None = None
    wrap: bool = True

    def to_dict(self) -> dict[str, Any]:
        element: dict[str, Any] = {
            "type": "TextBlock",
            "text": self.text,
            "wrap": self.wrap,
            "horizontalAlignment": self.alignment,
        }
        if self.size:
            element["size"] = self.size
        if self.weight:
            element["weight"] = self.weight
        return element


@dataclass(frozen=True)
class OpenUrlAction:
    title: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Action.OpenUrl", "title": self.title, "url": self.url}


@dataclass(frozen=True)
class SubmitAction:
    title: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Stored read-only
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Action.Submit", "title": self.title, "data": dict(self.data)}


@dataclass(frozen=True)
class NestedCard:
    """Card revealed in place by a show-card action."""

    body: tuple[Union[TextBlock, StatusChoiceSet], ...] = ()
    actions: tuple[SubmitAction, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        card: dict[str, Any] = {
            "type": "AdaptiveCard",
            "version": ADAPTIVE_CARD_VERSION,
            "body": [element.to_dict() for element in self.body],
        }
        if self.actions:
            card["actions"] = [action.to_dict() for action in self.actions]
        return card


@dataclass(frozen=True)
class ShowCardAction:
    title: str
    card: NestedCard

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Action.ShowCard", "title": self.title, "card": self.card.to_dict()}


CardAction = Union[OpenUrlAction, ShowCardAction, SubmitAction]


@dataclass(frozen=True)
class CardDescription:
    """A rendered ticket card: header, fact list and actions."""

    title: str
    subtitle: str
    facts: tuple[Fact, ...] = ()
    actions: tuple[CardAction, ...] = ()
    text_direction: TextDirection = TextDirection.LTR

    def to_dict(self) -> dict[str, Any]:
        alignment = self.text_direction.alignment
        body = [
            TextBlock(self.title, alignment=alignment, size="large", weight="bolder").to_dict(),
            TextBlock(self.subtitle, alignment=alignment).to_dict(),
            {"type": "FactSet", "facts": [fact.to_dict() for fact in self.facts]},
        ]
        return {
            "$schema": ADAPTIVE_CARD_SCHEMA,
            "type": "AdaptiveCard",
            "version": ADAPTIVE_CARD_VERSION,
            "body": body,
            "actions": [action.to_dict() for action in self.actions],
        }

    def to_attachment(self) -> Attachment:
        return CardFactory.adaptive_card(self.to_dict())
