"""
Localized card strings and text direction
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# English strings; templates use positional {0} placeholders
DEFAULT_STRINGS: dict[str, str] = {
    "SubtitleTemplate": "Question from {0}",
    "ChangeStatusButtonTitle": "Change status",
    "SubmitButtonTitle": "Submit",
    "ViewArticleButtonTitle": "View article",
    "DescriptionFactLabel": "Description:",
    "QuestionFactLabel": "Question asked:",
    "StatusFactLabel": "Status:",
    "ClosedFactLabel": "Closed:",
    "ChatButtonTemplate": "Chat with {0}",
    "ChatMessageTemplate": "Regarding your question \"{0}\"",
    "AssignToMeChoiceLabel": "Assign to me",
    "CloseChoiceLabel": "Close",
    "ReopenChoiceLabel": "Reopen",
    "UnassignChoiceLabel": "Unassign",
    "ReopenAssignChoiceLabel": "Reopen and assign to me",
    "UnassignedStatusValue": "Unassigned",
    "AssignedStatusTemplate": "Assigned to {0}",
    "ClosedStatusValue": "Closed",
    "TeamCustomMessage": "I'm not sure what you mean. Take a tour to see what I can do for your team.",
    "TakeATeamTourButtonText": "Take a tour",
}

RTL_LANGUAGES = frozenset({"ar", "dv", "fa", "he", "ku", "ps", "sd", "ug", "ur", "yi"})


class TextDirection(str, Enum):
    """Reading direction of the bot's culture."""

    LTR = "ltr"
    RTL = "rtl"

    @property
    def alignment(self) -> str:
        """Adaptive card horizontal alignment for text blocks."""
        return "right" if self is TextDirection.RTL else "left"

    @classmethod
    def for_culture(cls, culture: str | None) -> "TextDirection":
        """Direction for a culture name such as ``en-US`` or ``ar_SA``."""
        if not culture:
            return cls.LTR
        language = culture.replace("_", "-").split("-")[0].lower()
        return cls.RTL if language in RTL_LANGUAGES else cls.LTR


class ResourceStrings:
    """Key to localized string lookup handed to the card builders."""

    def __init__(
        self,
        strings: Mapping[str, str] | None = None,
        overrides: Mapping[str, str] | None = None,
    ):
        self._strings = dict(DEFAULT_STRINGS if strings is None else strings)
        if overrides:
            self._strings.update(overrides)

    def get(self, key: str) -> str:
        value = self._strings.get(key)
        if value is None:
            logger.warning(f"Missing resource string: {key}")
            return ""
        return value

    def format(self, key: str, *args: Any) -> str:
        """Fill a template's positional placeholders; None renders as empty."""
        template = self.get(key)
        values = ["" if arg is None else arg for arg in args]
        try:
            return template.format(*values)
        except (IndexError, KeyError, ValueError) as e:
            logger.warning(f"Could not format resource string {key}: {e}")
            return template

    def __contains__(self, key: str) -> bool:
        return key in self._strings
