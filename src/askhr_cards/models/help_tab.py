"""
Help tab configuration view model
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

HELP_TAB_TEXT_MIN_LENGTH = 2
HELP_TAB_TEXT_MAX_LENGTH = 3000

REQUIRED_MESSAGE = "Enter help tab text."
LENGTH_MESSAGE = "Help tab text should contain less than 3000 characters."


class HelpTabViewModel(BaseModel):
    """Text shown on the bot's help tab, edited by an admin."""

    help_tab_text: Optional[str] = Field(
        default=None,
        validate_default=True,
        title="Help tab text",
        description="Help tab message text box",
    )

    @field_validator("help_tab_text")
    @classmethod
    def check_help_tab_text(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError(REQUIRED_MESSAGE)
        if not HELP_TAB_TEXT_MIN_LENGTH <= len(value) <= HELP_TAB_TEXT_MAX_LENGTH:
            raise ValueError(LENGTH_MESSAGE)
        return value


def validate_help_tab(data: Dict[str, Any]) -> Dict[str, List[str]]:
    """
    Validate submitted help tab form data

    Args:
        data: Form fields keyed by field name

    Returns:
        Field-level error messages, empty when the data is valid
    """
    # A missing field still has to run through the validator
    payload = {"help_tab_text": data.get("help_tab_text")}
    try:
        HelpTabViewModel(**payload)
    except ValidationError as e:
        errors: Dict[str, List[str]] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            message = error.get("ctx", {}).get("error")
            errors.setdefault(field, []).append(str(message) if message else error["msg"])
        return errors
    return {}
