"""
Card Configuration
Settings for rendering the SME cards, read from environment variables
"""

import logging
import os
from dataclasses import dataclass

from askhr_cards.core.logging import setup_logging
from askhr_cards.core.resources import TextDirection

logger = logging.getLogger(__name__)

DEFAULT_KB_ANSWER_MAX_DISPLAY_LENGTH = 500
DEFAULT_TEAMS_CHAT_BASE_URL = "https://teams.microsoft.com/l/chat/0/0"


@dataclass
class CardConfig:
    """Configuration for the ticket and team cards"""

    kb_answer_max_display_length: int = DEFAULT_KB_ANSWER_MAX_DISPLAY_LENGTH
    teams_chat_base_url: str = DEFAULT_TEAMS_CHAT_BASE_URL
    bot_culture: str = "en-US"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "CardConfig":
        """Load configuration from environment variables"""
        raw_length = os.getenv(
            "KB_ANSWER_MAX_DISPLAY_LENGTH", str(DEFAULT_KB_ANSWER_MAX_DISPLAY_LENGTH)
        )
        try:
            max_length = int(raw_length)
        except ValueError:
            max_length = 0
        if max_length <= 0:
            logger.warning(
                f"Invalid KB_ANSWER_MAX_DISPLAY_LENGTH {raw_length!r}, "
                f"using {DEFAULT_KB_ANSWER_MAX_DISPLAY_LENGTH}"
            )
            max_length = DEFAULT_KB_ANSWER_MAX_DISPLAY_LENGTH

        return cls(
            kb_answer_max_display_length=max_length,
            teams_chat_base_url=os.getenv("TEAMS_CHAT_BASE_URL", DEFAULT_TEAMS_CHAT_BASE_URL),
            bot_culture=os.getenv("BOT_CULTURE", "en-US"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    @property
    def text_direction(self) -> TextDirection:
        return TextDirection.for_culture(self.bot_culture)

    def configure_logging(self) -> logging.Logger:
        """Apply LOG_LEVEL to the package logger"""
        return setup_logging(level=self.log_level)

    def validate(self) -> bool:
        """Validate configuration values"""
        invalid = []
        if self.kb_answer_max_display_length <= 0:
            invalid.append("KB_ANSWER_MAX_DISPLAY_LENGTH")
        if not self.teams_chat_base_url.startswith("https://"):
            invalid.append("TEAMS_CHAT_BASE_URL")
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            invalid.append("LOG_LEVEL")

        if invalid:
            raise ValueError(
                f"Missing or invalid configuration: {', '.join(invalid)}\n"
                f"Please update your .env file with valid values."
            )

        return True

    def __str__(self) -> str:
        return f"""CardConfig:
  KB Answer Max Display Length: {self.kb_answer_max_display_length}
  Teams Chat Base URL: {self.teams_chat_base_url}
  Bot Culture: {self.bot_culture} ({self.text_direction.value})
  Log Level: {self.log_level}
"""
