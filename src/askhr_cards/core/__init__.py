from askhr_cards.core.logging import setup_logging
from askhr_cards.core.resources import DEFAULT_STRINGS, ResourceStrings, TextDirection

__all__ = ["DEFAULT_STRINGS", "ResourceStrings", "TextDirection", "setup_logging"]
