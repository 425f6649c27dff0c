"""
Text rules shared by the API and the client controllers.

Two bounds are in play. The server accepts anything that is present, not blank
and at most TEXT_MAX_LENGTH characters, and stores it untouched. The form and the
dashboard editor trim the text first and hold it to the narrower client bound.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import TEXT_MAX_LENGTH, CLIENT_TEXT_MIN_LENGTH, CLIENT_TEXT_MAX_LENGTH
from .errors import ValidationError


@dataclass(frozen=True)
class TextBounds:
    min_length: int
    max_length: int

    def describe(self) -> str:
        return f"Text must be between {self.min_length} and {self.max_length} characters."

    def contains(self, text: str) -> bool:
        return self.min_length <= len(text) <= self.max_length


SERVER_BOUNDS = TextBounds(min_length=1, max_length=TEXT_MAX_LENGTH)
CLIENT_BOUNDS = TextBounds(min_length=CLIENT_TEXT_MIN_LENGTH, max_length=CLIENT_TEXT_MAX_LENGTH)


def server_text_errors(text: Optional[str], bounds: TextBounds = SERVER_BOUNDS) -> List[str]:
    if text is None or not text.strip():
        return ["Text is required"]
    if len(text) > bounds.max_length:
        return [f"Text cannot exceed {bounds.max_length} characters"]
    return []


def validate_server_text(text: Optional[str], bounds: TextBounds = SERVER_BOUNDS) -> str:
    """Return text unchanged, or raise ValidationError naming the failed rule."""
    errors = server_text_errors(text, bounds)
    if errors:
        raise ValidationError(
            errors[0],
            errors=[{"field": "text", "message": message} for message in errors],
        )
    return text


def client_text_errors(text: Optional[str], bounds: TextBounds = CLIENT_BOUNDS) -> List[str]:
    """
    Names of the client rules the trimmed text breaks: "required",
    "minlength" or "maxlength". An empty list means the text can be sent.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return ["required"]
    if len(trimmed) < bounds.min_length:
        return ["minlength"]
    if len(trimmed) > bounds.max_length:
        return ["maxlength"]
    return []


def is_valid_client_text(text: Optional[str], bounds: TextBounds = CLIENT_BOUNDS) -> bool:
    return not client_text_errors(text, bounds)
