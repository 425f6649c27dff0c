import logging
from typing import Callable, List, Optional

from ..errors import SubmissionError
from ..models.text_submission import TextSubmissionPublic
from ..validation import CLIENT_BOUNDS, TextBounds, client_text_errors

logger = logging.getLogger(__name__)

MESSAGES = {
    "SUCCESS": "Text submitted successfully!",
    "ERROR": "Error submitting text. Please try again.",
}


class SubmissionForm:
    """State behind the single-field submission form."""

    def __init__(self, api, bounds: TextBounds = CLIENT_BOUNDS):
        self.api = api
        self.bounds = bounds
        self.text = ""
        self.touched = False
        self.is_submitting = False
        self.submit_message = ""
        self.submit_success = False
        self._created_listeners: List[Callable[[TextSubmissionPublic], None]] = []

    def on_created(self, listener: Callable[[TextSubmissionPublic], None]) -> None:
        """Register a listener called with each submission the server accepts."""
        self._created_listeners.append(listener)

    def set_text(self, value: str) -> None:
        self.text = value
        self.touched = True

    @property
    def errors(self) -> List[str]:
        return client_text_errors(self.text, self.bounds)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def can_submit(self) -> bool:
        return self.is_valid and not self.is_submitting

    @property
    def character_count(self) -> int:
        return len(self.text)

    @property
    def counter(self) -> str:
        return f"{self.character_count}/{self.bounds.max_length}"

    def submit(self) -> Optional[TextSubmissionPublic]:
        if not self.is_valid:
            return None

        self._set_submitting(True)
        try:
            created = self.api.submit_text(self.text.strip())
        except SubmissionError as e:
            self._set_submitting(False)
            self.submit_success = False
            self.submit_message = MESSAGES["ERROR"]
            logger.error(f"Submission error: {e.kind.value}: {e.message}")
            return None

        self._set_submitting(False)
        self.submit_success = True
        self.submit_message = MESSAGES["SUCCESS"]
        self.reset()

        for listener in self._created_listeners:
            listener(created)
        return created

    def reset(self) -> None:
        self.text = ""
        self.touched = False

    def _set_submitting(self, submitting: bool) -> None:
        self.is_submitting = submitting
        if submitting:
            self.submit_message = ""
