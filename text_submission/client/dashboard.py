import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Tuple

from ..errors import SubmissionError
from ..models.text_submission import TextSubmissionPublic
from ..validation import CLIENT_BOUNDS, TextBounds, is_valid_client_text
from .store import SubmissionStore

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    "LOAD_FAILED": "Failed to load submissions. Please try again.",
    "UPDATE_FAILED": "Failed to update submission. Please try again.",
    "DELETE_FAILED": "Failed to delete submission. Please try again.",
}


class EditState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


def log_alert(message: str) -> None:
    logger.warning(f"Alert: {message}")


def decline(message: str) -> bool:
    logger.info("No confirmation handler configured, delete declined")
    return False


class Dashboard:
    """
    List view of every submission with inline edit and delete.

    alert and confirm are the UI's dialog hooks. Without them alerts go to the
    log and every delete is declined.
    """

    def __init__(
        self,
        api,
        alert: Callable[[str], None] = log_alert,
        confirm: Callable[[str], bool] = decline,
        bounds: TextBounds = CLIENT_BOUNDS,
        store: Optional[SubmissionStore] = None,
    ):
        self.api = api
        self.alert = alert
        self.confirm = confirm
        self.bounds = bounds
        self.store = store or SubmissionStore()
        self.is_loading = False
        self.error_message = ""
        self.editing_id: Optional[int] = None
        self.edit_text = ""

    @property
    def submissions(self) -> Tuple[TextSubmissionPublic, ...]:
        return self.store.items

    @property
    def edit_state(self) -> EditState:
        return EditState.IDLE if self.editing_id is None else EditState.EDITING

    def mount(self) -> None:
        self.load()

    def load(self) -> None:
        self._set_loading(True)
        try:
            submissions = self.api.get_submissions()
        except SubmissionError as e:
            self.error_message = ERROR_MESSAGES["LOAD_FAILED"]
            logger.error(f"Error loading submissions: {e.kind.value}: {e.message}")
        else:
            self.store.replace_all(submissions)
            logger.debug(f"Loaded {len(submissions)} submissions")
        finally:
            self._set_loading(False)

    def refresh(self) -> None:
        self.load()

    def on_created(self, submission: TextSubmissionPublic) -> None:
        # Reload right away so the list shows the server's ordering
        logger.debug(f"Submission {submission.id} created, reloading")
        self.load()

    @staticmethod
    def format_date(value: datetime) -> str:
        return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")

    def start_edit(self, submission: TextSubmissionPublic) -> None:
        self.editing_id = submission.id
        self.edit_text = submission.text

    def cancel_edit(self) -> None:
        self._reset_edit_state()

    def save_edit(self, submission_id: int) -> Optional[TextSubmissionPublic]:
        updated_text = self.edit_text.strip()

        if not is_valid_client_text(updated_text, self.bounds):
            self.alert(self.bounds.describe())
            return None

        try:
            updated = self.api.update_submission(submission_id, updated_text)
        except SubmissionError as e:
            logger.error(f"Error updating submission {submission_id}: {e.kind.value}: {e.message}")
            self.alert(ERROR_MESSAGES["UPDATE_FAILED"])
            return None

        self.store.patch_one(updated)
        self._reset_edit_state()
        return updated

    def delete_submission(self, submission_id: int, text: str) -> bool:
        if not self.confirm(f'Are you sure you want to delete this submission?\n\n"{text}"'):
            return False

        try:
            self.api.delete_submission(submission_id)
        except SubmissionError as e:
            logger.error(f"Error deleting submission {submission_id}: {e.kind.value}: {e.message}")
            self.alert(ERROR_MESSAGES["DELETE_FAILED"])
            return False

        self.store.remove_one(submission_id)
        return True

    def _reset_edit_state(self) -> None:
        self.editing_id = None
        self.edit_text = ""

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        if loading:
            self.error_message = ""
