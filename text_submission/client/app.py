from typing import Callable, Optional

from .api import TextSubmissionClient
from .dashboard import Dashboard, decline, log_alert
from .form import SubmissionForm


class TextSubmissionApp:
    """Form and dashboard sharing one API client, wired so a new submission reloads the list."""

    def __init__(
        self,
        api: Optional[TextSubmissionClient] = None,
        alert: Callable[[str], None] = log_alert,
        confirm: Callable[[str], bool] = decline,
    ):
        self.api = api or TextSubmissionClient()
        self.form = SubmissionForm(self.api)
        self.dashboard = Dashboard(self.api, alert=alert, confirm=confirm)
        self.form.on_created(self.dashboard.on_created)

    def start(self) -> None:
        self.dashboard.mount()

    def close(self) -> None:
        self.api.close()
