from typing import Iterable, Iterator, Optional, Tuple

from ..models.text_submission import TextSubmissionPublic


class SubmissionStore:
    """
    The dashboard's copy of the submission list.

    It only ever holds rows confirmed by a server response, newest first, and
    it changes only through replace_all, patch_one and remove_one.
    """

    def __init__(self, rows: Iterable[TextSubmissionPublic] = ()):
        self._rows: Tuple[TextSubmissionPublic, ...] = tuple(rows)

    @property
    def items(self) -> Tuple[TextSubmissionPublic, ...]:
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[TextSubmissionPublic]:
        return iter(self._rows)

    def get(self, submission_id: int) -> Optional[TextSubmissionPublic]:
        for row in self._rows:
            if row.id == submission_id:
                return row
        return None

    def replace_all(self, rows: Iterable[TextSubmissionPublic]) -> None:
        # The server already sorts newest first
        self._rows = tuple(rows)

    def patch_one(self, updated: TextSubmissionPublic) -> bool:
        """Swap in the row with the same id, keeping its position."""
        if self.get(updated.id) is None:
            return False
        self._rows = tuple(updated if row.id == updated.id else row for row in self._rows)
        return True

    def remove_one(self, submission_id: int) -> bool:
        if self.get(submission_id) is None:
            return False
        self._rows = tuple(row for row in self._rows if row.id != submission_id)
        return True
