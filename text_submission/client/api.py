"""
HTTP client for the /api/TextSubmission endpoints.

Every failure leaves this module as one of the three error kinds in
text_submission.errors, so callers never need to look at httpx exceptions or
raw response payloads.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError as SchemaError

from ..config import API_BASE_URL, API_TIMEOUT
from ..errors import InternalError, NotFound, SubmissionError, ValidationError
from ..models.text_submission import TextSubmissionPublic

logger = logging.getLogger(__name__)

RESOURCE_PATH = "/api/TextSubmission"


class TextSubmissionClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = API_TIMEOUT,
    ):
        # An injected client (for example FastAPI's TestClient) belongs to the caller
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_client:
            self._http.close()

    def submit_text(self, text: str) -> TextSubmissionPublic:
        response = self._request("POST", RESOURCE_PATH, json={"text": text})
        return self._parse(response, TextSubmissionPublic)

    def get_submissions(self) -> List[TextSubmissionPublic]:
        response = self._request("GET", RESOURCE_PATH)
        data = self._json(response)
        if not isinstance(data, list):
            raise InternalError("Expected a list of submissions")
        try:
            return [TextSubmissionPublic.model_validate(item) for item in data]
        except SchemaError as e:
            raise InternalError(f"Malformed submission in response: {e}")

    def get_submission(self, submission_id: int) -> TextSubmissionPublic:
        response = self._request("GET", f"{RESOURCE_PATH}/{submission_id}")
        return self._parse(response, TextSubmissionPublic)

    def update_submission(self, submission_id: int, text: str) -> TextSubmissionPublic:
        response = self._request("PUT", f"{RESOURCE_PATH}/{submission_id}", json={"text": text})
        return self._parse(response, TextSubmissionPublic)

    def delete_submission(self, submission_id: int) -> None:
        self._request("DELETE", f"{RESOURCE_PATH}/{submission_id}")

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed before a response arrived: {e}")
            raise InternalError(f"Request failed: {e}") from e

        if response.is_success:
            return response
        raise error_from_response(response)

    def _json(self, response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise InternalError("Response body is not valid JSON") from e

    def _parse(self, response: httpx.Response, schema):
        try:
            return schema.model_validate(self._json(response))
        except SchemaError as e:
            raise InternalError(f"Malformed submission in response: {e}")


def error_from_response(response: httpx.Response) -> SubmissionError:
    """Map a non-2xx response onto ValidationError, NotFound or InternalError."""
    message = f"HTTP {response.status_code}"
    errors = []
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or message
        errors = body.get("errors") or []

    if response.status_code in (400, 422):
        return ValidationError(message, errors=errors)
    if response.status_code == 404:
        return NotFound(message)
    return InternalError(message)
