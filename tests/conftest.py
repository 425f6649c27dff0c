from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from text_submission.database import get_session
from text_submission.main import app
from text_submission.client.api import TextSubmissionClient
from text_submission.models.text_submission import TextSubmission, TextSubmissionPublic


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="broken_client")
def broken_client_fixture():
    # No tables were created, so every query fails inside the engine
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )

    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture(name="failing_client")
def failing_client_fixture():
    # A dependency that blows up with something other than a database error
    def get_session_override():
        raise RuntimeError("driver exploded")

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="api")
def api_fixture(client):
    return TextSubmissionClient(http_client=client)


@pytest.fixture(name="add_submission")
def add_submission_fixture(session):
    def add(text, created_at=None):
        submission = TextSubmission(text=text)
        if created_at is not None:
            submission.created_at = created_at
        session.add(submission)
        session.commit()
        session.refresh(submission)
        return submission

    return add


class FakeApi:
    """Stands in for TextSubmissionClient and records every call."""

    def __init__(self):
        self.calls = []
        self.rows = []
        self.fail_with = None
        self.next_id = 100

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if self.fail_with is not None:
            raise self.fail_with

    def submit_text(self, text):
        self._call("submit_text", text)
        self.next_id += 1
        created = TextSubmissionPublic(
            id=self.next_id, text=text, created_at=datetime.now(timezone.utc)
        )
        self.rows.insert(0, created)
        return created

    def get_submissions(self):
        self._call("get_submissions")
        return list(self.rows)

    def update_submission(self, submission_id, text):
        self._call("update_submission", submission_id, text)
        current = next(r for r in self.rows if r.id == submission_id)
        return current.model_copy(update={"text": text})

    def delete_submission(self, submission_id):
        self._call("delete_submission", submission_id)


@pytest.fixture(name="fake_api")
def fake_api_fixture():
    return FakeApi()
