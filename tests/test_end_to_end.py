"""Form, dashboard and API wired together against the in-memory database."""

import pytest

from text_submission.client.app import TextSubmissionApp


@pytest.fixture(name="alerts")
def alerts_fixture():
    return []


@pytest.fixture(name="confirmations")
def confirmations_fixture():
    return []


@pytest.fixture(name="ui")
def ui_fixture(api, alerts, confirmations):
    def confirm(message):
        confirmations.append(message)
        return False

    ui = TextSubmissionApp(api=api, alert=alerts.append, confirm=confirm)
    ui.start()
    return ui


def test_submitted_text_shows_first_on_dashboard(ui, client):
    client.post("/api/TextSubmission", json={"text": "An earlier submission"})
    ui.dashboard.refresh()

    ui.form.set_text("Valid submission text")
    created = ui.form.submit()

    assert created is not None
    assert created.id > 0
    assert created.created_at is not None
    assert ui.dashboard.submissions[0] == created
    assert [r.text for r in ui.dashboard.submissions] == [
        "Valid submission text",
        "An earlier submission",
    ]


def test_short_edit_is_rejected_before_the_api(ui, client, alerts):
    ui.form.set_text("First submission")
    ui.form.submit()
    before = client.get("/api/TextSubmission").json()

    ui.dashboard.start_edit(ui.dashboard.submissions[0])
    ui.dashboard.edit_text = "Short"
    ui.dashboard.save_edit(ui.dashboard.editing_id)

    assert alerts == ["Text must be between 10 and 50 characters."]
    assert ui.dashboard.edit_text == "Short"
    assert client.get("/api/TextSubmission").json() == before
    assert [r.text for r in ui.dashboard.submissions] == ["First submission"]


def test_declined_delete_keeps_row(ui, client, confirmations):
    ui.form.set_text("First submission")
    ui.form.submit()
    first = ui.dashboard.submissions[0]
    assert first.id == 1

    assert ui.dashboard.delete_submission(first.id, first.text) is False

    assert confirmations == ['Are you sure you want to delete this submission?\n\n"First submission"']
    assert client.get("/api/TextSubmission/1").status_code == 200
    assert ui.dashboard.submissions == (first,)


def test_empty_table_loads_as_empty_list(ui):
    assert ui.dashboard.submissions == ()
    assert ui.dashboard.error_message == ""


def test_update_of_missing_row_alerts_and_creates_nothing(ui, client, alerts):
    ui.form.set_text("First submission")
    ui.form.submit()
    ui.dashboard.start_edit(ui.dashboard.submissions[0])
    ui.dashboard.edit_text = "Updated text for a ghost"

    ui.dashboard.save_edit(999)

    assert alerts == ["Failed to update submission. Please try again."]
    assert [row["id"] for row in client.get("/api/TextSubmission").json()] == [1]
