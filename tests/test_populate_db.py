from scripts.populate_db import create_submissions, seed_texts


def test_seeded_rows_come_back_newest_first(session, client):
    submissions = create_submissions(session)

    assert len(submissions) == len(seed_texts)
    rows = client.get("/api/TextSubmission").json()
    assert sorted(row["text"] for row in rows) == sorted(seed_texts)
    expected = sorted(submissions, key=lambda s: (s.created_at, s.id), reverse=True)
    assert [row["id"] for row in rows] == [s.id for s in expected]
