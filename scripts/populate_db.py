import sys
import os

# Add the project root directory to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlmodel import Session, select
from datetime import datetime, timedelta, timezone
import random

from text_submission.database import engine, create_db_and_tables
from text_submission.models.text_submission import TextSubmission
from text_submission.validation import validate_server_text

# Sample data
seed_texts = [
    "First submission",
    "Remember to water the plants",
    "Meeting moved to Thursday at 10",
    "Shopping list: eggs, milk, bread",
    "The quick brown fox jumps over the lazy dog",
    "Call the dentist before Friday",
    "Draft the quarterly report outline",
    "Text with Unicode: café naïve résumé",
    "Pick up the dry cleaning",
    "Book flights for the conference",
]

def create_submissions(session: Session):
    submissions = []
    now = datetime.now(timezone.utc)

    for index, text in enumerate(seed_texts):
        validate_server_text(text)
        # Spread the rows over the last few days so the dashboard ordering is visible
        created_at = now - timedelta(hours=(len(seed_texts) - index) * random.randint(1, 6))
        submission = TextSubmission(text=text, created_at=created_at)
        session.add(submission)
        submissions.append(submission)

    session.commit()
    for submission in submissions:
        session.refresh(submission)
    return submissions

def main():
    create_db_and_tables()

    with Session(engine) as session:
        existing = session.exec(select(TextSubmission)).first()
        if existing and "--force" not in sys.argv:
            print("Database already has submissions, pass --force to add more")
            return

        submissions = create_submissions(session)
        print(f"Created {len(submissions)} submissions")
        for submission in submissions:
            print(f"  [{submission.id}] {submission.created_at:%Y-%m-%d %H:%M} {submission.text}")

if __name__ == "__main__":
    main()
