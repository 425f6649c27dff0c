import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..database import get_session
from ..errors import InternalError, NotFound
from ..models.text_submission import TextSubmission, TextSubmissionPublic, TextSubmissionRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/TextSubmission",
    tags=["TextSubmission"]
)

def get_submission_or_404(session: Session, submission_id: int) -> TextSubmission:
    submission = session.get(TextSubmission, submission_id)
    if not submission:
        raise NotFound("Text submission not found")
    return submission


@router.get("", response_model=List[TextSubmissionPublic])
def read_text_submissions(session: Session = Depends(get_session)):
    try:
        submissions = session.exec(
            select(TextSubmission)
            .order_by(TextSubmission.created_at.desc(), TextSubmission.id.desc())
        ).all()
    except SQLAlchemyError as e:
        logger.exception(f"Error retrieving text submissions: {e}")
        raise InternalError("An error occurred while retrieving submissions")

    logger.info(f"Returned {len(submissions)} text submissions")
    return [TextSubmissionPublic.model_validate(submission) for submission in submissions]


@router.get("/{submission_id}", response_model=TextSubmissionPublic)
def read_text_submission(submission_id: int, session: Session = Depends(get_session)):
    try:
        submission = get_submission_or_404(session, submission_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error retrieving text submission with id {submission_id}: {e}")
        raise InternalError("An error occurred while retrieving the submission")

    logger.info(f"Returned text submission {submission_id}")
    return TextSubmissionPublic.model_validate(submission)


@router.post("", response_model=TextSubmissionPublic, status_code=201)
def create_text_submission(
    payload: TextSubmissionRequest,
    request: Request,
    response: Response,
    session: Session = Depends(get_session)
):
    submission = TextSubmission(text=payload.text)
    try:
        session.add(submission)
        session.commit()
        session.refresh(submission)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Error creating text submission: {e}")
        raise InternalError("An error occurred while saving the submission")

    logger.info(f"Text submission created with id {submission.id}")
    response.headers["Location"] = str(
        request.url_for("read_text_submission", submission_id=submission.id)
    )
    return TextSubmissionPublic.model_validate(submission)


@router.put("/{submission_id}", response_model=TextSubmissionPublic)
def update_text_submission(
    submission_id: int,
    payload: TextSubmissionRequest,
    session: Session = Depends(get_session)
):
    try:
        submission = get_submission_or_404(session, submission_id)

        # Only the text changes; id and created_at stay as the store assigned them
        submission.text = payload.text
        session.add(submission)
        session.commit()
        session.refresh(submission)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Error updating text submission with id {submission_id}: {e}")
        raise InternalError("An error occurred while updating the submission")

    logger.info(f"Text submission {submission_id} updated")
    return TextSubmissionPublic.model_validate(submission)


@router.delete("/{submission_id}", status_code=204)
def delete_text_submission(submission_id: int, session: Session = Depends(get_session)):
    try:
        submission = get_submission_or_404(session, submission_id)
        session.delete(submission)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Error deleting text submission with id {submission_id}: {e}")
        raise InternalError("An error occurred while deleting the submission")

    logger.info(f"Text submission {submission_id} deleted")
