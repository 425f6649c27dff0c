from sqlmodel import SQLModel, Field
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

from ..config import TEXT_MAX_LENGTH
from ..validation import server_text_errors

class TextSubmissionBase(SQLModel):
    text: str = Field(max_length=TEXT_MAX_LENGTH, nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True, nullable=False)

class TextSubmission(TextSubmissionBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

class TextSubmissionRequest(BaseModel):
    # id and createdAt are assigned by the server; anything else sent is ignored
    text: str

    @field_validator("text")
    @classmethod
    def check_text(cls, value: str) -> str:
        errors = server_text_errors(value)
        if errors:
            raise ValueError(errors[0])
        return value

class TextSubmissionPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int
    text: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite and MySQL DATETIME columns hand back naive values
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return value.isoformat().replace("+00:00", "Z")
