"""Line-level or file-level comment on a pull request review."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


class CommentUser(BaseModel):
    """Author of a review comment."""

    login: str = ""


class ReviewComment(BaseModel):
    """Line-level (or file-level) comment on a pull request review."""

    id: int
    body: str = ""
    path: str = ""
    line: int | None = None
    start_line: int | None = None
    diff_hunk: str | None = None
    in_reply_to_id: int | None = None
    created_at: datetime | None = None
    user: CommentUser = Field(default_factory=CommentUser)

    @field_validator("body", "path", mode="before")
    @classmethod
    def _none_to_empty(cls, value: str | None) -> str:
        return value or ""

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # Naive timestamps are taken as UTC so they compare with API ones
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @field_validator("user", mode="before")
    @classmethod
    def _none_to_anonymous(cls, value: object) -> object:
        return value if value is not None else {}

    @property
    def is_reply(self) -> bool:
        """True if the comment points at a parent comment."""
        return bool(self.in_reply_to_id)
