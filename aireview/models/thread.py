"""Reconstructed review discussion."""

from typing import List

from pydantic import BaseModel, Field

from aireview.models.review_comment import ReviewComment


class ReviewCommentThread(BaseModel):
    """Discussion anchored at a root comment, comments in thread order."""

    file: str
    comments: List[ReviewComment] = Field(default_factory=list)

    @property
    def root(self) -> ReviewComment | None:
        return self.comments[0] if self.comments else None

    @property
    def comment_ids(self) -> List[int]:
        return [c.id for c in self.comments]

    def contains(self, comment_id: int) -> bool:
        """True if a comment with this id is part of the thread."""
        return any(c.id == comment_id for c in self.comments)
