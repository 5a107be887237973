"""Data models for review comments and threads (Pydantic)."""

from aireview.models.review_comment import CommentUser, ReviewComment
from aireview.models.thread import ReviewCommentThread

__all__ = ["CommentUser", "ReviewComment", "ReviewCommentThread"]
