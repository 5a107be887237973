"""Tests for review comment and thread models."""

from datetime import UTC, datetime

from aireview.models import ReviewComment, ReviewCommentThread


def test_review_comment_defaults() -> None:
    comment = ReviewComment(id=1)
    assert comment.body == ""
    assert comment.path == ""
    assert comment.line is None
    assert comment.in_reply_to_id is None
    assert comment.created_at is None
    assert comment.user.login == ""
    assert not comment.is_reply


def test_review_comment_parses_iso_timestamp() -> None:
    comment = ReviewComment(id=1, created_at="2024-01-15T10:00:00Z")
    assert comment.created_at == datetime(2024, 1, 15, 10, 0, tzinfo=UTC)


def test_naive_timestamp_taken_as_utc() -> None:
    """Naive and aware timestamps can be compared."""
    naive = ReviewComment(id=1, created_at=datetime(2024, 1, 15, 10, 0))
    aware = ReviewComment(id=2, created_at="2024-01-15T11:00:00+00:00")
    assert naive.created_at < aware.created_at


def test_is_reply() -> None:
    assert ReviewComment(id=2, in_reply_to_id=1).is_reply
    assert not ReviewComment(id=2, in_reply_to_id=0).is_reply


def test_thread_helpers() -> None:
    thread = ReviewCommentThread(
        file="a.py",
        comments=[ReviewComment(id=1, body="root"), ReviewComment(id=2, body="re", in_reply_to_id=1)],
    )
    assert thread.root is not None and thread.root.id == 1
    assert thread.comment_ids == [1, 2]
    assert thread.contains(2)
    assert not thread.contains(3)
    assert ReviewCommentThread(file="a.py").root is None
