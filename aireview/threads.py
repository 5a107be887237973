"""
Rebuild review discussions from a flat list of review comments.

Replies point at their parent through in_reply_to_id. Every comment is
grouped under the top-most ancestor that is present in the list; a comment
whose parent is missing (deleted, or not on the fetched page) becomes the
root of its own thread. Comments with an empty body are dropped.
"""

from functools import cmp_to_key
from operator import attrgetter
from typing import Dict, List, Sequence

from aireview.models import ReviewComment, ReviewCommentThread


def find_root_comment(
    comment: ReviewComment,
    comments_by_id: Dict[int, ReviewComment],
) -> ReviewComment:
    """Follow in_reply_to_id up to the oldest ancestor found in comments_by_id."""
    current = comment
    # At most one step per known comment, so a malformed cycle cannot spin forever
    for _ in range(len(comments_by_id)):
        if not current.in_reply_to_id:
            break
        parent = comments_by_id.get(current.in_reply_to_id)
        if parent is None:
            break
        current = parent
    return current


def compare_thread_order(a: ReviewComment, b: ReviewComment) -> int:
    """Order roots first, then by creation time, then by id."""
    if not a.is_reply and b.is_reply:
        return -1
    if a.is_reply and not b.is_reply:
        return 1
    if a.created_at is not None and b.created_at is not None and a.created_at != b.created_at:
        return -1 if a.created_at < b.created_at else 1
    return (a.id > b.id) - (a.id < b.id)


thread_sort_key = cmp_to_key(compare_thread_order)


def generate_comment_threads(review_comments: Sequence[ReviewComment]) -> List[ReviewCommentThread]:
    """Group comments into threads keyed by their root and sort each thread.

    Threads come out in the order their first member appears in the input;
    callers should look threads up by content, not position.
    """
    comments_by_id: Dict[int, ReviewComment] = {c.id: c for c in review_comments}

    threads_by_root_id: Dict[int, List[ReviewComment]] = {}
    for comment in review_comments:
        if not comment.body:
            continue
        root = find_root_comment(comment, comments_by_id)
        threads_by_root_id.setdefault(root.id, []).append(comment)

    threads: List[ReviewCommentThread] = []
    for root_id, comments in threads_by_root_id.items():
        root = comments_by_id.get(root_id)
        # Id order first: the rule is not transitive when only some replies carry a timestamp
        by_id = sorted(comments, key=attrgetter("id"))
        threads.append(
            ReviewCommentThread(
                file=root.path if root is not None else comments[0].path,
                comments=sorted(by_id, key=thread_sort_key),
            )
        )
    return threads
