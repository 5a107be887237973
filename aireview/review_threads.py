"""
Review threads of a pull request: fetch, relabel, rebuild and filter.

Comments are fetched through a GitPlatformAdapter, comments carrying the
bot signature are relabeled to the bot login, and the flat list is turned
into threads. Platform errors (GitPlatformError) are not caught here.
"""

import logging
from typing import Iterable, List

from aireview.adapters.base import GitPlatformAdapter
from aireview.models import ReviewComment, ReviewCommentThread
from aireview.signature import (
    OWN_COMMENT_LOGIN,
    build_comment,
    is_own_comment,
    relabel_own_comments,
)
from aireview.threads import generate_comment_threads

# Explicit request for the bot to take part in a thread
TRIGGER_TOKEN = "/aireview"

_DEFAULT_LOGGER = "aireview.review_threads"


def list_pull_request_comment_threads(
    adapter: GitPlatformAdapter,
    owner: str,
    repo: str,
    pull_number: int,
    own_login: str = OWN_COMMENT_LOGIN,
    log: logging.Logger | None = None,
) -> List[ReviewCommentThread]:
    """Fetch all review comments of a PR and return them grouped into threads."""
    logger = log or logging.getLogger(_DEFAULT_LOGGER)
    full_name = f"{owner}/{repo}"
    comments = adapter.list_pr_review_comments(full_name, pull_number)
    threads = generate_comment_threads(relabel_own_comments(comments, login=own_login))
    logger.info(
        "PR %s#%s: %s review comments in %s threads",
        full_name,
        pull_number,
        len(comments),
        len(threads),
    )
    return threads


def get_comment_thread(
    adapter: GitPlatformAdapter,
    owner: str,
    repo: str,
    pull_number: int,
    comment_id: int,
    own_login: str = OWN_COMMENT_LOGIN,
    log: logging.Logger | None = None,
) -> ReviewCommentThread | None:
    """Return the thread containing comment_id, or None if no thread has it."""
    logger = log or logging.getLogger(_DEFAULT_LOGGER)
    threads = list_pull_request_comment_threads(
        adapter, owner, repo, pull_number, own_login=own_login, log=logger
    )
    for thread in threads:
        if thread.contains(comment_id):
            return thread
    logger.debug("PR %s/%s#%s: no thread contains comment %s", owner, repo, pull_number, comment_id)
    return None


def is_thread_relevant(thread: ReviewCommentThread, trigger: str = TRIGGER_TOKEN) -> bool:
    """True if the bot already spoke in the thread or someone invoked it."""
    return any(is_own_comment(c.body) or (trigger and trigger in c.body) for c in thread.comments)


def filter_relevant_threads(
    threads: Iterable[ReviewCommentThread],
    trigger: str = TRIGGER_TOKEN,
) -> List[ReviewCommentThread]:
    return [t for t in threads if is_thread_relevant(t, trigger=trigger)]


def reply_to_thread(
    adapter: GitPlatformAdapter,
    owner: str,
    repo: str,
    pull_number: int,
    comment_id: int,
    text: str,
    log: logging.Logger | None = None,
) -> ReviewComment:
    """Post a signed reply to a review comment.

    The signature lets the next read recognize the reply as the bot's own.
    """
    logger = log or logging.getLogger(_DEFAULT_LOGGER)
    reply = adapter.reply_to_review_comment(f"{owner}/{repo}", pull_number, comment_id, build_comment(text))
    logger.info("PR %s/%s#%s: replied to comment %s", owner, repo, pull_number, comment_id)
    return reply
