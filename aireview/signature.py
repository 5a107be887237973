"""Signature stamped on comments posted by the bot.

Comments read back from the platform are recognized as the bot's own by
substring match on the signature, so authorship survives token changes
and posting through a shared account.
"""

from typing import Iterable, List

from aireview.models import ReviewComment

# Hidden HTML comment: invisible in rendered markdown, unlikely in human text
COMMENT_SIGNATURE = "<!-- aireview:self-comment -->"

# Login shown for comments carrying the signature
OWN_COMMENT_LOGIN = "aireview"


def build_comment(text: str) -> str:
    """Append the signature after a blank line.

    Not idempotent: stamping the same text twice gives two signatures.
    """
    return text + "\n\n" + COMMENT_SIGNATURE


def is_own_comment(text: str) -> bool:
    """True if the signature occurs anywhere in the text."""
    return COMMENT_SIGNATURE in text


def relabel_own_comments(
    comments: Iterable[ReviewComment],
    login: str = OWN_COMMENT_LOGIN,
) -> List[ReviewComment]:
    """Return copies of comments with the author login set to login for own comments.

    Other comments are returned as is. Only the user is changed; id, body
    and threading fields are kept.
    """
    result: List[ReviewComment] = []
    for comment in comments:
        if is_own_comment(comment.body):
            user = comment.user.model_copy(update={"login": login})
            comment = comment.model_copy(update={"user": user})
        result.append(comment)
    return result
