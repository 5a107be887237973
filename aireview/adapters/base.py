"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from aireview.models import ReviewComment


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Abstract interface for the review platform's comment API."""

    @abstractmethod
    def list_pr_review_comments(self, repo: str, pr_number: int) -> List[ReviewComment]:
        """List all review comments on a PR (repo is owner/name)."""
        ...

    @abstractmethod
    def reply_to_review_comment(
        self,
        repo: str,
        pr_number: int,
        comment_id: int,
        body: str,
    ) -> ReviewComment:
        """Post a reply to a review comment."""
        ...
