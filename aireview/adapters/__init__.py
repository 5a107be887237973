"""Git platform adapters (base and implementations)."""

from aireview.adapters.base import GitPlatformAdapter, GitPlatformError
from aireview.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
