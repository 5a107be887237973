"""Shared fixtures: review comment factory."""

from typing import Any, Callable

import pytest

from aireview.models import ReviewComment


@pytest.fixture
def make_comment() -> Callable[..., ReviewComment]:
    """Return a factory building ReviewComment with sensible defaults."""

    def _make(comment_id: int, body: str = "text", **kwargs: Any) -> ReviewComment:
        kwargs.setdefault("path", "src/app.py")
        kwargs.setdefault("user", {"login": "reviewer"})
        return ReviewComment(id=comment_id, body=body, **kwargs)

    return _make
