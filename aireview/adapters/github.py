"""GitHub API adapter."""

import logging
from typing import Any, Dict, List

import requests

from aireview.adapters.base import GitPlatformAdapter, GitPlatformError
from aireview.models import ReviewComment

logger = logging.getLogger("aireview.adapters.github")


def _review_comment_from_api(data: Dict[str, Any]) -> ReviewComment:
    user = data.get("user") or {}
    return ReviewComment(
        id=data["id"],
        body=data.get("body") or "",
        path=data.get("path") or "",
        line=data.get("line"),
        start_line=data.get("start_line"),
        diff_hunk=data.get("diff_hunk"),
        in_reply_to_id=data.get("in_reply_to_id"),
        created_at=data.get("created_at"),
        user={"login": user.get("login", "")},
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(
        self,
        token: str | None,
        api_url: str = "https://api.github.com",
        timeout: int = 30,
        per_page: int = 100,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._per_page = per_page
        self._session = requests.Session()
        if token:
            self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _url(self, path: str) -> str:
        return f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"

    def _request(
        self,
        method: str,
        url: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def list_pr_review_comments(self, repo: str, pr_number: int) -> List[ReviewComment]:
        url: str | None = self._url(f"/repos/{repo}/pulls/{pr_number}/comments")
        params: Dict[str, Any] | None = {"per_page": self._per_page}
        comments: List[ReviewComment] = []
        pages = 0
        while url:
            resp = self._request("GET", url, params=params)
            data = resp.json() or []
            comments.extend(_review_comment_from_api(d) for d in data)
            pages += 1
            # The next link already carries the query string
            url = (resp.links or {}).get("next", {}).get("url")
            params = None
        logger.debug("%s#%s: fetched %s review comments in %s page(s)", repo, pr_number, len(comments), pages)
        return comments

    def reply_to_review_comment(
        self,
        repo: str,
        pr_number: int,
        comment_id: int,
        body: str,
    ) -> ReviewComment:
        resp = self._request(
            "POST",
            self._url(f"/repos/{repo}/pulls/{pr_number}/comments"),
            json={"body": body, "in_reply_to": comment_id},
        )
        return _review_comment_from_api(resp.json())
