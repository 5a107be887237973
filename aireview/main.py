"""aireview entry point.

Prints the review threads of a pull request in the configured repository.
By default only threads the bot should act on are shown (a thread carrying
the bot signature or the trigger token). Usage:
aireview --pr 12 [--all] [--comment-id 345].
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from aireview.adapters import GitPlatformError
from aireview.config import AppConfig, create_adapter, load_config
from aireview.logging import AireviewLogging
from aireview.models import ReviewCommentThread
from aireview.review_threads import (
    filter_relevant_threads,
    get_comment_thread,
    list_pull_request_comment_threads,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="aireview",
        description="aireview - list pull request review threads for the bot",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    parser.add_argument("--pr", type=int, help="Pull request number")
    parser.add_argument("--comment-id", type=int, help="Show only the thread containing this comment")
    parser.add_argument(
        "--all",
        action="store_true",
        dest="show_all",
        help="Show every thread, not only those with the signature or trigger",
    )
    args = parser.parse_args(argv)
    if not args.check and args.pr is None:
        parser.error("--pr is required")
    return args


def format_thread(thread: ReviewCommentThread) -> str:
    """Render a thread as a header line and one line per comment."""
    lines = [f"{thread.file or '?'} ({len(thread.comments)} comments)"]
    for comment in thread.comments:
        location = f":{comment.line}" if comment.line is not None else ""
        text = comment.body.strip()
        first_line = text.splitlines()[0] if text else ""
        lines.append(f"  #{comment.id} {comment.user.login}{location}: {first_line}")
    return "\n".join(lines)


def collect_threads(
    config: AppConfig,
    pr_number: int,
    comment_id: int | None = None,
    show_all: bool = False,
) -> List[ReviewCommentThread]:
    """Fetch threads for a PR using the configured adapter, login and trigger."""
    log = logging.getLogger("aireview.main")
    owner, _, repo = config.bot.repository.partition("/")
    adapter = create_adapter(config)

    if comment_id is not None:
        thread = get_comment_thread(
            adapter, owner, repo, pr_number, comment_id, own_login=config.bot.login, log=log
        )
        return [thread] if thread is not None else []

    threads = list_pull_request_comment_threads(
        adapter, owner, repo, pr_number, own_login=config.bot.login, log=log
    )
    if show_all:
        return threads
    return filter_relevant_threads(threads, trigger=config.bot.trigger)


def main(argv: list[str] | None = None) -> int:
    """Entry point for aireview."""
    args = parse_args(argv)
    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")

    config = load_config(config_path)
    AireviewLogging(config.logging).setup()
    log = logging.getLogger("aireview.main")
    if config_path != args.config:
        log.warning("config.yaml not found, using config.example.yaml")

    if args.check:
        print("Config OK:", config.bot.repository, config.github.api_url)
        return 0

    if "/" not in config.bot.repository:
        log.error("bot.repository must look like owner/repo, got %r", config.bot.repository)
        return 1

    try:
        threads = collect_threads(config, args.pr, comment_id=args.comment_id, show_all=args.show_all)
    except GitPlatformError as e:
        log.error("PR #%s: failed to list review comments: %s", args.pr, e)
        return 1

    if not threads:
        log.info("PR #%s: no matching review threads", args.pr)
    print("\n\n".join(format_thread(t) for t in threads))
    return 0


if __name__ == "__main__":
    sys.exit(main())
