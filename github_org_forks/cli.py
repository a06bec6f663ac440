"""CLI for listing organization-owned forks of a GitHub repository."""

import argparse
import logging
import sys
from pathlib import Path

from .errors import ForkliftError, MissingTokenError
from .fetch_forks import fetch_forks
from .github import ForksClient
from .models import DEFAULT_CONCURRENCY
from .organizations import org_forks
from .report import default_report_path, write_report
from .settings import get_settings
from .utils import parse_repo_url

log = logging.getLogger("github_org_forks")


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


class _ProgressAwareHandler(logging.StreamHandler):
    """Clears the progress line before each record so log output starts on a fresh line."""

    def emit(self, record):
        try:
            self.stream.write("\033[2K\r")
        except (OSError, ValueError):
            self.handleError(record)
            return
        super().emit(record)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        handlers=[_ProgressAwareHandler(sys.stderr)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _print_progress(done: int, total: int) -> None:
    sys.stderr.write(f"\033[2K\r  [{done}/{total}] pages fetched")
    if done == total:
        sys.stderr.write("\n")
    sys.stderr.flush()


def run(repo_url: str, token: str | None = None, output: Path | None = None,
        concurrency: int = DEFAULT_CONCURRENCY) -> Path:
    """List organization forks of repo_url and write the Markdown report.

    Returns the report path. Raises ForkliftError without writing anything
    if any step fails.
    """
    settings = get_settings()
    token = token or settings.github_token
    if not token:
        raise MissingTokenError()

    owner, repo = parse_repo_url(repo_url)
    log.info("Analyzing forks for %s/%s", owner, repo)

    with ForksClient(token, api_url=settings.github_api_url) as client:
        forks = fetch_forks(
            client.fetch_page, owner, repo,
            concurrency=concurrency,
            on_progress=_print_progress,
        )

    orgs = org_forks(forks)
    log.info("Found %d organization-owned forks out of %d", len(orgs), len(forks))

    path = output or default_report_path(repo)
    log.debug("Writing results to %s", path)
    write_report(path, owner, repo, orgs)
    return path


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="List organization-owned forks of a public GitHub repository",
    )
    parser.add_argument(
        "repo_url",
        help="Repository URL (e.g., https://github.com/kubernetes/kubernetes)",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=None,
        help="GitHub token (default: GITHUB_TOKEN from environment or .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: reports/<repo>_forks.md)",
    )
    parser.add_argument(
        "-c",
        "--concurrency",
        type=_positive_int,
        default=DEFAULT_CONCURRENCY,
        help=f"Number of concurrent page requests (default: {DEFAULT_CONCURRENCY})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        path = run(args.repo_url, token=args.token, output=args.output, concurrency=args.concurrency)
    except ForkliftError as e:
        log.error("%s", e)
        sys.exit(1)

    print(f"Analysis completed. Results written to: {path}")


if __name__ == "__main__":
    main()
