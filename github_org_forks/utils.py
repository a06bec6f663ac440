"""Repository URL parsing and Markdown helpers."""

from urllib.parse import urlsplit

from .errors import InvalidDomainError, InvalidPathError, InvalidUrlError

GITHUB_DOMAIN = "github.com"


def parse_repo_url(raw_url: str) -> tuple[str, str]:
    """Parse a repository URL into (owner, repo).

    Accepts https://github.com/OWNER/REPO, http://github.com/OWNER/REPO and
    github.com/OWNER/REPO. Path segments after the repo name are ignored.
    """
    url = raw_url.strip()
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"

    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError as e:
        raise InvalidUrlError(raw_url) from e

    if not hostname:
        raise InvalidUrlError(raw_url)
    if hostname != GITHUB_DOMAIN:
        raise InvalidDomainError(hostname)

    segments = [s for s in parts.path.split("/") if s]
    if len(segments) < 2:
        raise InvalidPathError(segments)

    return segments[0], segments[1]


def escape_table_cell(value: str) -> str:
    """Escape a value for use inside a Markdown table cell."""
    return value.replace("|", "\\|").replace("\r", " ").replace("\n", " ")
