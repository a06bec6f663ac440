"""Error types raised while listing forks."""


class ForkliftError(Exception):
    """Base class for every error that aborts a run."""


class MissingTokenError(ForkliftError):
    def __init__(self):
        super().__init__(
            "No GitHub token found. Set GITHUB_TOKEN in .env or the environment, "
            "or pass --token=<TOKEN>."
        )


class InvalidUrlError(ForkliftError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Failed to parse repository URL: {url}")


class InvalidDomainError(ForkliftError):
    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Expected a 'github.com' domain, but got: {domain!r}")


class InvalidPathError(ForkliftError):
    def __init__(self, segments: list[str]):
        self.segments = segments
        super().__init__(f"Expected the URL path format to be /OWNER/REPO, but got: {segments!r}")


class FetchError(ForkliftError):
    """A page of forks could not be fetched."""


class GitHubApiError(FetchError):
    """Failed request to the GitHub REST API.

    ``status`` is None when no response was received (connection/timeout errors).
    """

    def __init__(self, status: int | None, message: str):
        self.status = status
        self.message = message
        if status is None:
            super().__init__(f"GitHub API request failed: {message}")
        else:
            super().__init__(f"GitHub API error {status}: {message}")


class PageTaskError(FetchError):
    """A page task crashed with something other than an API error."""

    def __init__(self, page: int):
        self.page = page
        super().__init__(f"Task fetching page {page} failed unexpectedly")


class ReportWriteError(ForkliftError):
    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Failed to write report to {path}: {reason}")
