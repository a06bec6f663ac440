"""Backoff-retry for GitHub's secondary rate limit."""

import logging
import time
from collections.abc import Callable

from .errors import GitHubApiError
from .models import ForkPage, PageRequest

log = logging.getLogger(__name__)

# Retry k waits BACKOFF_BASE**k seconds: 2s, 4s, 8s
MAX_RETRIES = 3
BACKOFF_BASE = 2


def is_secondary_rate_limit(error: Exception) -> bool:
    """True for a 403 whose message mentions a rate limit.

    Other 403s (bad credentials, blocked repo) are not retryable.
    """
    return (
        isinstance(error, GitHubApiError)
        and error.status == 403
        and "rate limit" in error.message.lower()
    )


def fetch_with_retry(fetch_page: Callable[[PageRequest], ForkPage], request: PageRequest) -> ForkPage:
    """Fetch one page, retrying secondary rate limits up to MAX_RETRIES times.

    Any other error is raised immediately. The wait ignores Retry-After.
    """
    attempts = 0
    while True:
        try:
            page = fetch_page(request)
        except GitHubApiError as e:
            if not is_secondary_rate_limit(e) or attempts >= MAX_RETRIES:
                raise
            attempts += 1
            wait = BACKOFF_BASE**attempts
            log.warning(
                "Rate limit hit on page %d, retrying in %ds (attempt %d/%d)",
                request.page, wait, attempts, MAX_RETRIES,
            )
            time.sleep(wait)
            continue

        if attempts:
            log.debug("Fetched page %d after %d retries", request.page, attempts)
        return page
