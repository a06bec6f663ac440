"""List organization-owned forks of a GitHub repository.

Pages of the list-forks endpoint are fetched concurrently under a permit
limit, with backoff-retry on GitHub's secondary rate limit.
"""

from .cli import main
from .fetch_forks import fetch_forks
from .github import ForksClient
from .organizations import org_forks

__all__ = ["main", "fetch_forks", "ForksClient", "org_forks"]

if __name__ == "__main__":
    main()
