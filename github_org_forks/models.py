"""Data models and constants for fork listing."""

from dataclasses import dataclass

PAGE_SIZE = 100  # GitHub REST API maximum per_page
DEFAULT_CONCURRENCY = 10
ORGANIZATION = "Organization"


@dataclass(frozen=True)
class PageRequest:
    """One page of the list-forks endpoint."""

    owner: str
    repo: str
    page: int
    per_page: int = PAGE_SIZE


@dataclass
class ForkRecord:
    """A fork as returned by the list-forks endpoint."""

    owner_login: str
    owner_type: str
    name: str
    html_url: str | None = None

    @classmethod
    def from_api(cls, item: dict) -> "ForkRecord":
        # Owner can be null for deleted/ghost accounts
        owner = item.get("owner") or {}
        return cls(
            owner_login=owner.get("login") or "",
            owner_type=owner.get("type") or "",
            name=item.get("name") or "",
            html_url=item.get("html_url"),
        )


@dataclass
class ForkPage:
    """Records of one page plus the last page number from the Link header."""

    forks: list[ForkRecord]
    last_page: int | None = None


@dataclass
class OrgFork:
    org_login: str
    fork_name: str
    fork_url: str
