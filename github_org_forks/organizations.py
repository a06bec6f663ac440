"""Filter forks down to those owned by organizations."""

from collections.abc import Iterable

from .models import ORGANIZATION, ForkRecord, OrgFork


def org_forks(forks: Iterable[ForkRecord]) -> list[OrgFork]:
    """Keep organization-owned forks, flattened for the report.

    A fork without an html_url gets an empty URL.
    """
    return [
        OrgFork(org_login=fork.owner_login, fork_name=fork.name, fork_url=fork.html_url or "")
        for fork in forks
        if fork.owner_type == ORGANIZATION
    ]
