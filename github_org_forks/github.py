"""GitHub REST client for the list-forks endpoint using httpx."""

import httpx

from .errors import GitHubApiError
from .models import ForkPage, ForkRecord, PageRequest

API_BASE = "https://api.github.com"


class ForksClient:
    """Fetches single pages of a repository's forks.

    No retry or throttling happens here; every call is exactly one request.
    """

    def __init__(self, token: str, api_url: str = API_BASE, transport: httpx.BaseTransport | None = None):
        self._api_url = api_url.rstrip("/")
        self._client = httpx.Client(
            headers={
                "Authorization": f"bearer {token}",
                "Accept": "application/vnd.github+json",
            },
            timeout=30.0,
            transport=transport,
        )

    def fetch_page(self, request: PageRequest) -> ForkPage:
        url = f"{self._api_url}/repos/{request.owner}/{request.repo}/forks"
        params = {"per_page": request.per_page, "page": request.page}
        try:
            resp = self._client.get(url, params=params)
        except httpx.RequestError as e:
            raise GitHubApiError(None, f"{type(e).__name__}: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise GitHubApiError(resp.status_code, _error_message(resp))

        try:
            body = resp.json() if resp.content else []
        except ValueError as e:
            raise GitHubApiError(resp.status_code, f"Invalid JSON in response: {e}") from e
        if not isinstance(body, list):
            raise GitHubApiError(resp.status_code, f"Expected a list of forks, got {type(body).__name__}")

        return ForkPage(
            forks=[ForkRecord.from_api(item) for item in body],
            last_page=_parse_last_page(resp),
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _error_message(resp: httpx.Response) -> str:
    """Pull GitHub's "message" field out of an error body, falling back to raw text."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.text


def _parse_last_page(resp: httpx.Response) -> int | None:
    last = resp.links.get("last")
    if not last or "url" not in last:
        return None
    page = httpx.URL(last["url"]).params.get("page")
    try:
        return int(page) if page is not None else None
    except ValueError:
        return None
