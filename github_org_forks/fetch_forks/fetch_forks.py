"""Fetch every page of a repository's forks with bounded concurrency."""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from ..concurrency import PermitPool
from ..errors import ForkliftError, PageTaskError
from ..models import DEFAULT_CONCURRENCY, ForkPage, ForkRecord, PageRequest
from ..retry import fetch_with_retry

log = logging.getLogger(__name__)

# Worker threads are sized apart from the permit count; permits do the bounding
MAX_WORKERS = 32


def fetch_forks(
    fetch_page: Callable[[PageRequest], ForkPage],
    owner: str,
    repo: str,
    concurrency: int = DEFAULT_CONCURRENCY,
    on_progress: Callable[[int, int], None] | None = None,
) -> list[ForkRecord]:
    """Fetch all forks of owner/repo.

    Page 1 is fetched first, in the calling thread, to learn the page count
    from its Link header. Pages 2..N then run on a thread pool, each holding a
    permit for its whole (retried) fetch. Results are merged in completion
    order; the first page that fails aborts the run and nothing is returned.
    """
    permits = PermitPool(concurrency)

    log.debug("Fetching initial page to determine fork count")
    try:
        first = fetch_with_retry(fetch_page, PageRequest(owner, repo, 1))
    except ForkliftError as e:
        log.error("Failed to fetch page 1: %s", e)
        raise
    except Exception as e:
        log.error("Fetching page 1 crashed: %s", e)
        raise PageTaskError(1) from e
    forks = list(first.forks)

    total_pages = first.last_page
    if not total_pages or total_pages <= 1:
        log.info("Only one page of forks found")
        return forks

    log.info("Found %d pages of forks to fetch", total_pages)
    aborted = threading.Event()

    def fetch_one(page: int) -> list[ForkRecord]:
        with permits:
            if aborted.is_set():
                return []
            return fetch_with_retry(fetch_page, PageRequest(owner, repo, page)).forks

    workers = max(concurrency, min(total_pages - 1, MAX_WORKERS))
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fork-page")
    futures: dict[Future, int] = {}
    try:
        for page in range(2, total_pages + 1):
            futures[executor.submit(fetch_one, page)] = page

        done = 0
        for future in as_completed(futures):
            page = futures[future]
            try:
                items = future.result()
            except ForkliftError as e:
                log.error("Failed to fetch page %d: %s", page, e)
                raise
            except Exception as e:
                log.error("Task for page %d crashed: %s", page, e)
                raise PageTaskError(page) from e

            log.debug("Fetched %d forks from page %d", len(items), page)
            forks.extend(items)
            done += 1
            if on_progress:
                on_progress(done, len(futures))
    except BaseException:
        # Queued pages are dropped, pages waiting on a permit skip their fetch,
        # and pages already running finish on their own
        aborted.set()
        executor.shutdown(wait=False, cancel_futures=True)
        raise

    executor.shutdown(wait=True)
    return forks
