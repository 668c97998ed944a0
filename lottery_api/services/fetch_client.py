"""Raw HTML retrieval from upstream result sites."""

from __future__ import annotations

import logging
import time
from typing import Callable
from urllib.parse import urljoin, urlparse

import requests

from lottery_api.config import DEFAULT_USER_AGENT
from lottery_api.errors import FetchTimeout, HttpStatusError, TooManyRedirects, TransportError

logger = logging.getLogger(__name__)


REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})
CHUNK_SIZE = 16 * 1024


def build_http_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create a requests session that identifies itself as a desktop browser."""

    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.8",
        }
    )
    return session


class FetchClient:
    """GET a document over HTTPS, following redirects by hand.

    One call is one attempt: no retries here, the caller decides what to do
    on failure. The timeout is a budget for the whole redirect chain,
    including reading the final body.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout_seconds: float = 8.0,
        max_redirects: int = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._session = session or build_http_session()
        self._timeout = timeout_seconds
        self._max_redirects = max_redirects
        self._clock = clock

    def fetch(self, url: str, timeout: float | None = None) -> str:
        budget = self._timeout if timeout is None else timeout
        deadline = self._clock() + budget
        current = url

        for hop in range(self._max_redirects + 1):
            try:
                scheme = urlparse(current).scheme
            except ValueError as exc:
                raise TransportError(current, "Invalid URL") from exc
            if scheme != "https":
                raise TransportError(current, "Refusing non-HTTPS URL")

            remaining = deadline - self._clock()
            if remaining <= 0:
                raise FetchTimeout(current, f"Timed out after {budget:.1f}s")

            try:
                resp = self._session.get(current, timeout=remaining, allow_redirects=False, stream=True)
            except requests.Timeout as exc:
                raise FetchTimeout(current, f"Timed out after {budget:.1f}s") from exc
            except requests.RequestException as exc:
                raise TransportError(current, f"Request failed: {exc}") from exc

            status = int(resp.status_code)
            if status in REDIRECT_STATUSES:
                location = resp.headers.get("Location")
                resp.close()
                if not location:
                    raise HttpStatusError(current, status)
                logger.debug("Redirect %s -> %s (hop %s)", current, location, hop + 1)
                try:
                    current = urljoin(current, location)
                except ValueError as exc:
                    raise TransportError(current, "Invalid redirect location") from exc
                continue

            if status < 200 or status >= 300:
                resp.close()
                raise HttpStatusError(current, status)

            return self._read_body(resp, current, deadline, budget)

        raise TooManyRedirects(url, f"More than {self._max_redirects} redirects")

    def _read_body(self, resp: requests.Response, url: str, deadline: float, budget: float) -> str:
        # The deadline bounds the whole body read, not each socket read.
        chunks: list[bytes] = []
        try:
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                chunks.append(chunk)
                if self._clock() > deadline:
                    raise FetchTimeout(url, f"Timed out after {budget:.1f}s")
        except requests.Timeout as exc:
            raise FetchTimeout(url, f"Timed out after {budget:.1f}s") from exc
        except requests.RequestException as exc:
            raise TransportError(url, f"Reading body failed: {exc}") from exc
        finally:
            resp.close()

        body = b"".join(chunks)
        try:
            return body.decode(resp.encoding or "utf-8", errors="replace")
        except LookupError:
            return body.decode("utf-8", errors="replace")
