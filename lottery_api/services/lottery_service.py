"""Fetch, extract and cache lottery records with primary/fallback sources."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Callable

from lottery_api.catalog import FALLBACK_URLS, PRIMARY_URLS, CatalogEntry, list_catalog
from lottery_api.errors import ExtractionError, FetchError, NotSupportedError, UnavailableError
from lottery_api.models import LotteryRecord
from lottery_api.services.extractor import FALLBACK_PROFILE, PRIMARY_PROFILE, LotteryExtractor, SourceProfile
from lottery_api.services.fetch_client import FetchClient
from lottery_api.services.result_cache import ResultCache

logger = logging.getLogger(__name__)


class LotteryService:
    """Lottery record use-cases.

    A request tries the primary source, then the fallback source. Transport,
    HTTP and extraction failures of a single source only move on to the next
    one; when both fail the caller gets ``UnavailableError``. Successful
    records are cached per identifier, and concurrent misses for the same
    identifier wait on one in-flight fetch instead of each hitting upstream.
    """

    def __init__(
        self,
        cache: ResultCache[LotteryRecord],
        fetch_client: FetchClient,
        extractor: LotteryExtractor | None = None,
        primary_urls: dict[str, str] | None = None,
        fallback_urls: dict[str, str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._cache = cache
        self._fetch = fetch_client
        self._extractor = extractor or LotteryExtractor()
        self._primary = PRIMARY_URLS if primary_urls is None else primary_urls
        self._fallback = FALLBACK_URLS if fallback_urls is None else fallback_urls
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self._locks_guard = Lock()
        self._locks: dict[str, Lock] = {}

    def list_lotteries(self) -> list[CatalogEntry]:
        return list_catalog(self._primary, self._fallback)

    def get_record(self, identifier: str) -> LotteryRecord:
        primary_url = self._primary.get(identifier)
        fallback_url = self._fallback.get(identifier)
        if not primary_url and not fallback_url:
            raise NotSupportedError(details={"identifier": identifier})

        cached = self._cache.get(identifier)
        if cached is not None:
            logger.debug("Cache hit for %s", identifier)
            return cached

        with self._lock_for(identifier):
            cached = self._cache.get(identifier)
            if cached is not None:
                return cached

            record = self._fetch_record(identifier, primary_url, fallback_url)
            self._cache.set(identifier, record)
            return record

    def _lock_for(self, identifier: str) -> Lock:
        with self._locks_guard:
            lock = self._locks.get(identifier)
            if lock is None:
                lock = self._locks[identifier] = Lock()
            return lock

    def _fetch_record(self, identifier: str, primary_url: str | None, fallback_url: str | None) -> LotteryRecord:
        for profile, url in ((PRIMARY_PROFILE, primary_url), (FALLBACK_PROFILE, fallback_url)):
            if not url:
                logger.info("No %s source configured for %s", profile.name, identifier)
                continue

            record = self._attempt(identifier, url, profile)
            if record is not None:
                logger.info("Fetched %s from %s source", identifier, profile.name)
                return record

        raise UnavailableError(details={"identifier": identifier})

    def _attempt(self, identifier: str, url: str, profile: SourceProfile) -> LotteryRecord | None:
        try:
            html = self._fetch.fetch(url)
            return self._extractor.extract(html, identifier, profile, now=self._clock())
        except (FetchError, ExtractionError) as exc:
            logger.warning("%s source failed for %s: %s", profile.name.capitalize(), identifier, exc)
            return None
