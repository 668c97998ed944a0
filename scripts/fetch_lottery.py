"""Fetch one lottery record from its upstream sources and print it as JSON.

Usage:
  python scripts/fetch_lottery.py sa_powerball
  python scripts/fetch_lottery.py us_powerball --source fallback --timeout 5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from lottery_api.catalog import FALLBACK_URLS, PRIMARY_URLS
from lottery_api.config import get_config
from lottery_api.errors import AppError
from lottery_api.schemas.lottery_record import LotteryRecordSchema
from lottery_api.services.fetch_client import FetchClient, build_http_session
from lottery_api.services.lottery_service import LotteryService
from lottery_api.services.result_cache import ResultCache


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
	parser = argparse.ArgumentParser(description="Fetch a lottery record and print it as JSON")
	parser.add_argument("identifier", help="Lottery identifier, e.g. sa_powerball")
	parser.add_argument(
		"--source",
		choices=("auto", "primary", "fallback"),
		default="auto",
		help="Restrict to one upstream source (default: primary then fallback)",
	)
	parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=None)
	parser.add_argument("--verbose", action="store_true")
	args = parser.parse_args(argv)

	load_dotenv()
	config = get_config()
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
		format="%(asctime)s %(levelname)s %(message)s",
	)

	primary = PRIMARY_URLS if args.source in ("auto", "primary") else {}
	fallback = FALLBACK_URLS if args.source in ("auto", "fallback") else {}

	timeout = args.timeout_seconds if args.timeout_seconds is not None else config.FETCH_TIMEOUT_SECONDS
	service = LotteryService(
		cache=ResultCache(config.CACHE_MAX_AGE_SECONDS),
		fetch_client=FetchClient(
			session=build_http_session(config.FETCH_USER_AGENT),
			timeout_seconds=timeout,
			max_redirects=config.FETCH_MAX_REDIRECTS,
		),
		primary_urls=primary,
		fallback_urls=fallback,
	)

	try:
		record = service.get_record(args.identifier)
	except AppError as exc:
		logger.error("%s: %s", exc.code, exc.message)
		return 1 if exc.status_code == 404 else 2

	json.dump(LotteryRecordSchema().dump(record), sys.stdout, indent=2, ensure_ascii=False)
	sys.stdout.write("\n")
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
