"""Lottery routes (controllers). No business logic here."""

from __future__ import annotations

import re

from flask import Blueprint, current_app

from lottery_api.errors import NotSupportedError
from lottery_api.schemas.lottery_record import CatalogEntrySchema, LotteryRecordSchema
from lottery_api.services.lottery_service import LotteryService
from lottery_api.utils.responses import ok


lottery_bp = Blueprint("lottery", __name__)

_record_schema = LotteryRecordSchema()
_catalog_schema = CatalogEntrySchema(many=True)

_IDENTIFIER = re.compile(r"^[a-z0-9_]{1,64}$")


def _service() -> LotteryService:
    return current_app.extensions["lottery_service"]


@lottery_bp.get("/lottery/<identifier>")
def get_lottery(identifier: str):
    if not _IDENTIFIER.match(identifier):
        raise NotSupportedError(details={"identifier": identifier})

    record = _service().get_record(identifier)
    return ok(
        _record_schema.dump(record),
        meta={"source": record.source, "synthetic": record.is_synthetic},
    )


@lottery_bp.get("/lotteries")
def list_lotteries():
    return ok(_catalog_schema.dump(_service().list_lotteries()))
