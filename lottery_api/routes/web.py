"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, current_app, render_template, request


web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    lotteries = current_app.extensions["lottery_service"].list_lotteries()
    example = lotteries[0].identifier if lotteries else "sa_lotto"
    return render_template("index.html", lotteries=lotteries, base_url=request.host_url.rstrip("/"), example=example)
