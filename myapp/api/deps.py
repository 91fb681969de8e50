"""Dependency helpers reading the objects built in `create_app`."""

from __future__ import annotations

from typing import Optional

from fastapi import Request

from myapp.config import Settings
from myapp.status import UptimeClock


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_landing_template(request: Request) -> Optional[str]:
    return request.app.state.landing_template


def get_uptime_clock(request: Request) -> UptimeClock:
    return request.app.state.uptime
