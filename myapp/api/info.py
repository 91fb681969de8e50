"""Root landing endpoint and live status."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, Response
from fastapi.responses import HTMLResponse

from myapp.api.deps import get_landing_template, get_settings, get_uptime_clock
from myapp.config import Settings
from myapp.landing import render_landing
from myapp.negotiation import HTML, negotiate, parse_accept
from myapp.status import UptimeClock, format_uptime, hostname, iso_timestamp

router = APIRouter(tags=["info"])

WELCOME_MESSAGE = "Hello from MyApp on EKS!"


@router.get("/")
def root(
    response: Response,
    accept: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    template: Optional[str] = Depends(get_landing_template),
):
    chosen = negotiate(parse_accept(accept), html_available=template is not None)
    if chosen == HTML and template is not None:
        page = render_landing(template, settings.environment, settings.version)
        return HTMLResponse(content=page, headers={"Vary": "Accept"})

    response.headers["Vary"] = "Accept"
    return {
        "message": WELCOME_MESSAGE,
        "version": settings.version,
        "environment": settings.environment,
        "secrets": settings.secrets_summary(),
    }


@router.get("/api/status")
def api_status(
    settings: Settings = Depends(get_settings),
    clock: UptimeClock = Depends(get_uptime_clock),
):
    return {
        "environment": settings.environment,
        "version": settings.version,
        "secrets": settings.secrets_summary(),
        "hostname": hostname(),
        "uptime": format_uptime(clock.elapsed()),
        "timestamp": iso_timestamp(),
    }
