"""Landing page template: loaded once at startup, rendered per request."""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ENVIRONMENT_MARKER = "{{ENVIRONMENT}}"
VERSION_MARKER = "{{VERSION}}"


def load_landing_template(path: Optional[Path]) -> Optional[str]:
    """Read the HTML template, or return None so `/` serves JSON only."""
    if path is None:
        logger.info("No landing template configured, HTML disabled")
        return None
    try:
        template = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Landing template unavailable at %s, HTML disabled: %s", path, exc)
        return None
    logger.info("Landing template loaded from %s", path)
    return template


def render_landing(template: str, environment: str, version: str) -> str:
    return template.replace(ENVIRONMENT_MARKER, html.escape(environment)).replace(
        VERSION_MARKER, html.escape(version)
    )
