"""API-key authentication for the secured data endpoint."""

from __future__ import annotations

import hmac
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from myapp.api.deps import get_settings
from myapp.config import Settings

logger = logging.getLogger(__name__)

KEY_NOT_CONFIGURED = "API key not configured (External Secrets not synced)"
INVALID_KEY = "Unauthorized - invalid API key"


def verify_api_key(provided: Optional[str], expected: str) -> bool:
    """Compare keys in constant time once lengths agree.

    The length check short-circuits; only the key length can leak through it.
    """
    if provided is None:
        return False
    provided_bytes = provided.encode("utf-8")
    expected_bytes = expected.encode("utf-8")
    if len(provided_bytes) != len(expected_bytes):
        return False
    return hmac.compare_digest(provided_bytes, expected_bytes)


def require_api_key(
    x_api_key: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not settings.api_key_configured:
        logger.error("API_SECRET_KEY is not set; refusing secured request")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=KEY_NOT_CONFIGURED)
    if not verify_api_key(x_api_key, settings.api_secret_key):
        logger.warning("Rejected request with %s API key", "invalid" if x_api_key else "missing")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_KEY)
