"""Environment-driven configuration for the FastAPI host."""

from __future__ import annotations

import logging
import math
import os

from drywall.engine import DrywallEngine
from drywall.exceptions import InvalidInputError
from drywall.factory import create_default_engine

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


def create_engine() -> DrywallEngine:
    """Create a DrywallEngine configured from the environment.

    Reads DRYWALL_DEFAULT_AREA_SQFT for the fallback area. Raises
    InvalidInputError if it is set but not a positive finite number.
    """
    raw = os.environ.get("DRYWALL_DEFAULT_AREA_SQFT", "").strip()
    if not raw:
        return create_default_engine()

    try:
        area = float(raw)
    except ValueError as exc:
        msg = f"DRYWALL_DEFAULT_AREA_SQFT must be a number, got {raw!r}"
        raise InvalidInputError(msg) from exc
    if not math.isfinite(area):
        msg = f"DRYWALL_DEFAULT_AREA_SQFT must be finite, got {raw!r}"
        raise InvalidInputError(msg)

    logger.info("Using default area of %g sq ft from environment", area)
    return create_default_engine(default_area_sqft=area)


def cors_origins() -> list[str]:
    """Allowed CORS origins from DRYWALL_CORS_ORIGINS (comma-separated)."""
    raw = os.environ.get("DRYWALL_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)
