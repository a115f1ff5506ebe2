"""Factory functions for creating pre-configured DrywallEngine instances."""

from __future__ import annotations

from drywall.engine import DEFAULT_AREA_SQFT, DrywallEngine


def create_default_engine(default_area_sqft: float = DEFAULT_AREA_SQFT) -> DrywallEngine:
    """Create a DrywallEngine with the built-in rate tables.

    This is the recommended way to create an engine for typical usage.
    The default area (400 sq ft) is what the estimators fall back to when
    the host supplies no area and has no room estimate to carry over.

    Example::

        from drywall import create_default_engine

        engine = create_default_engine()
        estimate = engine.mud(coat_count=3)
    """
    return DrywallEngine(default_area_sqft=default_area_sqft)
