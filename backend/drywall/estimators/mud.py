"""Joint compound estimation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drywall.data.coverage import MUD_BUCKET_GALLONS, MUD_COVERAGE
from drywall.estimators.rounding import ceil_units, floor_units
from drywall.models.enums import MudType
from drywall.models.estimate import MudEstimate

if TYPE_CHECKING:
    from drywall.models.specs import MudSpec

logger = logging.getLogger(__name__)


def estimate(spec: MudSpec) -> MudEstimate:
    """Estimate gallons of compound and pack them into buckets.

    Full 5-gallon buckets are bought first; whatever is left over is
    rounded up to whole 1-gallon units.
    """
    coverage = MUD_COVERAGE.get(spec.mud_type, MUD_COVERAGE[MudType.ALL_PURPOSE])
    gallons_per_coat = spec.area_sqft * coverage
    total_gallons = gallons_per_coat * spec.coat_count

    five_gallon_buckets = floor_units(total_gallons / MUD_BUCKET_GALLONS)
    remaining = total_gallons - five_gallon_buckets * MUD_BUCKET_GALLONS
    one_gallon_buckets = ceil_units(remaining)

    logger.debug(
        "Mud estimate: %.1f gal %s over %d coats -> %d x 5 gal + %d x 1 gal",
        total_gallons,
        spec.mud_type,
        spec.coat_count,
        five_gallon_buckets,
        one_gallon_buckets,
    )
    return MudEstimate(
        area_sqft=spec.area_sqft,
        mud_type=spec.mud_type,
        coat_count=spec.coat_count,
        coverage_gal_per_sqft=coverage,
        gallons_per_coat=gallons_per_coat,
        total_gallons=total_gallons,
        five_gallon_buckets=five_gallon_buckets,
        one_gallon_buckets=one_gallon_buckets,
    )
