"""Drywall screw estimation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drywall.data.coverage import POUNDS_PER_BOX, SCREWS_PER_POUND, SCREWS_PER_SQFT
from drywall.data.sheet_sizes import COST_BASIS_SHEET, get_sheet
from drywall.estimators.rounding import ceil_units
from drywall.models.estimate import ScrewEstimate

if TYPE_CHECKING:
    from drywall.models.specs import ScrewSpec

logger = logging.getLogger(__name__)


def estimate(spec: ScrewSpec) -> ScrewEstimate:
    """Estimate screw count, weight and 5-lb boxes for an area."""
    rate = SCREWS_PER_SQFT[spec.stud_spacing]
    total_screws = ceil_units(spec.area_sqft * rate)
    pounds = ceil_units(total_screws / SCREWS_PER_POUND)
    boxes = ceil_units(pounds / POUNDS_PER_BOX)

    logger.debug(
        "Screw estimate: %d screws at %s\" OC -> %d lb, %d box(es)",
        total_screws,
        spec.stud_spacing,
        pounds,
        boxes,
    )
    return ScrewEstimate(
        area_sqft=spec.area_sqft,
        stud_spacing=spec.stud_spacing,
        screws_per_sqft=rate,
        total_screws=total_screws,
        pounds=pounds,
        boxes=boxes,
        screws_per_sheet=round(get_sheet(COST_BASIS_SHEET).area_sqft * rate),
    )
