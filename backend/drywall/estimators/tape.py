"""Joint tape estimation.

Flat joints are estimated from the board area. Inside corners use a
room heuristic: four vertical corners at ceiling height plus the
wall-to-ceiling joint around the perimeter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drywall.data.coverage import (
    TAPE_PER_SQFT,
    TAPE_ROLL_LARGE_FT,
    TAPE_ROLL_MEDIUM_FT,
    TAPE_ROLL_SMALL_FT,
)
from drywall.estimators.rounding import ceil_units
from drywall.models.estimate import TapeEstimate

if TYPE_CHECKING:
    from drywall.models.specs import TapeSpec

logger = logging.getLogger(__name__)


def estimate(spec: TapeSpec) -> TapeEstimate:
    """Estimate linear feet of tape and the rolls to buy.

    Rolls are packed largest first. A remainder over 75 ft is covered
    with 250-ft rolls; anything smaller gets a single 75-ft roll.
    """
    flat_feet = spec.area_sqft * TAPE_PER_SQFT

    corner_feet = 0.0
    if spec.include_corners:
        perimeter = 2 * (spec.length_ft + spec.width_ft)
        corner_feet = 4 * spec.ceiling_height_ft + perimeter

    linear_feet = ceil_units(flat_feet + corner_feet)

    rolls_500 = linear_feet // TAPE_ROLL_LARGE_FT
    remaining = linear_feet - rolls_500 * TAPE_ROLL_LARGE_FT
    rolls_250 = 0
    rolls_75 = 0
    if remaining > TAPE_ROLL_SMALL_FT:
        rolls_250 = ceil_units(remaining / TAPE_ROLL_MEDIUM_FT)
    elif remaining > 0:
        rolls_75 = 1

    logger.debug(
        "Tape estimate: %d ft -> %d x 500 + %d x 250 + %d x 75",
        linear_feet,
        rolls_500,
        rolls_250,
        rolls_75,
    )
    return TapeEstimate(
        area_sqft=spec.area_sqft,
        include_corners=spec.include_corners,
        flat_feet=flat_feet,
        corner_feet=corner_feet,
        linear_feet=linear_feet,
        rolls_500=rolls_500,
        rolls_250=rolls_250,
        rolls_75=rolls_75,
    )
