"""Materials and labor cost ranges.

Every dollar figure is a low/high range. The low and high bounds are
computed independently from the low and high unit rates and are never
mixed. Sheets are always priced as 4x8 boards, whatever size is hung.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drywall.data.cost_rates import COST_RATES
from drywall.data.sheet_sizes import COST_BASIS_SHEET, get_sheet
from drywall.estimators.rounding import ceil_units
from drywall.exceptions import ZeroAreaError
from drywall.models.enums import ProjectType
from drywall.models.estimate import CostEstimate, CostRange

if TYPE_CHECKING:
    from drywall.models.specs import CostSpec

logger = logging.getLogger(__name__)

_NO_COST = CostRange(low=0.0, high=0.0)


def estimate(spec: CostSpec) -> CostEstimate:
    """Estimate the cost range for finishing ``spec.area_sqft`` of drywall.

    Raises:
        ZeroAreaError: If the area is zero, since the per-square-foot
            range is undefined.
    """
    area = spec.area_sqft
    if area == 0:
        msg = "Cannot compute a cost per square foot for zero area"
        raise ZeroAreaError(msg)

    sheet_count = ceil_units(area / get_sheet(COST_BASIS_SHEET).area_sqft)

    sheets_cost = COST_RATES.sheet.scale(sheet_count)
    mud_cost = COST_RATES.mud.scale(area)
    tape_cost = COST_RATES.tape.scale(area)
    screws_cost = COST_RATES.screws.scale(area)
    materials = sheets_cost + mud_cost + tape_cost + screws_cost

    if spec.project_type == ProjectType.DIY:
        labor = _NO_COST
    else:
        labor = COST_RATES.labor_rate(spec.finish_level).scale(area)

    total = materials + labor
    per_sqft = CostRange(low=total.low / area, high=total.high / area)

    logger.debug(
        "Cost estimate: %.1f sq ft %s -> $%.2f - $%.2f",
        area,
        spec.project_type,
        total.low,
        total.high,
    )
    return CostEstimate(
        area_sqft=area,
        project_type=spec.project_type,
        finish_level=spec.finish_level,
        sheet_count=sheet_count,
        sheets_cost=sheets_cost,
        mud_cost=mud_cost,
        tape_cost=tape_cost,
        screws_cost=screws_cost,
        materials=materials,
        labor=labor,
        total=total,
        per_sqft=per_sqft,
    )
