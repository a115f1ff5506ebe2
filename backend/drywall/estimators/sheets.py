"""Area and sheet-count estimation for a single room.

1. **Gross areas**: walls are the room perimeter times the ceiling height,
   the ceiling is length times width. Either can be switched off.
2. **Openings**: doors and windows at average sizes plus any extra square
   footage, subtracted from the wall area only and clamped at zero.
3. **Waste**: the net total is grown by the waste percentage.
4. **Sheets**: whole sheets of the selected size. Walls and ceiling are
   also counted separately, each rounded up on its own, so the two can
   add up to more than the combined count.
5. **Previews**: rough mud, tape and screw quantities at three coats, for
   a materials list before the dedicated estimators are run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drywall.data.coverage import (
    DOOR_SQFT,
    MUD_COVERAGE,
    PREVIEW_COATS,
    SCREWS_PER_SQFT,
    TAPE_PER_SQFT,
    WINDOW_SQFT,
)
from drywall.data.sheet_sizes import get_sheet
from drywall.estimators.rounding import ceil_units
from drywall.models.enums import MudType
from drywall.models.estimate import SheetEstimate

if TYPE_CHECKING:
    from drywall.models.specs import RoomSpec

logger = logging.getLogger(__name__)


def estimate(spec: RoomSpec) -> SheetEstimate:
    """Estimate wall/ceiling area and the sheets needed to cover it."""
    wall_area = 0.0
    if spec.include_walls:
        perimeter = 2 * (spec.length_ft + spec.width_ft)
        wall_area = perimeter * spec.ceiling_height_ft

    ceiling_area = 0.0
    if spec.include_ceiling:
        ceiling_area = spec.length_ft * spec.width_ft

    opening_area = (
        spec.door_count * DOOR_SQFT
        + spec.window_count * WINDOW_SQFT
        + spec.other_opening_sqft
    )
    net_wall_area = max(0.0, wall_area - opening_area)
    total_area = net_wall_area + ceiling_area

    waste_multiplier = 1 + spec.waste_percent / 100
    total_with_waste = total_area * waste_multiplier

    sheet_area = get_sheet(spec.sheet_size).area_sqft
    sheets_needed = ceil_units(total_with_waste / sheet_area)
    wall_sheets = ceil_units(net_wall_area * waste_multiplier / sheet_area)
    ceiling_sheets = ceil_units(ceiling_area * waste_multiplier / sheet_area)

    result = SheetEstimate(
        gross_wall_area_sqft=wall_area,
        opening_area_sqft=opening_area,
        net_wall_area_sqft=net_wall_area,
        ceiling_area_sqft=ceiling_area,
        total_area_sqft=total_area,
        waste_percent=spec.waste_percent,
        total_with_waste_sqft=total_with_waste,
        sheet_size=spec.sheet_size,
        sheet_area_sqft=sheet_area,
        sheets_needed=sheets_needed,
        wall_sheets=wall_sheets,
        ceiling_sheets=ceiling_sheets,
        mud_gallons_preview=ceil_units(
            total_area * MUD_COVERAGE[MudType.ALL_PURPOSE] * PREVIEW_COATS
        ),
        tape_feet_preview=ceil_units(total_area * TAPE_PER_SQFT),
        screws_preview=ceil_units(total_area * SCREWS_PER_SQFT[spec.stud_spacing]),
    )
    logger.debug(
        "Sheet estimate: %.1f sq ft (+%d%% waste) -> %d x %s",
        total_area,
        spec.waste_percent,
        sheets_needed,
        spec.sheet_size,
    )
    return result
