"""Coverage rates, average opening sizes and package sizes.

These are rules of thumb used by drywall suppliers for rough takeoffs,
not precise derivations.
"""

from __future__ import annotations

from drywall.models.enums import MudType, StudSpacing

# Average opening sizes subtracted from wall area (sq ft)
DOOR_SQFT = 21.0
WINDOW_SQFT = 15.0

# Joint compound, gallons per sq ft per coat
MUD_COVERAGE: dict[MudType, float] = {
    MudType.ALL_PURPOSE: 0.05,
    MudType.TOPPING: 0.03,
    MudType.SETTING: 0.04,
}
PREVIEW_COATS = 3

# Screws per sq ft by stud spacing
SCREWS_PER_SQFT: dict[StudSpacing, float] = {
    StudSpacing.OC_16: 1.0,
    StudSpacing.OC_24: 0.75,
}
SCREWS_PER_POUND = 200  # 1-5/8" coarse-thread drywall screws
POUNDS_PER_BOX = 5

# Joint tape, linear feet per sq ft of board
TAPE_PER_SQFT = 0.3

# Package sizes
MUD_BUCKET_GALLONS = 5
TAPE_ROLL_LARGE_FT = 500
TAPE_ROLL_MEDIUM_FT = 250
TAPE_ROLL_SMALL_FT = 75
