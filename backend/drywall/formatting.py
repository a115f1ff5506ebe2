"""Formatting helpers for drywall estimate output.

Estimators return exact numbers; everything here rounds for display
only. Strings follow how a supply-store counter reads a materials list
(e.g. '12× 5-gallon buckets + 1× 1-gallon').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from drywall.models.enums import MudType

if TYPE_CHECKING:
    from drywall.models.enums import SheetSize
    from drywall.models.estimate import (
        CostEstimate,
        CostRange,
        MudEstimate,
        ScrewEstimate,
        SheetEstimate,
        TapeEstimate,
    )

MUD_TYPE_LABELS: dict[MudType, str] = {
    MudType.ALL_PURPOSE: "All-Purpose",
    MudType.TOPPING: "Topping Compound",
    MudType.SETTING: "Setting Compound",
}

MUD_TIPS: dict[MudType, list[str]] = {
    MudType.ALL_PURPOSE: [
        "Let each coat dry completely (24 hours) before applying the next",
        "Apply thinner coats for better results; thick coats crack",
        "Sand lightly between coats with 120-150 grit sandpaper",
    ],
    MudType.TOPPING: [
        "Topping compound is for final coats only; don't use it for taping",
        "Applies smoothly and sands easily for a professional finish",
        "Use over all-purpose or setting compound base coats",
    ],
    MudType.SETTING: [
        "Setting compound dries faster; mix only what you can use in 20-45 minutes",
        "Great for embedding tape and filling large gaps",
        "Follow up with all-purpose or topping for final coats",
    ],
}


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def format_currency(amount: float) -> str:
    """Format a dollar amount to whole dollars, e.g. '$1,234'."""
    return f"${amount:,.0f}"


def format_cost_range(cr: CostRange) -> str:
    """Format a CostRange as '$low - $high' in whole dollars."""
    return f"{format_currency(cr.low)} - {format_currency(cr.high)}"


def format_per_sqft_range(cr: CostRange) -> str:
    """Format a per-square-foot CostRange as '$x.xx - $y.yy per sq ft'."""
    return f"${cr.low:.2f} - ${cr.high:.2f} per sq ft"


def format_sheet_size(size: SheetSize) -> str:
    """Label a sheet size for display, e.g. "4'×8' sheets"."""
    dimensions = size.value.replace("x", "'×")
    return f"{dimensions}' sheets"


def format_mud_purchase(estimate: MudEstimate) -> str:
    """List the buckets to buy, falling back to a single 5-gallon bucket."""
    parts: list[str] = []
    if estimate.five_gallon_buckets > 0:
        noun = _plural(estimate.five_gallon_buckets, "bucket", "buckets")
        parts.append(f"{estimate.five_gallon_buckets}× 5-gallon {noun}")
    if estimate.one_gallon_buckets > 0:
        parts.append(f"{estimate.one_gallon_buckets}× 1-gallon")
    return " + ".join(parts) or "1× 5-gallon bucket"


def format_roll_purchase(estimate: TapeEstimate) -> str:
    """List the tape rolls to buy, falling back to a single 75-ft roll."""
    parts: list[str] = []
    if estimate.rolls_500 > 0:
        noun = _plural(estimate.rolls_500, "roll", "rolls")
        parts.append(f"{estimate.rolls_500}× 500-ft {noun}")
    if estimate.rolls_250 > 0:
        noun = _plural(estimate.rolls_250, "roll", "rolls")
        parts.append(f"{estimate.rolls_250}× 250-ft {noun}")
    if estimate.rolls_75 > 0:
        parts.append("1× 75-ft roll")
    return " + ".join(parts) or "1× 75-ft roll"


def format_screw_boxes(estimate: ScrewEstimate) -> str:
    """Format the 5-lb box count, e.g. '2× 5-lb boxes'."""
    return f"{estimate.boxes}× 5-lb {_plural(estimate.boxes, 'box', 'boxes')}"


def mud_type_label(mud_type: MudType) -> str:
    return MUD_TYPE_LABELS[mud_type]


def mud_tips(mud_type: MudType) -> list[str]:
    return list(MUD_TIPS[mud_type])


def area_breakdown_percentages(estimate: SheetEstimate) -> tuple[int, int, int]:
    """Split the wasted total into (walls, ceiling, waste) whole percents.

    Areas are rounded to whole square feet first and waste takes the
    remainder so the three always add up to 100. An empty room is
    (0, 0, 0).
    """
    wall_area = round(estimate.net_wall_area_sqft)
    ceiling_area = round(estimate.ceiling_area_sqft)
    waste_area = round(estimate.total_area_sqft * estimate.waste_percent / 100)
    total = wall_area + ceiling_area + waste_area
    if total <= 0:
        return 0, 0, 0
    wall_pct = round(wall_area / total * 100)
    ceiling_pct = round(ceiling_area / total * 100)
    return wall_pct, ceiling_pct, 100 - wall_pct - ceiling_pct


def cost_split_percentages(estimate: CostEstimate) -> tuple[int, int]:
    """Split the midpoint total into (materials, labor) whole percents."""
    materials_avg = estimate.materials.midpoint
    total_avg = materials_avg + estimate.labor.midpoint
    if total_avg <= 0:
        return 0, 0
    materials_pct = round(materials_avg / total_avg * 100)
    return materials_pct, 100 - materials_pct


def cost_interpretation(estimate: CostEstimate) -> str:
    """One-sentence plain-English reading of a cost estimate."""
    area = f"{estimate.area_sqft:g} sq ft"
    total = f"{format_currency(estimate.total.low)}-{format_currency(estimate.total.high)}"
    if estimate.is_diy:
        return (
            f"For {area} of drywall (DIY materials only), expect to spend {total}. "
            "This covers sheets, joint compound, tape, and screws. "
            "Add $50-100 for delivery if needed."
        )
    _, labor_pct = cost_split_percentages(estimate)
    return (
        f"Professional installation of {area} costs {total}. "
        f"Labor accounts for {labor_pct}% of the total. "
        f"DIY could save you approximately {format_currency(estimate.labor.low)}+ "
        "in labor costs."
    )
