"""Estimate output models for the drywall estimators."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from drywall.models.enums import (
    Confidence,
    FinishLevel,
    MudType,
    ProjectType,
    SheetSize,
    StudSpacing,
)


class CostRange(BaseModel):
    """A low/high pair, used for both unit rates and dollar totals.

    Bounds are carried separately through every calculation and never
    cross-mixed.
    """

    model_config = ConfigDict(frozen=True)

    low: float
    high: float

    @model_validator(mode="after")
    def low_le_high(self) -> CostRange:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} <= {self.high}"
            raise ValueError(msg)
        return self

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    def __add__(self, other: CostRange) -> CostRange:
        return CostRange(low=self.low + other.low, high=self.high + other.high)

    def scale(self, factor: float) -> CostRange:
        """Multiply both bounds by a non-negative quantity."""
        return CostRange(low=self.low * factor, high=self.high * factor)

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return f"{format(self.low, format_spec)} - {format(self.high, format_spec)}"
        return f"{self.low:,.2f} - {self.high:,.2f}"


class SheetEstimate(BaseModel):
    """Area and sheet counts for a room, plus rough material previews."""

    model_config = ConfigDict(frozen=True)

    gross_wall_area_sqft: float
    opening_area_sqft: float
    net_wall_area_sqft: float
    ceiling_area_sqft: float
    total_area_sqft: float
    waste_percent: int
    total_with_waste_sqft: float
    sheet_size: SheetSize
    sheet_area_sqft: float
    sheets_needed: int
    wall_sheets: int
    ceiling_sheets: int

    # Previews at three coats of all-purpose mud
    mud_gallons_preview: int
    tape_feet_preview: int
    screws_preview: int

    @property
    def waste_area_sqft(self) -> float:
        return self.total_with_waste_sqft - self.total_area_sqft


class CostEstimate(BaseModel):
    """Materials and labor cost ranges for a drywall job."""

    model_config = ConfigDict(frozen=True)

    area_sqft: float
    project_type: ProjectType
    finish_level: FinishLevel
    sheet_count: int
    sheets_cost: CostRange
    mud_cost: CostRange
    tape_cost: CostRange
    screws_cost: CostRange
    materials: CostRange
    labor: CostRange
    total: CostRange
    per_sqft: CostRange

    @property
    def is_diy(self) -> bool:
        return self.project_type == ProjectType.DIY


class MudEstimate(BaseModel):
    """Joint compound volume and the buckets to buy."""

    model_config = ConfigDict(frozen=True)

    area_sqft: float
    mud_type: MudType
    coat_count: int
    coverage_gal_per_sqft: float
    gallons_per_coat: float
    total_gallons: float
    five_gallon_buckets: int
    one_gallon_buckets: int


class ScrewEstimate(BaseModel):
    """Drywall screw count and the boxes to buy."""

    model_config = ConfigDict(frozen=True)

    area_sqft: float
    stud_spacing: StudSpacing
    screws_per_sqft: float
    total_screws: int
    pounds: int
    boxes: int
    screws_per_sheet: int


class TapeEstimate(BaseModel):
    """Joint tape footage and the rolls to buy."""

    model_config = ConfigDict(frozen=True)

    area_sqft: float
    include_corners: bool
    flat_feet: float
    corner_feet: float
    linear_feet: int
    rolls_500: int
    rolls_250: int
    rolls_75: int


class Assumption(BaseModel):
    """A documented assumption made while estimating a project."""

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class ProjectEstimate(BaseModel):
    """All five estimates for a single room."""

    sheets: SheetEstimate
    cost: CostEstimate
    mud: MudEstimate
    screws: ScrewEstimate
    tape: TapeEstimate
    area_sqft: float
    assumptions: list[Assumption] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict of display strings for a frontend."""
        from drywall.formatting import (
            area_breakdown_percentages,
            cost_interpretation,
            cost_split_percentages,
            format_cost_range,
            format_mud_purchase,
            format_per_sqft_range,
            format_roll_purchase,
            format_screw_boxes,
            format_sheet_size,
            mud_tips,
            mud_type_label,
        )

        walls_pct, ceiling_pct, waste_pct = area_breakdown_percentages(self.sheets)
        materials_pct, labor_pct = cost_split_percentages(self.cost)

        return {
            "total_sheets": self.sheets.sheets_needed,
            "sheet_size_label": format_sheet_size(self.sheets.sheet_size),
            "wall_area_formatted": f"{round(self.sheets.net_wall_area_sqft)} sq ft",
            "ceiling_area_formatted": f"{round(self.sheets.ceiling_area_sqft)} sq ft",
            "total_area_formatted": f"{round(self.sheets.total_area_sqft)} sq ft",
            "waste_note": f"+{self.sheets.waste_percent}% waste",
            "area_breakdown_percent": {
                "walls": walls_pct,
                "ceiling": ceiling_pct,
                "waste": waste_pct,
            },
            "total_cost_formatted": format_cost_range(self.cost.total),
            "per_sqft_formatted": format_per_sqft_range(self.cost.per_sqft),
            "materials_formatted": format_cost_range(self.cost.materials),
            "labor_formatted": "$0" if self.cost.is_diy else format_cost_range(self.cost.labor),
            "cost_split_percent": {"materials": materials_pct, "labor": labor_pct},
            "cost_interpretation": cost_interpretation(self.cost),
            "mud_type_label": mud_type_label(self.mud.mud_type),
            "mud_total_formatted": f"{self.mud.total_gallons:.1f} gallons",
            "mud_purchase": format_mud_purchase(self.mud),
            "mud_tips": mud_tips(self.mud.mud_type),
            "screws_total_formatted": f"{self.screws.total_screws:,}",
            "screws_purchase": format_screw_boxes(self.screws),
            "tape_total_formatted": f"{self.tape.linear_feet} linear feet",
            "tape_purchase": format_roll_purchase(self.tape),
            "num_assumptions": len(self.assumptions),
            "generated_at_formatted": self.generated_at.strftime("%Y-%m-%d %H:%M"),
        }
