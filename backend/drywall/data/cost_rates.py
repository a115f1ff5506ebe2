"""Material and labor cost rates.

Rates are 2026 national averages for a DIY-store market range. Sheet
rates are per 4x8 sheet; every other rate is per square foot of finished
drywall.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from drywall.models.enums import FinishLevel
from drywall.models.estimate import CostRange


class CostRateTable(BaseModel):
    """Low/high unit rates for materials and the four labor tiers."""

    model_config = ConfigDict(frozen=True)

    sheet: CostRange
    mud: CostRange
    tape: CostRange
    screws: CostRange
    labor: dict[FinishLevel, CostRange]
    year: int

    def labor_rate(self, finish_level: FinishLevel) -> CostRange:
        """Labor rate for a tier, falling back to the standard tier."""
        return self.labor.get(finish_level, self.labor[FinishLevel.STANDARD])


COST_RATES = CostRateTable(
    sheet=CostRange(low=10.00, high=15.00),
    mud=CostRange(low=0.10, high=0.15),
    tape=CostRange(low=0.02, high=0.04),
    screws=CostRange(low=0.02, high=0.03),
    labor={
        FinishLevel.BASIC: CostRange(low=1.00, high=1.50),  # Level 0-2
        FinishLevel.STANDARD: CostRange(low=1.50, high=2.25),  # Level 3
        FinishLevel.SMOOTH: CostRange(low=2.00, high=2.75),  # Level 4
        FinishLevel.PREMIUM: CostRange(low=2.50, high=3.50),  # Level 5
    },
    year=2026,
)
