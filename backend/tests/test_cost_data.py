"""Tests for the constant rate and catalog tables."""

from __future__ import annotations

import pytest

from drywall.data import COST_RATES, SHEET_CATALOG, CostRateTable, get_sheet
from drywall.data.coverage import MUD_COVERAGE, SCREWS_PER_SQFT
from drywall.models.enums import FinishLevel, MudType, SheetSize, StudSpacing
from drywall.models.estimate import CostRange

# ---------------------------------------------------------------------------
# Sheet catalog
# ---------------------------------------------------------------------------


class TestSheetCatalog:
    def test_every_size_listed(self) -> None:
        assert set(SHEET_CATALOG) == set(SheetSize)

    @pytest.mark.parametrize(
        ("size", "area"),
        [
            (SheetSize.FOUR_BY_EIGHT, 32.0),
            (SheetSize.FOUR_BY_TEN, 40.0),
            (SheetSize.FOUR_BY_TWELVE, 48.0),
        ],
    )
    def test_area_is_width_times_height(self, size: SheetSize, area: float) -> None:
        entry = get_sheet(size)
        assert entry.area_sqft == area
        assert entry.width_ft * entry.height_ft == area

    def test_area_serialized(self) -> None:
        dumped = get_sheet(SheetSize.FOUR_BY_EIGHT).model_dump()
        assert dumped == {"width_ft": 4, "height_ft": 8, "area_sqft": 32}


# ---------------------------------------------------------------------------
# Coverage tables
# ---------------------------------------------------------------------------


class TestCoverageTables:
    def test_every_mud_type_has_coverage(self) -> None:
        assert set(MUD_COVERAGE) == set(MudType)
        assert MUD_COVERAGE[MudType.ALL_PURPOSE] == 0.05
        assert MUD_COVERAGE[MudType.TOPPING] == 0.03
        assert MUD_COVERAGE[MudType.SETTING] == 0.04

    def test_every_stud_spacing_has_a_rate(self) -> None:
        assert set(SCREWS_PER_SQFT) == set(StudSpacing)
        assert SCREWS_PER_SQFT[StudSpacing.OC_16] == 1.0
        assert SCREWS_PER_SQFT[StudSpacing.OC_24] == 0.75


# ---------------------------------------------------------------------------
# Cost rates
# ---------------------------------------------------------------------------


class TestCostRates:
    def test_every_finish_level_has_a_labor_rate(self) -> None:
        assert set(COST_RATES.labor) == set(FinishLevel)

    def test_labor_rates_rise_with_finish_level(self) -> None:
        tiers = [FinishLevel.BASIC, FinishLevel.STANDARD, FinishLevel.SMOOTH, FinishLevel.PREMIUM]
        lows = [COST_RATES.labor_rate(t).low for t in tiers]
        highs = [COST_RATES.labor_rate(t).high for t in tiers]
        assert lows == sorted(lows)
        assert highs == sorted(highs)

    def test_material_rates(self) -> None:
        assert COST_RATES.sheet == CostRange(low=10.0, high=15.0)
        assert COST_RATES.mud == CostRange(low=0.10, high=0.15)
        assert COST_RATES.tape == CostRange(low=0.02, high=0.04)
        assert COST_RATES.screws == CostRange(low=0.02, high=0.03)

    def test_missing_tier_falls_back_to_standard(self) -> None:
        table = CostRateTable(
            sheet=COST_RATES.sheet,
            mud=COST_RATES.mud,
            tape=COST_RATES.tape,
            screws=COST_RATES.screws,
            labor={FinishLevel.STANDARD: CostRange(low=1.5, high=2.25)},
            year=2026,
        )
        assert table.labor_rate(FinishLevel.PREMIUM) == CostRange(low=1.5, high=2.25)
