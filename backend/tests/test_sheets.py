"""Tests for the area and sheet-count estimator."""

from __future__ import annotations

import pytest

from drywall.estimators import sheets
from drywall.models.enums import SheetSize, StudSpacing
from drywall.models.specs import RoomSpec


def _room(**overrides: object) -> RoomSpec:
    """12x10x8 room with two doors and a window, walls and ceiling, 4x8, 10% waste."""
    defaults: dict[str, object] = {
        "length_ft": 12.0,
        "width_ft": 10.0,
        "ceiling_height_ft": 8.0,
        "include_walls": True,
        "include_ceiling": True,
        "door_count": 2,
        "window_count": 1,
        "other_opening_sqft": 0.0,
        "sheet_size": SheetSize.FOUR_BY_EIGHT,
        "waste_percent": 10,
    }
    defaults.update(overrides)
    return RoomSpec(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Reference room
# ---------------------------------------------------------------------------


class TestReferenceRoom:
    def test_areas(self) -> None:
        result = sheets.estimate(_room())
        assert result.gross_wall_area_sqft == pytest.approx(352.0)
        assert result.opening_area_sqft == pytest.approx(57.0)
        assert result.net_wall_area_sqft == pytest.approx(295.0)
        assert result.ceiling_area_sqft == pytest.approx(120.0)
        assert result.total_area_sqft == pytest.approx(415.0)
        assert result.total_with_waste_sqft == pytest.approx(456.5)
        assert result.waste_area_sqft == pytest.approx(41.5)

    def test_sheets_needed(self) -> None:
        result = sheets.estimate(_room())
        assert result.sheet_area_sqft == 32.0
        assert result.sheets_needed == 15

    def test_surface_sheets_round_up_independently(self) -> None:
        """Walls (324.5 sq ft) and ceiling (132 sq ft) each round up on their own."""
        result = sheets.estimate(_room())
        assert result.wall_sheets == 11
        assert result.ceiling_sheets == 5
        assert result.wall_sheets + result.ceiling_sheets > result.sheets_needed

    def test_material_previews(self) -> None:
        result = sheets.estimate(_room())
        # 415 * 0.05 * 3 = 62.25
        assert result.mud_gallons_preview == 63
        # 415 * 0.3 = 124.5
        assert result.tape_feet_preview == 125
        assert result.screws_preview == 415

    def test_screw_preview_follows_stud_spacing(self) -> None:
        result = sheets.estimate(_room(stud_spacing=StudSpacing.OC_24))
        # 415 * 0.75 = 311.25
        assert result.screws_preview == 312


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_larger_sheet_needs_fewer_sheets(self) -> None:
        result = sheets.estimate(_room(sheet_size=SheetSize.FOUR_BY_TWELVE))
        assert result.sheet_area_sqft == 48.0
        assert result.sheets_needed == 10

    def test_no_waste(self) -> None:
        result = sheets.estimate(_room(waste_percent=0))
        assert result.total_with_waste_sqft == pytest.approx(415.0)
        assert result.sheets_needed == 13

    def test_walls_only(self) -> None:
        result = sheets.estimate(_room(include_ceiling=False))
        assert result.ceiling_area_sqft == 0.0
        assert result.total_area_sqft == pytest.approx(295.0)
        assert result.ceiling_sheets == 0
        assert result.sheets_needed == 11

    def test_ceiling_only_ignores_openings(self) -> None:
        result = sheets.estimate(_room(include_walls=False))
        assert result.gross_wall_area_sqft == 0.0
        assert result.net_wall_area_sqft == 0.0
        assert result.total_area_sqft == pytest.approx(120.0)
        assert result.sheets_needed == 5

    def test_other_openings_subtracted(self) -> None:
        result = sheets.estimate(_room(other_opening_sqft=20.0))
        assert result.opening_area_sqft == pytest.approx(77.0)
        assert result.net_wall_area_sqft == pytest.approx(275.0)


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEdgeCases:
    def test_openings_larger_than_walls_clamp_to_zero(self) -> None:
        result = sheets.estimate(
            _room(length_ft=2.0, width_ft=2.0, ceiling_height_ft=2.0, door_count=1, window_count=0)
        )
        assert result.gross_wall_area_sqft == pytest.approx(16.0)
        assert result.net_wall_area_sqft == 0.0
        assert result.total_area_sqft == pytest.approx(4.0)

    def test_nothing_included_is_zero_sheets(self) -> None:
        result = sheets.estimate(_room(include_walls=False, include_ceiling=False))
        assert result.total_area_sqft == 0.0
        assert result.total_with_waste_sqft == 0.0
        assert result.sheets_needed == 0
        assert result.wall_sheets == 0
        assert result.ceiling_sheets == 0
        assert result.mud_gallons_preview == 0

    def test_tiny_area_still_buys_one_sheet(self) -> None:
        result = sheets.estimate(
            _room(length_ft=1.0, width_ft=1.0, include_walls=False)
        )
        assert result.sheets_needed == 1

    def test_float_noise_does_not_add_a_sheet(self) -> None:
        """320 sq ft * 1.1 is 352.00000000000006 in floating point: still 11 sheets."""
        result = sheets.estimate(
            _room(length_ft=16.0, width_ft=20.0, include_walls=False)
        )
        assert result.sheets_needed == 11


# ---------------------------------------------------------------------------
# Monotonicity
# ---------------------------------------------------------------------------


class TestMonotonicity:
    def test_sheets_non_decreasing_in_waste(self) -> None:
        counts = [sheets.estimate(_room(waste_percent=w)).sheets_needed for w in range(0, 101)]
        assert counts == sorted(counts)

    @pytest.mark.parametrize("dimension", ["length_ft", "width_ft", "ceiling_height_ft"])
    def test_sheets_non_decreasing_in_dimensions(self, dimension: str) -> None:
        counts = [
            sheets.estimate(_room(**{dimension: step / 2})).sheets_needed
            for step in range(0, 80)
        ]
        assert counts == sorted(counts)

    def test_net_wall_area_never_negative(self) -> None:
        for doors in range(0, 40):
            result = sheets.estimate(_room(door_count=doors))
            assert result.net_wall_area_sqft >= 0.0
